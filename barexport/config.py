"""
Exporter Configuration
Uses Pydantic Settings with .env loading.
"""

import logging
from datetime import datetime, timezone
from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from barexport.core.types import as_utc


class ExportSettings(BaseSettings):
    """Run options for one export."""
    model_config = SettingsConfigDict(
        env_prefix="BAR_EXPORT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    start_date: datetime = datetime(2024, 1, 1, tzinfo=timezone.utc)
    file_name: str = "BacktestDataExport"
    output_dir: Path = Field(default_factory=Path.home)
    log_level: str = "INFO"

    @field_validator("start_date")
    @classmethod
    def validate_start_date(cls, v: datetime) -> datetime:
        """Interpret naive start dates as UTC."""
        return as_utc(v)

    @field_validator("file_name")
    @classmethod
    def validate_file_name(cls, v: str) -> str:
        """File name is a bare stem; the .csv extension is added later."""
        v = v.strip()
        if not v:
            raise ValueError("file_name must not be empty")
        if "/" in v or "\\" in v:
            raise ValueError(f"file_name must not contain a path separator: {v!r}")
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = str(v).upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @property
    def destination(self) -> Path:
        """Full path of the CSV file written by a run."""
        return self.output_dir / f"{self.file_name}.csv"


@lru_cache()
def get_settings() -> ExportSettings:
    """Get cached settings instance."""
    return ExportSettings()


def reload_settings() -> ExportSettings:
    """Force reload settings (clears cache)."""
    get_settings.cache_clear()
    return get_settings()
