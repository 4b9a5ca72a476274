"""Append-only CSV file sink with per-record durability."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional, TextIO

from barexport.core.errors import IOFailure
from barexport.core.ports import RecordSink
from barexport.core.types import HEADER

logger = logging.getLogger(__name__)


class CsvFileSink(RecordSink):
    """
    Line-oriented output file.

    The file is truncated on ``open``. Every line written (header included)
    is flushed and fsync'd before the call returns, so a crash right after
    ``write_record`` leaves the record on disk.
    """

    def __init__(self, encoding: str = "utf-8") -> None:
        self._encoding = encoding
        self._handle: Optional[TextIO] = None
        self._path: Optional[Path] = None

    @property
    def path(self) -> Optional[Path]:
        """Destination of the currently open file."""
        return self._path

    @property
    def is_open(self) -> bool:
        return self._handle is not None

    def open(self, destination: Path) -> None:
        """
        Create or truncate the destination and write the header.

        Raises:
            IOFailure: If the file cannot be created, truncated or written
        """
        self.close()
        path = Path(destination)
        try:
            self._handle = open(path, "w", encoding=self._encoding)
        except (OSError, ValueError) as exc:
            raise IOFailure(f"Cannot open {path}: {exc}") from exc
        self._path = path
        try:
            self._write_line(HEADER)
        except IOFailure:
            self.close()
            raise

    def write_record(self, record: str) -> None:
        """
        Append one line and force it to storage.

        Raises:
            IOFailure: If the sink is not open or the write/flush fails
        """
        if self._handle is None:
            raise IOFailure("Sink is not open")
        self._write_line(record)

    def close(self) -> None:
        """Flush and release the file. Idempotent."""
        handle, self._handle = self._handle, None
        if handle is None:
            return
        try:
            handle.close()
        except (OSError, ValueError) as exc:
            raise IOFailure(f"Cannot close {self._path}: {exc}") from exc
        finally:
            logger.debug(f"Closed {self._path}")

    def _write_line(self, line: str) -> None:
        try:
            self._handle.write(line + "\n")
            self._handle.flush()
            os.fsync(self._handle.fileno())
        except (OSError, ValueError) as exc:
            raise IOFailure(f"Write to {self._path} failed: {exc}") from exc
