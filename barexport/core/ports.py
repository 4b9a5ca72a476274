"""Pure port definitions for the host feed and the output sink."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from pathlib import Path
from typing import Protocol


class BarSequence(Protocol):
    """Host-owned, append-only bars ordered by strictly increasing open time.

    The last index is the bar still forming.
    """

    def __len__(self) -> int:
        """Return the current number of bars, forming bar included."""

    def open_time_at(self, index: int) -> datetime:
        """Return the open time of the bar at ``index``."""

    def ohlcv_at(self, index: int) -> tuple[Decimal, Decimal, Decimal, Decimal, int]:
        """Return ``(open, high, low, close, volume)`` of the bar at ``index``."""


class RecordSink(Protocol):
    def open(self, destination: Path) -> None:
        """Create or truncate ``destination`` and write the header line."""

    def write_record(self, record: str) -> None:
        """Append one line and make it durable before returning."""

    def close(self) -> None:
        """Release the destination; safe to call repeatedly."""
