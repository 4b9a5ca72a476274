"""
Bar Exporter
Decides which bars of a growing sequence are written, exactly once and in order.
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

from barexport.core.errors import IOFailure
from barexport.core.ports import BarSequence, RecordSink
from barexport.core.types import BEFORE_ALL_TIME, as_utc, format_record

logger = logging.getLogger(__name__)


class BarExporter:
    """
    Export closed bars of a host-owned sequence to a record sink.

    A bar is written iff its open time is at or after the start date and
    strictly after the last written open time (the cursor). The last index
    of the sequence is the forming bar and is never visited.

    Calls must be sequential and non-overlapping; no locking is done.
    """

    def __init__(self, sink: RecordSink) -> None:
        """
        Initialize exporter.

        Args:
            sink: Output channel, opened by ``initialize``
        """
        self._sink = sink
        self._start_date: Optional[datetime] = None
        self._cursor: datetime = BEFORE_ALL_TIME
        self._records_written = 0

    @property
    def start_date(self) -> Optional[datetime]:
        """Earliest exportable open time, ``None`` before ``initialize``."""
        return self._start_date

    @property
    def cursor(self) -> datetime:
        """Open time of the last bar written."""
        return self._cursor

    @property
    def records_written(self) -> int:
        return self._records_written

    @property
    def is_initialized(self) -> bool:
        return self._start_date is not None

    def initialize(self, start_date: datetime, destination: Path) -> None:
        """
        Open the sink and reset the cursor.

        Args:
            start_date: Bars opening before this are never exported
            destination: Output file, truncated

        Raises:
            IOFailure: If the sink cannot be opened; the exporter is left uninitialized
        """
        self._start_date = None
        self._cursor = BEFORE_ALL_TIME
        self._records_written = 0
        try:
            self._sink.open(destination)
        except IOFailure:
            self._sink.close()
            raise
        self._start_date = as_utc(start_date)
        logger.info(f"Export started. Writing to: {destination}")

    def export_historical(self, sequence: BarSequence) -> int:
        """
        Emit every closed bar currently in ``sequence`` in ascending order.

        Returns:
            Number of records written by this call
        """
        before = self._records_written
        count = len(sequence)
        for index in range(count - 1):
            self.try_emit(sequence, index)
        written = self._records_written - before
        logger.info(f"Historical export: scanned={max(count - 1, 0)} written={written}")
        return written

    def on_bar_closed(self, sequence: BarSequence) -> bool:
        """Emit the most recently closed bar (``len - 2``) if eligible."""
        closed_index = len(sequence) - 2
        if closed_index < 0:
            return False
        return self.try_emit(sequence, closed_index)

    def try_emit(self, sequence: BarSequence, index: int) -> bool:
        """
        Write the bar at ``index`` if it passes the boundary and cursor checks.

        Returns:
            True if a record was written

        Raises:
            IOFailure: If the sink write fails
        """
        if index < 0 or index >= len(sequence):
            logger.debug(f"Index {index} out of range, ignored")
            return False

        open_time = as_utc(sequence.open_time_at(index))
        if self._start_date is None or open_time < self._start_date:
            logger.debug(f"Bar {open_time} before start date, skipped")
            return False
        if open_time <= self._cursor:
            logger.debug(f"Bar {open_time} already exported, skipped")
            return False

        self._sink.write_record(format_record(open_time, *sequence.ohlcv_at(index)))
        self._cursor = open_time
        self._records_written += 1
        return True

    def shutdown(self) -> None:
        """Close the sink. Safe to call when nothing is open."""
        self._sink.close()
