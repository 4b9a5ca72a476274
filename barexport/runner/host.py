"""Host lifecycle adapter: start, per-closed-bar, stop."""

from __future__ import annotations

import logging
from typing import Callable, Optional

from barexport.config import ExportSettings
from barexport.core.errors import IOFailure
from barexport.core.ports import BarSequence, RecordSink
from barexport.exporter import BarExporter
from barexport.sink import CsvFileSink

logger = logging.getLogger(__name__)


class ExportRobot:
    """
    Binds a BarExporter to a host's callbacks.

    The host calls ``on_start`` once, ``on_new_bar_closed`` zero or more
    times, then ``on_stop`` once, never concurrently. Any IOFailure aborts
    the run: the sink is closed, later callbacks do nothing and
    ``request_stop`` is invoked so the host stops calling back.
    """

    def __init__(
        self,
        bars: BarSequence,
        settings: ExportSettings,
        *,
        sink: Optional[RecordSink] = None,
        request_stop: Optional[Callable[[], None]] = None,
    ) -> None:
        self.bars = bars
        self.settings = settings
        self.exporter = BarExporter(sink if sink is not None else CsvFileSink())
        self._request_stop = request_stop or (lambda: None)
        self._aborted = False

    @property
    def aborted(self) -> bool:
        return self._aborted

    def on_start(self) -> None:
        destination = self.settings.destination
        try:
            self.exporter.initialize(self.settings.start_date, destination)
            self.exporter.export_historical(self.bars)
        except IOFailure as exc:
            logger.error(f"Error initializing exporter: {exc}")
            self._abort()

    def on_new_bar_closed(self) -> None:
        if self._aborted:
            return
        try:
            self.exporter.on_bar_closed(self.bars)
        except IOFailure as exc:
            logger.error(f"Export write failed: {exc}")
            self._abort()

    def on_stop(self) -> None:
        self._close_sink()
        logger.info(
            f"Export stopped. records={self.exporter.records_written} "
            f"last={self.exporter.cursor.isoformat()}"
        )

    def _abort(self) -> None:
        self._aborted = True
        self._close_sink()
        self._request_stop()

    def _close_sink(self) -> None:
        try:
            self.exporter.shutdown()
        except IOFailure as exc:
            logger.warning(f"Closing sink failed: {exc}")
