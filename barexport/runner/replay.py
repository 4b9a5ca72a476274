"""Replay stored bars through the exporter as a host would deliver them."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Optional, Sequence

from barexport.config import ExportSettings
from barexport.core.ports import RecordSink
from barexport.core.types import BEFORE_ALL_TIME, Bar
from barexport.data.sequence import InMemoryBarSequence
from barexport.runner.host import ExportRobot

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReplayResult:
    destination: Path
    bars_seen: int
    records_written: int
    last_exported: Optional[datetime]
    aborted: bool


def run_replay(
    bars: Sequence[Bar],
    *,
    settings: ExportSettings,
    history: int = 0,
    sink: Optional[RecordSink] = None,
) -> ReplayResult:
    """
    Drive an ExportRobot over ``bars``.

    The first ``history`` bars plus one forming bar are loaded before
    ``on_start``. Each remaining bar is then appended and followed by
    ``on_new_bar_closed``. The final bar stays forming and is not exported.
    """
    if history < 0:
        raise ValueError(f"history must be >= 0, got {history}")

    preload = min(history + 1, len(bars))
    sequence = InMemoryBarSequence(bars[:preload])
    stopped = False

    def request_stop() -> None:
        nonlocal stopped
        stopped = True

    robot = ExportRobot(sequence, settings, sink=sink, request_stop=request_stop)
    robot.on_start()
    for bar in bars[preload:]:
        if stopped:
            logger.warning("Host stop requested, replay halted")
            break
        sequence.append(bar)
        robot.on_new_bar_closed()
    robot.on_stop()

    cursor = robot.exporter.cursor
    return ReplayResult(
        destination=settings.destination,
        bars_seen=len(sequence),
        records_written=robot.exporter.records_written,
        last_exported=None if cursor == BEFORE_ALL_TIME else cursor,
        aborted=robot.aborted,
    )
