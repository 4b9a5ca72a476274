"""Growable in-memory BarSequence."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Iterable

from barexport.core.ports import BarSequence
from barexport.core.types import Bar


class InMemoryBarSequence(BarSequence):
    """Append-only list of bars with strictly increasing open times."""

    def __init__(self, bars: Iterable[Bar] = ()) -> None:
        self._bars: list[Bar] = []
        for bar in bars:
            self.append(bar)

    def __len__(self) -> int:
        return len(self._bars)

    def __getitem__(self, index: int) -> Bar:
        return self._bars[index]

    def append(self, bar: Bar) -> None:
        if self._bars and bar.open_time <= self._bars[-1].open_time:
            raise ValueError(
                f"Bar open time {bar.open_time} is not after {self._bars[-1].open_time}"
            )
        self._bars.append(bar)

    def open_time_at(self, index: int) -> datetime:
        return self._bars[index].open_time

    def ohlcv_at(self, index: int) -> tuple[Decimal, Decimal, Decimal, Decimal, int]:
        return self._bars[index].ohlcv
