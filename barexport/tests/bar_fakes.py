"""Bar builders and an in-memory sink shared by the test modules."""

from __future__ import annotations

from datetime import datetime, timezone

from barexport.core.errors import IOFailure
from barexport.core.types import HEADER, Bar


def make_bar(*args: int, price: str = "100", volume: int = 1) -> Bar:
    return Bar.create(
        open_time=datetime(*args, tzinfo=timezone.utc),
        open=price,
        high=price,
        low=price,
        close=price,
        volume=volume,
    )


class MemorySink:
    """Records lines in memory; can be told to fail on open, on the n-th line or on close."""

    def __init__(
        self,
        fail_open: bool = False,
        fail_on_write: int | None = None,
        fail_close: bool = False,
    ) -> None:
        self.lines: list[str] = []
        self.opened: list[object] = []
        self.close_calls = 0
        self.fail_open = fail_open
        self.fail_on_write = fail_on_write
        self.fail_close = fail_close
        self.is_open = False

    def open(self, destination) -> None:
        if self.fail_open:
            raise IOFailure(f"cannot open {destination}")
        self.opened.append(destination)
        self.lines = [HEADER]
        self.is_open = True

    def write_record(self, record: str) -> None:
        if not self.is_open:
            raise IOFailure("Sink is not open")
        if self.fail_on_write is not None and len(self.lines) == self.fail_on_write:
            raise IOFailure("disk full")
        self.lines.append(record)

    def close(self) -> None:
        self.close_calls += 1
        was_open, self.is_open = self.is_open, False
        if was_open and self.fail_close:
            raise IOFailure("close failed")

    @property
    def records(self) -> list[str]:
        return self.lines[1:]
