"""Core domain types and record formatting."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal

HEADER = "Date,Open,High,Low,Close,Volume"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

# Cursor value before anything has been written.
BEFORE_ALL_TIME = datetime.min.replace(tzinfo=timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Attach UTC to naive timestamps and convert aware ones to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def to_decimal(value: object) -> Decimal:
    if isinstance(value, Decimal):
        return value
    # str() keeps floats at their shortest repr (0.1 -> "0.1").
    return Decimal(str(value))


def format_price(value: Decimal) -> str:
    """Render a price in plain notation with trailing zeros removed."""
    text = format(value.normalize(), "f")
    if text == "-0":
        return "0"
    return text


@dataclass(frozen=True)
class Bar:
    open_time: datetime
    open: Decimal
    high: Decimal
    low: Decimal
    close: Decimal
    volume: int

    @classmethod
    def create(
        cls,
        open_time: datetime,
        open: object,
        high: object,
        low: object,
        close: object,
        volume: object,
    ) -> "Bar":
        """Build a bar from loosely typed values (floats, ints, strings)."""
        return cls(
            open_time=as_utc(open_time),
            open=to_decimal(open),
            high=to_decimal(high),
            low=to_decimal(low),
            close=to_decimal(close),
            volume=int(volume),
        )

    @property
    def ohlcv(self) -> tuple[Decimal, Decimal, Decimal, Decimal, int]:
        return (self.open, self.high, self.low, self.close, self.volume)


def format_record(
    open_time: datetime,
    open: Decimal,
    high: Decimal,
    low: Decimal,
    close: Decimal,
    volume: int,
) -> str:
    """Format one CSV line: ``yyyy-MM-dd HH:mm:ss,open,high,low,close,volume``."""
    fields = [open_time.strftime(TIMESTAMP_FORMAT)]
    fields.extend(format_price(to_decimal(price)) for price in (open, high, low, close))
    fields.append(str(int(volume)))
    return ",".join(fields)
