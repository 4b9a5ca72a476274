from __future__ import annotations

from datetime import datetime, timedelta, timezone
from decimal import Decimal

from barexport.core.types import Bar, as_utc, format_price, format_record


def test_format_record_uses_fixed_layout() -> None:
    line = format_record(
        datetime(2024, 1, 1, 9, 5, 7, tzinfo=timezone.utc),
        Decimal("1.10500"),
        Decimal("1.2"),
        Decimal("1.05"),
        Decimal("1.1"),
        42,
    )
    assert line == "2024-01-01 09:05:07,1.105,1.2,1.05,1.1,42"


def test_format_price_is_plain_positional() -> None:
    assert format_price(Decimal("100")) == "100"
    assert format_price(Decimal("100.50")) == "100.5"
    assert format_price(Decimal("1E+3")) == "1000"
    assert format_price(Decimal("0.00001")) == "0.00001"
    assert format_price(Decimal("-0.0")) == "0"


def test_bar_create_converts_floats_without_binary_noise() -> None:
    bar = Bar.create(datetime(2024, 1, 1), 0.1, 0.3, 0.05, 0.2, 7.0)
    assert bar.open == Decimal("0.1")
    assert bar.volume == 7
    assert bar.open_time.tzinfo is timezone.utc


def test_as_utc_converts_aware_timestamps() -> None:
    plus_two = timezone(timedelta(hours=2))
    value = as_utc(datetime(2024, 1, 1, 2, 0, tzinfo=plus_two))
    assert value == datetime(2024, 1, 1, 0, 0, tzinfo=timezone.utc)
    assert value.hour == 0
