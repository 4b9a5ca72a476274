from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal
from pathlib import Path

from barexport.data.parquet_source import load_bars


def test_load_bars_maps_rows_in_file_order() -> None:
    frame = {
        "timestamp": [datetime(2024, 1, 1, 0), datetime(2024, 1, 1, 1)],
        "open": [1.0, 1.25],
        "high": [1.3, 1.5],
        "low": [0.9, 1.0],
        "close": [1.25, 1.1],
        "volume": [5.0, 10.0],
        "spread": [2, 3],
    }
    paths: list[Path] = []

    def _read(path):
        paths.append(path)
        return frame

    bars = load_bars("store/EURUSD.parquet", read_parquet=_read)

    assert paths == [Path("store/EURUSD.parquet")]
    assert [bar.open_time for bar in bars] == [
        datetime(2024, 1, 1, 0, tzinfo=timezone.utc),
        datetime(2024, 1, 1, 1, tzinfo=timezone.utc),
    ]
    assert bars[0].close == Decimal("1.25")
    assert bars[1].volume == 10


def test_load_bars_on_empty_frame() -> None:
    frame = {column: [] for column in ("timestamp", "open", "high", "low", "close", "volume")}
    assert load_bars("empty.parquet", read_parquet=lambda _path: frame) == []
