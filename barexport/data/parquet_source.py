"""Read stored bars for replay."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

from barexport.core.types import Bar

logger = logging.getLogger(__name__)

COLUMNS: tuple[str, ...] = ("timestamp", "open", "high", "low", "close", "volume")


def load_bars(
    path: str | Path,
    *,
    read_parquet: Callable[[Path], object] | None = None,
) -> list[Bar]:
    """
    Load bars from a parquet file in file order.

    Rows are taken as stored; ordering is enforced later by the
    sequence they are appended to.
    """
    if read_parquet is None:
        # Lazily import pandas so the exporter core does not need it.
        import pandas as pd

        read_parquet = pd.read_parquet

    path = Path(path)
    frame = read_parquet(path)
    bars = [Bar.create(*row) for row in zip(*(frame[column] for column in COLUMNS))]
    logger.info(f"Loaded {len(bars)} bars from {path}")
    return bars
