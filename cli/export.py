"""Replay composition root: stored parquet bars -> CSV export."""

from __future__ import annotations

import argparse
import logging
from datetime import datetime
from pathlib import Path
import sys

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from barexport.config import ExportSettings, get_settings
from barexport.data.parquet_source import load_bars
from barexport.runner.replay import run_replay


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Replay stored bars through the CSV exporter")
    parser.add_argument("bars", type=Path, help="Parquet file of stored bars")
    parser.add_argument("--history", type=int, default=0, help="Closed bars available at start")
    parser.add_argument("--start-date", type=datetime.fromisoformat, default=None)
    parser.add_argument("--file-name", default=None)
    parser.add_argument("--output-dir", type=Path, default=None)
    parser.add_argument("--log-level", default=None)
    args = parser.parse_args(argv)

    overrides = {
        key: value
        for key, value in (
            ("start_date", args.start_date),
            ("file_name", args.file_name),
            ("output_dir", args.output_dir),
            ("log_level", args.log_level),
        )
        if value is not None
    }
    settings = ExportSettings(**overrides) if overrides else get_settings()

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    bars = load_bars(args.bars)
    result = run_replay(bars, settings=settings, history=args.history)
    print(
        f"[export] file={result.destination} bars={result.bars_seen} "
        f"records={result.records_written} aborted={result.aborted}"
    )
    return 1 if result.aborted else 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
