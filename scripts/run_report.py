"""Print an efficiency report (ranking + stats) for a CSV/JSON activity file."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict
from datetime import datetime
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from leverage_engine.adapters import csv_adapter, json_adapter
from leverage_engine.config import Config
from leverage_engine.report import TIMEFRAMES, build_efficiency_report


def _load_activities(path: Path):
    suffix = path.suffix.lower()
    if suffix == ".csv":
        return csv_adapter.parse(str(path))
    if suffix == ".json":
        return json_adapter.parse(str(path))
    raise ValueError("Unsupported input format, expected .csv or .json")


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    parser = argparse.ArgumentParser(description="Rank activities by leverage")
    parser.add_argument("--data", required=True, help="Path to CSV/JSON activities file")
    parser.add_argument("--timeframe", choices=TIMEFRAMES, default="all")
    parser.add_argument("--limit", type=int, default=None, help="Maximum ranked activities")
    args = parser.parse_args()

    try:
        activities = _load_activities(Path(args.data))
    except ValueError as exc:
        raise SystemExit(f"Input error: {exc}") from exc

    report = build_efficiency_report(
        activities,
        now=datetime.now(),
        timeframe=args.timeframe,
        limit=args.limit,
        config=Config.from_env(),
    )
    report["ranking"] = [asdict(entry) for entry in report["ranking"]]
    print(json.dumps(report, indent=2, default=str))


if __name__ == "__main__":
    main()
