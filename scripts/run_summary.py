"""Print period totals for a CSV/JSON record file."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import date
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from activity_dashboard.aggregator import totals_by_window
from activity_dashboard.config import configure_logging
from activity_dashboard.dates import normalize_day
from activity_dashboard.schema import VIEWS
from activity_dashboard.sources import load_records_file
from activity_dashboard.windows import period_label

logger = logging.getLogger(__name__)


def build_report(records: list, now: date) -> dict:
    totals = totals_by_window(records, now)
    return {
        "now": now.isoformat(),
        "n_records": len(records),
        "windows": {window: {"total": totals[window], "period": period_label(window, now)} for window in VIEWS},
    }


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Summarize activity records by view window")
    parser.add_argument("--data", required=True, help="Path to CSV/JSON records file")
    parser.add_argument("--now", default=None, help="Reference day (YYYY-MM-DD), defaults to today")
    parser.add_argument("--default-count", type=int, default=None, help="Count for rows without one")
    parser.add_argument("--log-level", default="WARNING")
    args = parser.parse_args(argv)

    configure_logging(args.log_level)

    try:
        now = normalize_day(args.now) if args.now else date.today()
        records = load_records_file(Path(args.data), default_count=args.default_count)
    except (OSError, ValueError) as exc:
        logger.error("Could not load %s: %s", args.data, exc)
        return 1

    print(json.dumps(build_report(records, now), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
