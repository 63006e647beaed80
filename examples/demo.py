"""Demo script for activity-dashboard."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from activity_dashboard.adapters.csv_adapter import parse
from activity_dashboard.grid import build_grid, cell_tooltip
from activity_dashboard.panel import summarize_panel


def main() -> None:
    records = parse("examples/sample_reading.csv", default_count=1)
    now = max(record.date for record in records)
    for window in ("week", "month", "year"):
        summary = summarize_panel("reading", records, window, now)
        print(f"{summary.headline} ({summary.period})")
    for cell in build_grid(records, "week", now):
        print(" ", cell_tooltip(cell))


if __name__ == "__main__":
    main()
