"""Period totals over a view window."""

from __future__ import annotations

from datetime import date, datetime, tzinfo
from typing import Iterable

from activity_dashboard.dates import normalize_day
from activity_dashboard.schema import VIEWS, EventRecord
from activity_dashboard.windows import window_start


def aggregate(
    records: Iterable[EventRecord],
    window: str,
    now: date | datetime,
    tz: tzinfo | None = None,
) -> int:
    """Sum counts of records dated within ``window`` ending on ``now``."""

    start = window_start(window, now, tz)
    end = normalize_day(now, tz)

    total = 0
    for record in records:
        if start <= normalize_day(record.date, tz) <= end:
            total += record.count
    return total


def totals_by_window(
    records: Iterable[EventRecord],
    now: date | datetime,
    tz: tzinfo | None = None,
) -> dict[str, int]:
    """Return the period total for every view window."""

    records = list(records)
    return {window: aggregate(records, window, now, tz) for window in VIEWS}
