"""View windows: lookback start dates, cycling and labels."""

from __future__ import annotations

import calendar
from datetime import date, datetime, timedelta, tzinfo

from activity_dashboard.dates import normalize_day
from activity_dashboard.schema import VIEWS


def subtract_months(day: date, months: int) -> date:
    """Step back whole calendar months, clamping to the last valid day."""

    index = day.year * 12 + (day.month - 1) - months
    year, month = divmod(index, 12)
    month += 1
    last = calendar.monthrange(year, month)[1]
    return date(year, month, min(day.day, last))


def subtract_years(day: date, years: int) -> date:
    return subtract_months(day, 12 * years)


def window_start(window: str, now: date | datetime, tz: tzinfo | None = None) -> date:
    """Return the first day included in ``window`` ending on ``now``.

    week is the trailing 7 days, month and year step back one calendar
    month or year from today's date. Both ends of the window are inclusive.
    """

    today = normalize_day(now, tz)
    if window == "week":
        return today - timedelta(days=7)
    if window == "month":
        return subtract_months(today, 1)
    if window == "year":
        return subtract_years(today, 1)
    raise ValueError(f"Unknown view window '{window}'")


def next_view(current: str) -> str:
    """Cycle week -> month -> year -> week."""

    if current not in VIEWS:
        raise ValueError(f"Unknown view window '{current}'")
    return VIEWS[(VIEWS.index(current) + 1) % len(VIEWS)]


def _fmt_day(day: date) -> str:
    return f"{day:%b} {day.day}, {day.year}"


def period_label(window: str, now: date | datetime, tz: tzinfo | None = None) -> str:
    """Human readable span, e.g. ``Dec 29, 2023 to Jan 5, 2024``."""

    return f"{_fmt_day(window_start(window, now, tz))} to {_fmt_day(normalize_day(now, tz))}"
