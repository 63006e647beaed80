"""Calendar grid construction for contribution heatmaps."""

from __future__ import annotations

from collections import Counter
from datetime import date, datetime, timedelta, tzinfo
from typing import Iterable

import numpy as np

from activity_dashboard.dates import normalize_day
from activity_dashboard.schema import CalendarDayCell, EventRecord
from activity_dashboard.windows import window_start

EMPTY_SLOT = -1
_LEVEL_THRESHOLDS = (5, 10)


def build_grid(
    records: Iterable[EventRecord],
    window: str,
    now: date | datetime,
    tz: tzinfo | None = None,
) -> list[CalendarDayCell]:
    """Return one cell per day from the window start through ``now``, ascending.

    Records sharing a day are summed. Days without records get a zero count.
    """

    start = window_start(window, now, tz)
    end = normalize_day(now, tz)

    counts: Counter[date] = Counter()
    for record in records:
        counts[normalize_day(record.date, tz)] += record.count

    cells = []
    day = start
    while day <= end:
        cells.append(CalendarDayCell(date=day, count=counts.get(day, 0)))
        day += timedelta(days=1)
    return cells


def grid_matrix(cells: list[CalendarDayCell], window: str) -> np.ndarray:
    """Lay cells out for rendering.

    week and month views fill rows of seven cells left to right. The year
    view uses weekday rows (Sunday first) and one column per week. Unused
    slots hold ``EMPTY_SLOT``.
    """

    if not cells:
        shape = (7, 0) if window == "year" else (0, 7)
        return np.full(shape, EMPTY_SLOT, dtype=int)

    counts = np.array([cell.count for cell in cells], dtype=int)

    if window != "year":
        rows = -(-len(counts) // 7)
        matrix = np.full(rows * 7, EMPTY_SLOT, dtype=int)
        matrix[: len(counts)] = counts
        return matrix.reshape(rows, 7)

    # date.weekday() is Monday=0, shift so Sunday is row 0
    lead = (cells[0].date.weekday() + 1) % 7
    columns = -(-(lead + len(counts)) // 7)
    flat = np.full(columns * 7, EMPTY_SLOT, dtype=int)
    flat[lead : lead + len(counts)] = counts
    return flat.reshape(columns, 7).T


def contribution_level(count: int) -> int:
    """Bucket a day count into a 0-3 intensity level."""

    if count <= 0:
        return 0
    for level, threshold in enumerate(_LEVEL_THRESHOLDS, start=1):
        if count < threshold:
            return level
    return len(_LEVEL_THRESHOLDS) + 1


def cell_tooltip(cell: CalendarDayCell) -> str:
    plural = "" if cell.count == 1 else "s"
    return f"{cell.count} contribution{plural} on {cell.date:%b} {cell.date.day}"
