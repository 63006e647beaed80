from datetime import date, datetime, timedelta

import numpy as np
import pytest

from activity_dashboard.dates import InvalidDateError
from activity_dashboard.grid import EMPTY_SLOT, build_grid, cell_tooltip, contribution_level, grid_matrix
from activity_dashboard.schema import CalendarDayCell, EventRecord

NOW = date(2024, 1, 5)


def test_week_grid_end_to_end():
    records = [
        EventRecord(date(2024, 1, 1), 2),
        EventRecord(date(2024, 1, 2), 0),
        EventRecord(date(2024, 1, 5), 5),
    ]
    cells = build_grid(records, "week", NOW)
    assert len(cells) == 8
    assert cells[0].date == date(2023, 12, 29)
    assert cells[-1].date == NOW
    assert [cell.count for cell in cells] == [0, 0, 0, 2, 0, 0, 0, 5]


def test_grid_is_dense_and_ascending():
    cells = build_grid([], "year", NOW)
    assert all(b.date - a.date == timedelta(days=1) for a, b in zip(cells, cells[1:]))
    assert all(cell.count == 0 for cell in cells)


def test_grid_lengths():
    assert len(build_grid([], "week", datetime(2024, 7, 1, 18, 0))) == 8
    assert len(build_grid([], "month", date(2024, 3, 31))) == 32
    assert len(build_grid([], "month", date(2024, 3, 15))) == 30
    assert len(build_grid([], "year", date(2023, 6, 15))) == 366
    assert len(build_grid([], "year", date(2024, 6, 15))) == 367


def test_same_day_records_are_summed():
    day = date(2024, 1, 3)
    cells = build_grid([EventRecord(day, 3), EventRecord(datetime(2024, 1, 3, 22, 0), 4)], "week", NOW)
    matching = [cell for cell in cells if cell.date == day]
    assert matching == [CalendarDayCell(day, 7)]


def test_records_outside_window_are_not_in_grid():
    cells = build_grid([EventRecord(date(2023, 12, 28), 9), EventRecord(date(2024, 1, 6), 9)], "week", NOW)
    assert sum(cell.count for cell in cells) == 0


def test_full_year_of_records():
    start = date(2023, 1, 5)
    records = [EventRecord(start + timedelta(days=i), 1) for i in range(366)]
    cells = build_grid(records * 2, "year", NOW)
    assert len(cells) == 366
    assert all(cell.count == 2 for cell in cells)


def test_build_grid_is_idempotent():
    records = [EventRecord(date(2024, 1, 1), 2)]
    assert build_grid(records, "month", NOW) == build_grid(records, "month", NOW)


def test_grid_matrix_week_rows_of_seven():
    cells = build_grid([EventRecord(NOW, 5)], "week", NOW)
    matrix = grid_matrix(cells, "week")
    assert matrix.shape == (2, 7)
    assert matrix[1, 0] == 5
    assert (matrix[1, 1:] == EMPTY_SLOT).all()


def test_grid_matrix_year_weekday_rows():
    now = date(2024, 1, 6)
    cells = build_grid([EventRecord(date(2023, 1, 6), 4), EventRecord(now, 8)], "year", now)
    matrix = grid_matrix(cells, "year")
    assert matrix.shape == (7, 53)
    # 2023-01-06 is a Friday, row 5 with Sunday first
    assert matrix[5, 0] == 4
    assert (matrix[:5, 0] == EMPTY_SLOT).all()
    assert matrix[6, 52] == 8
    assert int(np.sum(matrix[matrix != EMPTY_SLOT])) == 12


def test_grid_matrix_empty():
    assert grid_matrix([], "year").shape == (7, 0)
    assert grid_matrix([], "week").shape == (0, 7)


def test_contribution_level():
    assert [contribution_level(n) for n in (0, 1, 4, 5, 9, 10, 50)] == [0, 1, 1, 2, 2, 3, 3]


def test_cell_tooltip():
    assert cell_tooltip(CalendarDayCell(date(2024, 1, 5), 1)) == "1 contribution on Jan 5"
    assert cell_tooltip(CalendarDayCell(date(2024, 1, 5), 0)) == "0 contributions on Jan 5"


def test_unparseable_record_date_raises():
    with pytest.raises(InvalidDateError):
        build_grid([EventRecord("2024-02-30", 1)], "month", NOW)
