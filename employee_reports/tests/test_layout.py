from __future__ import annotations

import pytest

from employee_reports.config import ReportConfig
from employee_reports.layout import ColumnSpec, employee_grid, max_chars_for_column, truncate


def test_grid_columns_fixed():
    grid = employee_grid(ReportConfig())
    assert [c.label for c in grid.columns] == ["ID", "Name", "Department", "Position", "Salary", "Hire Date"]
    assert [c.width for c in grid.columns] == [50, 120, 90, 130, 80, 90]
    assert grid.total_width == 560
    assert grid.column_x(0) == 50
    assert grid.column_x(2) == 50 + 50 + 120


def test_column_width_must_be_positive():
    with pytest.raises(ValueError):
        ColumnSpec("Bad", 0, 0)


def test_max_chars_for_id_column():
    assert max_chars_for_column(50) == 7


def test_truncate_ten_chars_in_id_column():
    out = truncate("ABCDEFGHIJ", max_chars_for_column(50))
    assert out == "ABCD..."


def test_truncate_keeps_fitting_text():
    assert truncate("short", 7) == "short"
    assert truncate("exactly", 7) == "exactly"


@pytest.mark.parametrize("max_chars,expected", [(2, "AB"), (1, "A"), (0, ""), (-4, "")])
def test_truncate_without_room_for_ellipsis(max_chars, expected):
    assert truncate("ABCDEFGHIJ", max_chars) == expected


def test_narrow_column_budget_never_negative():
    assert max_chars_for_column(8) == 0
