from __future__ import annotations

from datetime import date

from employee_reports.builders.table import build_table, row_values
from employee_reports.config import ReportConfig
from employee_reports.instructions import FilledRect, Line, PageBreak, TextRun
from employee_reports.layout import employee_grid, max_chars_for_column
from employee_reports.pagination import PageCursor
from employee_reports.styles import PALETTE


def _render(records, start_y=700, shaded=False):
    cfg = ReportConfig()
    grid = employee_grid(cfg)
    return cfg, grid, build_table(grid, records, cfg, PageCursor(y=start_y, shaded=shaded))


def test_row_values_format(make_employee):
    rec = make_employee(1234567.89, name="Dana Lee", hire_date=date(2022, 2, 3))
    values = row_values(rec)
    assert values[4] == "$1,234,567"
    assert values[5] == "2022-02-03"
    assert values[0] == str(rec.employee_id)


def test_header_only_for_empty_input():
    cfg, grid, result = _render([])
    ins = result.instructions

    assert isinstance(ins[0], FilledRect)
    assert ins[0].color == PALETTE.header_bg
    assert (ins[0].w, ins[0].h) == (grid.total_width, cfg.row_height)

    labels = [i.text for i in ins if isinstance(i, TextRun)]
    assert labels == ["ID", "Name", "Department", "Position", "Salary", "Hire Date"]

    separators = [i for i in ins if isinstance(i, Line) and i.width == 0.5]
    assert len(separators) == 5
    thick = [i for i in ins if isinstance(i, Line) and i.width == 2]
    assert len(thick) == 1

    border = ins[-4:]
    ys = {line.y1 for line in border} | {line.y2 for line in border}
    assert max(ys) - min(ys) == cfg.row_height
    assert result.cursor.y == 700 - cfg.row_height


def test_border_height_matches_row_count(make_employee):
    records = [make_employee() for _ in range(5)]
    cfg, grid, result = _render(records)
    border = result.instructions[-4:]
    ys = {line.y1 for line in border} | {line.y2 for line in border}
    assert min(ys) == result.cursor.y
    assert max(ys) - min(ys) == (len(records) + 1) * cfg.row_height


def test_every_cell_fits_its_budget(make_employee):
    records = [
        make_employee(name="Bartholomew Fitzgerald-Worthington the Third", department="Research and Development"),
        make_employee(99999999, position="Principal Distinguished Staff Engineer"),
    ]
    cfg, grid, result = _render(records)
    budgets = {grid.column_x(c.index) + cfg.cell_padding: max_chars_for_column(c.width) for c in grid.columns}
    cells = [i for i in result.instructions if isinstance(i, TextRun) and i.font == "Helvetica"]
    assert len(cells) == 12
    for cell in cells:
        assert len(cell.text) <= budgets[cell.x]


def test_shading_alternates_starting_unshaded(make_employee):
    records = [make_employee() for _ in range(4)]
    _, _, result = _render(records)
    shaded = [i for i in result.instructions if isinstance(i, FilledRect) and i.color == PALETTE.row_alt_bg]
    assert len(shaded) == 2
    assert [r.y for r in shaded] == [700 - 20 - 20 - 15, 700 - 20 - 60 - 15]


def test_page_break_restarts_shading(make_employee):
    cfg = ReportConfig()
    # Room for exactly three rows before the threshold
    records = [make_employee() for _ in range(5)]
    _, _, result = _render(records, start_y=cfg.margin + 50 + 60)
    ins = result.instructions

    assert sum(isinstance(i, PageBreak) for i in ins) == 1
    assert result.page_breaks == 1
    after = ins[ins.index(PageBreak()) + 1]
    # First row on the new page is unshaded, so it starts with a cell, not a fill
    assert isinstance(after, TextRun)
    assert after.y == cfg.page_top - 10


def test_start_cursor_parity_applies_to_first_row(make_employee):
    start = PageCursor(y=700, page_index=2, shaded=True)
    cfg = ReportConfig()
    result = build_table(employee_grid(cfg), [make_employee(), make_employee()], cfg, start)

    shaded = [i for i in result.instructions if isinstance(i, FilledRect) and i.color == PALETTE.row_alt_bg]
    assert [r.y for r in shaded] == [700 - 20 - 15]
    assert result.cursor.page_index == 2
    # Caller's cursor is left untouched
    assert (start.y, start.shaded) == (700, True)
