from __future__ import annotations

from employee_reports.config import ReportConfig
from employee_reports.instructions import PageBreak
from employee_reports.pagination import PageCursor, PaginationController


def test_no_break_at_threshold():
    cfg = ReportConfig()
    pager = PaginationController(cfg, PageCursor(y=cfg.margin + 50))
    assert pager.prepare_row() == []


def test_break_below_threshold_resets_state():
    cfg = ReportConfig()
    pager = PaginationController(cfg, PageCursor(y=cfg.margin + 49.9))
    pager.cursor.shaded = True

    emitted = pager.prepare_row()

    assert emitted == [PageBreak()]
    assert pager.cursor.y == cfg.page_height - cfg.margin
    assert pager.cursor.shaded is False
    assert pager.cursor.page_index == 1
    assert pager.page_breaks == 1


def test_advance_moves_cursor_and_toggles_shading():
    cfg = ReportConfig()
    pager = PaginationController(cfg, PageCursor(y=500))
    pager.advance()
    assert pager.cursor.y == 480
    assert pager.cursor.shaded is True
    pager.advance()
    assert pager.cursor.shaded is False


def test_forty_five_rows_break_once_at_row_34():
    cfg = ReportConfig()
    pager = PaginationController(cfg, PageCursor(y=750))
    break_rows = []
    for row in range(1, 46):
        if pager.prepare_row():
            break_rows.append(row)
            assert pager.cursor.shaded is False
        pager.advance()
    assert break_rows == [34]
