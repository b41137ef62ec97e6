from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

from ..config import ReportConfig
from ..instructions import FilledRect, Line, RenderInstruction, TextRun, outline
from ..layout import LayoutGrid, max_chars_for_column, truncate
from ..normalize import fmt_salary_cell
from ..pagination import PageCursor, PaginationController
from ..schema import EmployeeRecord
from ..styles import PALETTE, TABLE_CELL, TABLE_HEADER

# Offsets from the cursor line: rows span [y - 15, y + 5], text sits at y - 10
CELL_BOTTOM = 15
CELL_TOP = 5
TEXT_BASELINE = 10


@dataclass
class TableResult:
    instructions: List[RenderInstruction]
    cursor: PageCursor
    page_breaks: int


def row_values(record: EmployeeRecord) -> List[str]:
    return [
        str(record.employee_id),
        record.full_name,
        record.department,
        record.position,
        fmt_salary_cell(record.salary),
        record.hire_date.isoformat(),
    ]


def build_table(
    grid: LayoutGrid,
    records: Sequence[EmployeeRecord],
    config: ReportConfig,
    start: PageCursor,
) -> TableResult:
    """Emit the header band, one band per record, and the closing border.

    ``start`` is copied, not mutated; its shading applies to the first row.
    """

    pager = PaginationController(config, start)
    out: List[RenderInstruction] = []

    out.extend(_header_band(grid, config, pager.cursor.y))
    pager.cursor.y -= config.row_height
    out.append(
        Line(
            grid.origin_x,
            pager.cursor.y + CELL_TOP,
            grid.origin_x + grid.total_width,
            pager.cursor.y + CELL_TOP,
            2,
            PALETTE.header_border,
        )
    )

    budgets = [max_chars_for_column(c.width, config.cell_padding, config.glyph_width) for c in grid.columns]

    for record in records:
        out.extend(pager.prepare_row())
        out.extend(_row_band(grid, config, pager.cursor, row_values(record), budgets))
        pager.advance()

    table_height = (len(records) + 1) * config.row_height
    out.extend(outline(grid.origin_x, pager.cursor.y, grid.total_width, table_height, 1, PALETTE.table_border))

    return TableResult(instructions=out, cursor=pager.cursor, page_breaks=pager.page_breaks)


def _header_band(grid: LayoutGrid, config: ReportConfig, y: float) -> List[RenderInstruction]:
    out: List[RenderInstruction] = [
        FilledRect(grid.origin_x, y - CELL_BOTTOM, grid.total_width, config.row_height, PALETTE.header_bg)
    ]
    last = len(grid.columns) - 1
    for col in grid.columns:
        x = grid.column_x(col.index)
        out.append(TextRun.styled(x + config.cell_padding, y - TEXT_BASELINE, col.label, TABLE_HEADER))
        if col.index < last:
            right = x + col.width
            out.append(Line(right, y - CELL_BOTTOM, right, y + CELL_TOP, 0.5, PALETTE.header_separator))
    return out


def _row_band(
    grid: LayoutGrid,
    config: ReportConfig,
    cursor: PageCursor,
    values: List[str],
    budgets: List[int],
) -> List[RenderInstruction]:
    y = cursor.y
    out: List[RenderInstruction] = []
    if cursor.shaded:
        out.append(FilledRect(grid.origin_x, y - CELL_BOTTOM, grid.total_width, config.row_height, PALETTE.row_alt_bg))

    last = len(grid.columns) - 1
    for col in grid.columns:
        x = grid.column_x(col.index)
        text = truncate(values[col.index], budgets[col.index])
        out.append(TextRun.styled(x + config.cell_padding, y - TEXT_BASELINE, text, TABLE_CELL))
        if col.index < last:
            right = x + col.width
            out.append(Line(right, y - CELL_BOTTOM, right, y + CELL_TOP, 0.3, PALETTE.cell_separator))

    out.append(
        Line(grid.origin_x, y - CELL_BOTTOM, grid.origin_x + grid.total_width, y - CELL_BOTTOM, 0.3, PALETTE.row_divider)
    )
    return out
