from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

from .config import ReportConfig


ELLIPSIS = "..."

# (label, width) in PDF points, in display order
EMPLOYEE_COLUMNS: Tuple[Tuple[str, float], ...] = (
    ("ID", 50),
    ("Name", 120),
    ("Department", 90),
    ("Position", 130),
    ("Salary", 80),
    ("Hire Date", 90),
)


@dataclass(frozen=True)
class ColumnSpec:
    label: str
    width: float
    index: int

    def __post_init__(self) -> None:
        if self.width <= 0:
            raise ValueError(f"Column {self.label!r} must have a positive width, got {self.width}")


@dataclass(frozen=True)
class LayoutGrid:
    columns: Tuple[ColumnSpec, ...]
    origin_x: float

    @property
    def total_width(self) -> float:
        return sum(c.width for c in self.columns)

    def column_x(self, index: int) -> float:
        return self.origin_x + sum(c.width for c in self.columns[:index])


def employee_grid(config: ReportConfig) -> LayoutGrid:
    """The one table shape shared by every report kind."""
    columns = tuple(ColumnSpec(label, width, i) for i, (label, width) in enumerate(EMPLOYEE_COLUMNS))
    return LayoutGrid(columns=columns, origin_x=config.margin)


def max_chars_for_column(width: float, cell_padding: float = 5, glyph_width: float = 5.5) -> int:
    """Approximate how many characters fit in a cell.

    Uses a fixed average glyph width instead of font metrics, so results
    are stable regardless of the actual characters.
    """
    return max(0, math.floor((width - 2 * cell_padding) / glyph_width))


def truncate(text: str, max_chars: int) -> str:
    if len(text) <= max_chars:
        return text
    if max_chars <= 0:
        return ""
    # No room for an ellipsis: show as much as fits
    if max_chars < len(ELLIPSIS):
        return text[:max_chars]
    return text[: max_chars - len(ELLIPSIS)] + ELLIPSIS
