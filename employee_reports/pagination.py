from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List

from .config import ReportConfig
from .instructions import PageBreak, RenderInstruction

logger = logging.getLogger(__name__)


@dataclass
class PageCursor:
    y: float
    page_index: int = 0
    shaded: bool = False


class PaginationController:
    """Tracks the vertical cursor and row shading during one table render.

    A page break resets the cursor to the top of a fresh page and restarts
    the shading pattern unshaded; it does not carry the alternation over.
    """

    def __init__(self, config: ReportConfig, start: PageCursor):
        self.config = config
        self.cursor = PageCursor(y=start.y, page_index=start.page_index, shaded=start.shaded)
        self.page_breaks = 0

    @property
    def threshold(self) -> float:
        return self.config.margin + self.config.bottom_reserve

    def needs_break(self) -> bool:
        return self.cursor.y < self.threshold

    def prepare_row(self) -> List[RenderInstruction]:
        if not self.needs_break():
            return []
        self.cursor = PageCursor(y=self.config.page_top, page_index=self.cursor.page_index + 1)
        self.page_breaks += 1
        logger.debug("page_break", extra={"page_index": self.cursor.page_index})
        return [PageBreak()]

    def advance(self) -> None:
        self.cursor.y -= self.config.row_height
        self.cursor.shaded = not self.cursor.shaded
