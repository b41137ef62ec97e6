from __future__ import annotations

import logging
import os
from contextlib import contextmanager, suppress
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Tuple

from reportlab.lib import colors
from reportlab.pdfgen.canvas import Canvas

from .instructions import FilledRect, Line, PageBreak, RenderInstruction, TextRun
from .schema import ReportIOError

logger = logging.getLogger(__name__)


@dataclass
class PageContext:
    index: int
    size: Tuple[float, float]
    closed: bool = False


def split_pages(instructions: Iterable[RenderInstruction]) -> List[List[RenderInstruction]]:
    """Cut the stream at each PageBreak; there is always at least one page."""
    pages: List[List[RenderInstruction]] = [[]]
    for ins in instructions:
        if isinstance(ins, PageBreak):
            pages.append([])
        else:
            pages[-1].append(ins)
    return pages


class ReportCanvas:
    """Executes drawing instructions on a ReportLab canvas.

    Only one page is open at a time. ``page()`` closes its page on every
    exit path, so an error mid-report never leaves a page half-open.
    """

    def __init__(self, path: Path, page_size: Tuple[float, float], canvas: Optional[Canvas] = None):
        self.path = Path(path)
        self.page_size = page_size
        self._canvas = canvas if canvas is not None else Canvas(str(self.path), pagesize=page_size, pageCompression=0)
        self._current: Optional[PageContext] = None
        self.pages_closed = 0

    def open_page(self, size: Optional[Tuple[float, float]] = None) -> PageContext:
        if self._current is not None:
            raise RuntimeError(f"Page {self._current.index} is still open")
        size = size or self.page_size
        self._canvas.setPageSize(size)
        self._canvas.saveState()
        self._current = PageContext(index=self.pages_closed, size=size)
        return self._current

    def close_page(self, context: PageContext) -> None:
        if context.closed:
            return
        self._canvas.restoreState()
        self._canvas.showPage()
        context.closed = True
        self._current = None
        self.pages_closed += 1

    @contextmanager
    def page(self, size: Optional[Tuple[float, float]] = None) -> Iterator[PageContext]:
        context = self.open_page(size)
        try:
            yield context
        finally:
            self.close_page(context)

    def fill_rect(self, x: float, y: float, w: float, h: float, color: colors.Color) -> None:
        self._canvas.setFillColor(color)
        self._canvas.rect(x, y, w, h, stroke=0, fill=1)

    def draw_line(self, x1: float, y1: float, x2: float, y2: float, width: float, color: colors.Color) -> None:
        self._canvas.setStrokeColor(color)
        self._canvas.setLineWidth(width)
        self._canvas.line(x1, y1, x2, y2)

    def draw_text(self, x: float, y: float, text: str, font: str, size: float, color: colors.Color) -> None:
        self._canvas.setFillColor(color)
        self._canvas.setFont(font, size)
        self._canvas.drawString(x, y, text)

    def dispatch(self, ins: RenderInstruction) -> None:
        if isinstance(ins, FilledRect):
            self.fill_rect(ins.x, ins.y, ins.w, ins.h, ins.color)
        elif isinstance(ins, Line):
            self.draw_line(ins.x1, ins.y1, ins.x2, ins.y2, ins.width, ins.color)
        elif isinstance(ins, TextRun):
            self.draw_text(ins.x, ins.y, ins.text, ins.font, ins.size, ins.color)
        elif isinstance(ins, PageBreak):
            raise ValueError("PageBreak must be handled by render(), not dispatched")
        else:
            raise TypeError(f"Unknown render instruction: {type(ins).__name__}")

    def render(self, instructions: Iterable[RenderInstruction]) -> int:
        """Draw the whole stream, one scoped page per PageBreak-delimited chunk."""
        pages = split_pages(instructions)
        for chunk in pages:
            with self.page():
                for ins in chunk:
                    self.dispatch(ins)
        return len(pages)

    def save_document(self) -> Path:
        existed = os.path.lexists(self.path)
        try:
            self._canvas.save()
        except OSError as exc:
            # Only remove a partial file this save created
            if not existed and self.path.is_file():
                with suppress(OSError):
                    self.path.unlink()
            raise ReportIOError(f"Could not write report to {self.path}: {exc}") from exc
        logger.debug("document_saved", extra={"path": str(self.path), "pages": self.pages_closed})
        return self.path
