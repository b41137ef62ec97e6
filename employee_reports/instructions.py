"""Drawing instructions emitted by the layout engine.

A report is an ordered list of these values. ``PageBreak`` closes the
current page; everything else draws on the page that is open.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from reportlab.lib import colors

from .styles import TextStyle


@dataclass(frozen=True)
class FilledRect:
    x: float
    y: float
    w: float
    h: float
    color: colors.Color


@dataclass(frozen=True)
class Line:
    x1: float
    y1: float
    x2: float
    y2: float
    width: float
    color: colors.Color


@dataclass(frozen=True)
class TextRun:
    x: float
    y: float
    text: str
    font: str
    size: float
    color: colors.Color

    @classmethod
    def styled(cls, x: float, y: float, text: str, style: TextStyle) -> "TextRun":
        return cls(x, y, text, style.font, style.size, style.color)


@dataclass(frozen=True)
class PageBreak:
    pass


RenderInstruction = Union[FilledRect, Line, TextRun, PageBreak]


def outline(x: float, y: float, w: float, h: float, width: float, color: colors.Color) -> list[Line]:
    """Four lines stroking the rectangle with lower-left corner (x, y)."""
    return [
        Line(x, y, x + w, y, width, color),
        Line(x + w, y, x + w, y + h, width, color),
        Line(x + w, y + h, x, y + h, width, color),
        Line(x, y + h, x, y, width, color),
    ]
