from __future__ import annotations

from dataclasses import dataclass

from reportlab.lib import colors


@dataclass(frozen=True)
class Palette:
    text_primary: colors.Color
    text_secondary: colors.Color
    muted: colors.Color
    rule: colors.Color

    header_bg: colors.Color
    row_alt_bg: colors.Color
    header_separator: colors.Color
    header_border: colors.Color
    cell_separator: colors.Color
    row_divider: colors.Color
    table_border: colors.Color


DARK_GRAY = colors.HexColor("#404040")
GRAY = colors.HexColor("#808080")
LIGHT_GRAY = colors.HexColor("#C0C0C0")


PALETTE = Palette(
    text_primary=colors.black,
    text_secondary=DARK_GRAY,
    muted=GRAY,
    rule=LIGHT_GRAY,
    header_bg=colors.HexColor("#F0F0F0"),
    row_alt_bg=colors.HexColor("#F8F8F8"),
    header_separator=GRAY,
    header_border=DARK_GRAY,
    cell_separator=colors.HexColor("#DCDCDC"),
    row_divider=colors.HexColor("#E6E6E6"),
    table_border=GRAY,
)


# Standard Type 1 faces, never embedded
FONT_REG = "Helvetica"
FONT_BOLD = "Helvetica-Bold"


@dataclass(frozen=True)
class TextStyle:
    font: str
    size: float
    color: colors.Color


TITLE = TextStyle(FONT_BOLD, 20, PALETTE.text_secondary)
SUBTITLE = TextStyle(FONT_REG, 12, PALETTE.muted)
SECTION = TextStyle(FONT_BOLD, 14, PALETTE.text_primary)
BODY = TextStyle(FONT_REG, 11, PALETTE.text_primary)
TABLE_HEADER = TextStyle(FONT_BOLD, 10, PALETTE.text_secondary)
TABLE_CELL = TextStyle(FONT_REG, 9, PALETTE.text_primary)
