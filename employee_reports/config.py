from __future__ import annotations

from pathlib import Path
from typing import Optional, Tuple

from pydantic import BaseModel, Field
from reportlab.lib.pagesizes import A4

from . import settings


class ReportConfig(BaseModel):
    """Configuration for employee PDF report generation."""

    output_dir: Path = Field(default_factory=lambda: Path(settings.REPORT_OUTPUT_DIR))

    # Page geometry (PDF points)
    page_size: Tuple[float, float] = A4
    margin: float = 50
    row_height: float = 20
    cell_padding: float = 5
    # Rough average Helvetica 9pt glyph width; not real font metrics
    glyph_width: float = 5.5
    # Rows stop this far above the bottom margin
    bottom_reserve: float = 50
    section_gap: float = 30
    rule_end_x: float = 545

    timestamp_format: str = "%Y-%m-%d_%H-%M-%S"
    generated_format: str = "%Y-%m-%d %H:%M:%S"

    # pytz zone name; None means the system local zone
    timezone: Optional[str] = Field(default_factory=lambda: settings.REPORT_TIMEZONE)

    @property
    def page_width(self) -> float:
        return self.page_size[0]

    @property
    def page_height(self) -> float:
        return self.page_size[1]

    @property
    def page_top(self) -> float:
        return self.page_height - self.margin
