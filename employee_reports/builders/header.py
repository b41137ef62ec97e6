from __future__ import annotations

from datetime import datetime
from typing import List, Tuple

from ..config import ReportConfig
from ..instructions import Line, RenderInstruction, TextRun
from ..styles import PALETTE, SUBTITLE, TITLE


def build_title_band(
    title: str,
    employee_count: int,
    generated_at: datetime,
    config: ReportConfig,
    y: float,
) -> Tuple[List[RenderInstruction], float]:
    """Title, generation stamp, headcount and a divider rule.

    Returns the instructions and the cursor just below the rule.
    """

    x = config.margin
    out: List[RenderInstruction] = [TextRun.styled(x, y, title, TITLE)]
    y -= 25

    out.append(TextRun.styled(x, y, f"Generated on: {generated_at.strftime(config.generated_format)}", SUBTITLE))
    y -= 15
    out.append(TextRun.styled(x, y, f"Total Employees: {employee_count}", SUBTITLE))
    y -= 15

    out.append(Line(x, y, config.rule_end_x, y, 1, PALETTE.rule))
    return out, y - 10
