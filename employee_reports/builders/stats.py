from __future__ import annotations

from typing import List, Sequence, Tuple

from ..config import ReportConfig
from ..instructions import RenderInstruction, TextRun
from ..normalize import fmt_amount, fmt_date
from ..statistics import ReportStatistics
from ..styles import BODY, SECTION

SECTION_DROP = 25
LINE_DROP = 15


def _band(heading: str, lines: Sequence[str], config: ReportConfig, y: float) -> Tuple[List[RenderInstruction], float]:
    x = config.margin
    out: List[RenderInstruction] = [TextRun.styled(x, y, heading, SECTION)]
    y -= SECTION_DROP
    for line in lines:
        out.append(TextRun.styled(x, y, line, BODY))
        y -= LINE_DROP
    return out, y


def build_summary_band(stats: ReportStatistics, config: ReportConfig, y: float) -> Tuple[List[RenderInstruction], float]:
    lines = [
        f"Average Salary: {fmt_amount(stats.average_salary)}",
        f"Salary Range: {fmt_amount(stats.min_salary)} - {fmt_amount(stats.max_salary)}",
        f"Departments: {stats.department_count}",
        f"Latest Hire: {fmt_date(stats.latest_hire_date)}",
    ]
    return _band("Summary Statistics", lines, config, y)


def build_department_band(
    stats: ReportStatistics, department: str, config: ReportConfig, y: float
) -> Tuple[List[RenderInstruction], float]:
    lines = [
        f"Department: {department}",
        f"Employee Count: {stats.employee_count}",
        f"Average Salary: {fmt_amount(stats.average_salary)}",
        f"Unique Positions: {stats.position_count}",
    ]
    return _band("Department Statistics", lines, config, y)


def build_salary_band(stats: ReportStatistics, config: ReportConfig, y: float) -> Tuple[List[RenderInstruction], float]:
    top = stats.top_earner.full_name if stats.top_earner is not None else "N/A"
    lines = [
        f"Average Salary: {fmt_amount(stats.average_salary)}",
        f"Above Average: {stats.above_average_count} employees",
        f"Below Average: {stats.below_average_count} employees",
        f"Highest Paid: {top}",
    ]
    return _band("Salary Analysis", lines, config, y)


def build_subheading(text: str, config: ReportConfig, y: float) -> Tuple[List[RenderInstruction], float]:
    return [TextRun.styled(config.margin, y, text, SECTION)], y - SECTION_DROP
