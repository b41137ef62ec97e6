"""Employee PDF report generation package (ReportLab canvas)."""

from .composer import ReportComposer, generate_report
from .config import ReportConfig
from .schema import EmployeeRecord

__all__ = ["EmployeeRecord", "ReportComposer", "ReportConfig", "generate_report"]
