from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Callable, List, Literal, Optional, Sequence

import yaml

from .builders.header import build_title_band
from .builders.stats import build_department_band, build_salary_band, build_subheading, build_summary_band
from .builders.table import build_table
from .canvas import ReportCanvas
from .config import ReportConfig
from .instructions import RenderInstruction
from .layout import employee_grid
from .normalize import now_local, sanitize_department
from .pagination import PageCursor
from .schema import EmployeeRecord, ReportIOError
from .statistics import above_average_earners, compute_statistics

logger = logging.getLogger(__name__)

ReportKind = Literal["employee", "department", "salary"]

EMPLOYEE_PREFIX = "Employee_Report"
DEPARTMENT_PREFIX = "Department_Report"
SALARY_PREFIX = "Salary_Analysis"


def report_file_name(prefix: str, generated_at: datetime, config: ReportConfig) -> str:
    return f"{prefix}_{generated_at.strftime(config.timestamp_format)}.pdf"


def department_prefix(department: str) -> str:
    return f"{DEPARTMENT_PREFIX}_{sanitize_department(department)}"


class ReportComposer:
    """Assembles title band, statistics band and employee table per report kind.

    ``build_*`` methods are pure and return the instruction stream;
    ``generate_*`` methods render that stream to a timestamped PDF.
    """

    def __init__(self, config: Optional[ReportConfig] = None, clock: Optional[Callable[[], datetime]] = None):
        self.config = config or ReportConfig()
        self._clock = clock or (lambda: now_local(self.config.timezone))

    # Instruction streams

    def build_employee_report(self, records: Sequence[EmployeeRecord], generated_at: datetime) -> List[RenderInstruction]:
        cfg = self.config
        stats = compute_statistics(records)

        out, y = build_title_band("Employee Report", len(records), generated_at, cfg, cfg.page_top)
        y -= cfg.section_gap

        band, y = build_summary_band(stats, cfg, y)
        out.extend(band)
        y -= cfg.section_gap

        out.extend(build_table(employee_grid(cfg), records, cfg, PageCursor(y=y)).instructions)
        return out

    def build_department_report(
        self, records: Sequence[EmployeeRecord], department: str, generated_at: datetime
    ) -> List[RenderInstruction]:
        cfg = self.config
        stats = compute_statistics(records)

        out, y = build_title_band(f"{department} Department Report", len(records), generated_at, cfg, cfg.page_top)
        y -= cfg.section_gap

        band, y = build_department_band(stats, department, cfg, y)
        out.extend(band)
        y -= cfg.section_gap

        out.extend(build_table(employee_grid(cfg), records, cfg, PageCursor(y=y)).instructions)
        return out

    def build_salary_report(self, records: Sequence[EmployeeRecord], generated_at: datetime) -> List[RenderInstruction]:
        cfg = self.config
        stats = compute_statistics(records)
        high_earners = above_average_earners(records)

        out, y = build_title_band("Salary Analysis Report", len(records), generated_at, cfg, cfg.page_top)
        y -= cfg.section_gap

        band, y = build_salary_band(stats, cfg, y)
        out.extend(band)
        y -= cfg.section_gap

        heading, y = build_subheading("Above Average Earners", cfg, y)
        out.extend(heading)

        out.extend(build_table(employee_grid(cfg), high_earners, cfg, PageCursor(y=y)).instructions)
        return out

    # Artifacts

    def generate_employee_report(self, records: Sequence[EmployeeRecord], output_dir: Optional[Path] = None) -> Path:
        generated_at = self._clock()
        instructions = self.build_employee_report(records, generated_at)
        return self._write(EMPLOYEE_PREFIX, generated_at, instructions, output_dir)

    def generate_department_report(
        self, records: Sequence[EmployeeRecord], department: str, output_dir: Optional[Path] = None
    ) -> Path:
        generated_at = self._clock()
        instructions = self.build_department_report(records, department, generated_at)
        return self._write(department_prefix(department), generated_at, instructions, output_dir)

    def generate_salary_report(self, records: Sequence[EmployeeRecord], output_dir: Optional[Path] = None) -> Path:
        generated_at = self._clock()
        instructions = self.build_salary_report(records, generated_at)
        return self._write(SALARY_PREFIX, generated_at, instructions, output_dir)

    def _write(
        self,
        prefix: str,
        generated_at: datetime,
        instructions: Sequence[RenderInstruction],
        output_dir: Optional[Path],
    ) -> Path:
        out_dir = Path(output_dir) if output_dir is not None else self.config.output_dir
        try:
            out_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise ReportIOError(f"Could not create output directory {out_dir}: {exc}") from exc

        out_path = out_dir / report_file_name(prefix, generated_at, self.config)
        canvas = ReportCanvas(out_path, self.config.page_size)
        pages = canvas.render(instructions)
        canvas.save_document()

        logger.info("report_generated", extra={"path": str(out_path), "pages": pages})
        return out_path


def generate_report(
    kind: ReportKind,
    records: Sequence[EmployeeRecord],
    config: Optional[ReportConfig] = None,
    department: Optional[str] = None,
) -> Path:
    """Public API: render one report kind to ``config.output_dir``."""

    composer = ReportComposer(config)
    if kind == "employee":
        return composer.generate_employee_report(records)
    if kind == "department":
        if department is None:
            raise ValueError("A department name is required for department reports")
        return composer.generate_department_report(records, department)
    if kind == "salary":
        return composer.generate_salary_report(records)
    raise ValueError(f"Unknown report kind: {kind}")


def load_config_from_yaml(path: Path) -> ReportConfig:
    raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    return ReportConfig.model_validate(raw)
