from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Optional

from . import settings
from .composer import ReportComposer, load_config_from_yaml
from .config import ReportConfig
from .schema import load_records
from .statistics import records_in_department


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Generate an employee PDF report from JSON records.")
    parser.add_argument("--input", type=Path, required=True, help="Path to a JSON array of employee records")
    parser.add_argument("--kind", choices=["employee", "department", "salary"], default="employee")
    parser.add_argument("--department", default=None, help="Department name (required for --kind department)")
    parser.add_argument("--out", type=Path, default=None, help="Output directory (overrides config.output_dir)")
    parser.add_argument("--config", type=Path, default=None, help="Optional YAML config file")

    args = parser.parse_args(argv)
    logging.basicConfig(level=settings.LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    if args.kind == "department" and not args.department:
        parser.error("--department is required when --kind is department")

    cfg = load_config_from_yaml(args.config) if args.config else ReportConfig()
    if args.out is not None:
        cfg.output_dir = args.out

    records = load_records(json.loads(args.input.read_text(encoding="utf-8")))
    composer = ReportComposer(cfg)

    if args.kind == "department":
        subset = records_in_department(records, args.department)
        out_path = composer.generate_department_report(subset, args.department)
    elif args.kind == "salary":
        out_path = composer.generate_salary_report(records)
    else:
        out_path = composer.generate_employee_report(records)

    print(str(out_path))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
