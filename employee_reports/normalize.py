from __future__ import annotations

import re
from datetime import date, datetime
from typing import Optional

import pytz


_WHITESPACE_RUN = re.compile(r"\s+")


def to_local(dt: datetime, tz_name: Optional[str]) -> datetime:
    if not tz_name:
        return dt.astimezone()
    tz = pytz.timezone(tz_name)
    return dt.astimezone(tz)


def now_local(tz_name: Optional[str]) -> datetime:
    return to_local(datetime.now(pytz.UTC), tz_name)


def fmt_salary_cell(salary: float) -> str:
    """Whole currency units with thousands grouping; cents are dropped, not rounded."""
    return f"${int(salary):,d}"


def fmt_amount(value: float) -> str:
    return f"${value:.2f}"


def fmt_date(value: Optional[date]) -> str:
    return value.isoformat() if value is not None else "N/A"


def sanitize_department(name: str) -> str:
    """Collapse every whitespace run into a single underscore."""
    return _WHITESPACE_RUN.sub("_", name)
