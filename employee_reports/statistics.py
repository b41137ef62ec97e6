"""Aggregate figures over employee records.

Every function here is pure and tolerates an empty sequence: numeric
aggregates fall back to ``0.0``, lookups fall back to ``None``.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import List, Optional, Sequence

from .schema import EmployeeRecord


@dataclass(frozen=True)
class ReportStatistics:
    employee_count: int
    average_salary: float
    min_salary: float
    max_salary: float
    department_count: int
    position_count: int
    latest_hire_date: Optional[date]
    above_average_count: int
    below_average_count: int
    top_earner: Optional[EmployeeRecord]


def average_salary(records: Sequence[EmployeeRecord]) -> float:
    if not records:
        return 0.0
    return sum(r.salary for r in records) / len(records)


def min_salary(records: Sequence[EmployeeRecord]) -> float:
    return min((r.salary for r in records), default=0.0)


def max_salary(records: Sequence[EmployeeRecord]) -> float:
    return max((r.salary for r in records), default=0.0)


def distinct_department_count(records: Sequence[EmployeeRecord]) -> int:
    return len({r.department for r in records})


def distinct_position_count(records: Sequence[EmployeeRecord]) -> int:
    return len({r.position for r in records})


def latest_hire_date(records: Sequence[EmployeeRecord]) -> Optional[date]:
    return max((r.hire_date for r in records), default=None)


def above_average_count(records: Sequence[EmployeeRecord]) -> int:
    avg = average_salary(records)
    return sum(1 for r in records if r.salary > avg)


def below_average_count(records: Sequence[EmployeeRecord]) -> int:
    avg = average_salary(records)
    return sum(1 for r in records if r.salary < avg)


def top_earner(records: Sequence[EmployeeRecord]) -> Optional[EmployeeRecord]:
    # max() keeps the first maximal element, so ties go to the earliest record
    return max(records, key=lambda r: r.salary, default=None)


def above_average_earners(records: Sequence[EmployeeRecord]) -> List[EmployeeRecord]:
    """Records strictly above the mean, highest salary first (stable on ties)."""
    avg = average_salary(records)
    return sorted((r for r in records if r.salary > avg), key=lambda r: r.salary, reverse=True)


def records_in_department(records: Sequence[EmployeeRecord], department: str) -> List[EmployeeRecord]:
    return [r for r in records if r.department == department]


def compute_statistics(records: Sequence[EmployeeRecord]) -> ReportStatistics:
    return ReportStatistics(
        employee_count=len(records),
        average_salary=average_salary(records),
        min_salary=min_salary(records),
        max_salary=max_salary(records),
        department_count=distinct_department_count(records),
        position_count=distinct_position_count(records),
        latest_hire_date=latest_hire_date(records),
        above_average_count=above_average_count(records),
        below_average_count=below_average_count(records),
        top_earner=top_earner(records),
    )
