from __future__ import annotations

from datetime import date
from typing import Callable, List

import pytest

from employee_reports.schema import EmployeeRecord


@pytest.fixture
def make_employee() -> Callable[..., EmployeeRecord]:
    counter = {"next": 1}

    def _make(
        salary: float = 50000,
        *,
        name: str | None = None,
        department: str = "Engineering",
        position: str = "Developer",
        hire_date: date = date(2020, 1, 15),
    ) -> EmployeeRecord:
        eid = counter["next"]
        counter["next"] += 1
        return EmployeeRecord(
            employee_id=eid,
            full_name=name or f"Employee {eid}",
            department=department,
            position=position,
            salary=salary,
            hire_date=hire_date,
        )

    return _make


@pytest.fixture
def staff(make_employee) -> List[EmployeeRecord]:
    return [
        make_employee(50000, name="Alice Johnson", department="Engineering", hire_date=date(2019, 3, 1)),
        make_employee(60000, name="Bob Smith", department="Human Resources", position="Recruiter", hire_date=date(2021, 7, 12)),
        make_employee(70000, name="Carol White", department="Engineering", position="Lead", hire_date=date(2020, 11, 30)),
    ]
