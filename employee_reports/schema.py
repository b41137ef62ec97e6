from __future__ import annotations

from datetime import date
from typing import Any, Iterable, List

from pydantic import BaseModel, ConfigDict, Field, ValidationError


class ReportDataError(ValueError):
    """Raised when employee input data is missing or invalid."""


class ReportIOError(OSError):
    """Raised when a report artifact cannot be written."""


class EmployeeRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    employee_id: int
    full_name: str
    department: str
    position: str
    salary: float = Field(ge=0)
    hire_date: date


def load_records(rows: Iterable[Any]) -> List[EmployeeRecord]:
    """Validate raw dict rows into records, keeping input order."""

    records: List[EmployeeRecord] = []
    for i, row in enumerate(rows):
        try:
            records.append(EmployeeRecord.model_validate(row))
        except ValidationError as exc:
            raise ReportDataError(f"Invalid employee record at index {i}: {exc}") from exc
    return records
