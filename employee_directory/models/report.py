"""Pydantic models for directory summaries handed to presentation layers."""

from __future__ import annotations

from pydantic import BaseModel, Field

from employee_directory.models.employee import Employee


class EmployeeSummary(BaseModel):
    """Plain snapshot of an employee, safe to serialize."""

    full_name: str
    email: str
    company_name: str
    position: str
    salary: float = Field(..., ge=0)

    @classmethod
    def from_employee(cls, employee: Employee) -> EmployeeSummary:
        return cls(
            full_name=employee.full_name,
            email=employee.email,
            company_name=employee.company_name,
            position=employee.position.name,
            salary=employee.salary,
        )


class DirectoryReport(BaseModel):
    """Aggregates over the employees in a directory (or one company of it)."""

    company: str | None = None
    headcount: int = Field(..., ge=0)
    average_salary: float | None = None
    top_earner: EmployeeSummary | None = None
    count_by_position: dict[str, int] = {}
