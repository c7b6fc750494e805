from __future__ import annotations

import json

import pytest

from employee_directory.models.employee import Employee
from employee_directory.models.position import Position
from employee_directory.services.employee_service import EmployeeService

SAMPLE_ROSTER: list[dict] = [
    {
        "full_name": "Jan Kowalski",
        "email": "jan@corp.com",
        "company_name": "TechCorp",
        "position": "PROGRAMMER",
        "salary": 8500,
    },
    {
        "full_name": "Anna Nowak",
        "email": "anna@corp.com",
        "company_name": "TechCorp",
        "position": "MANAGER",
        "salary": 12500,
    },
    {
        "full_name": "Piotr Ziel",
        "email": "piotr@other.com",
        "company_name": "OtherCorp",
        "position": "INTERN",
        "salary": 3200,
    },
    {
        "full_name": "Karol Prezes",
        "email": "karol@corp.com",
        "company_name": "TechCorp",
        "position": "PRESIDENT",
        "salary": 30000,
    },
]


def make_employee(
    full_name: str = "Jan Kowalski",
    email: str = "jan.kowalski@corp.com",
    company_name: str = "TechCorp",
    position: Position = Position.PROGRAMMER,
    salary: float = 9000,
) -> Employee:
    return Employee(full_name, email, company_name, position, salary)


@pytest.fixture
def employee() -> Employee:
    return make_employee()


@pytest.fixture
def service() -> EmployeeService:
    svc = EmployeeService()
    for row in SAMPLE_ROSTER:
        svc.add_employee(Employee(**row))
    return svc


@pytest.fixture
def empty_service() -> EmployeeService:
    return EmployeeService()


@pytest.fixture
def roster_file(tmp_path):
    path = tmp_path / "roster.json"
    path.write_text(json.dumps(SAMPLE_ROSTER), encoding="utf-8")
    return path
