"""In-memory employee directory service."""

from __future__ import annotations

import logging
from collections import Counter

from employee_directory.core.errors import DuplicateEmailError, MissingValueError
from employee_directory.models.employee import Employee
from employee_directory.models.position import Position
from employee_directory.models.report import DirectoryReport, EmployeeSummary

logger = logging.getLogger(__name__)


class EmployeeService:
    def __init__(self) -> None:
        # Keyed by lowercased email; insertion order is the natural order.
        self._employees: dict[str, Employee] = {}

    def add_employee(self, employee: Employee) -> None:
        if employee is None:
            raise MissingValueError("employee")

        key = employee.email_key
        if key in self._employees:
            logger.debug("Rejected duplicate employee email %s", employee.email)
            raise DuplicateEmailError(employee.email)

        self._employees[key] = employee
        logger.debug("Added employee %s (total=%d)", employee.email, len(self._employees))

    def get_all_employees(self) -> list[Employee]:
        return list(self._employees.values())

    def get_employee_by_email(self, email: str) -> Employee | None:
        if email is None:
            raise MissingValueError("email")
        return self._employees.get(email.lower())

    def find_by_company(self, company_name: str) -> list[Employee]:
        if company_name is None:
            raise MissingValueError("company_name")
        wanted = company_name.lower()
        return [e for e in self._employees.values() if e.company_name.lower() == wanted]

    def get_employees_sorted_by_last_name(self) -> list[Employee]:
        return sorted(
            self._employees.values(),
            key=lambda e: (e.last_name.lower(), e.full_name.lower()),
        )

    def group_by_position(self) -> dict[Position, list[Employee]]:
        groups: dict[Position, list[Employee]] = {position: [] for position in Position}
        for employee in self._employees.values():
            groups[employee.position].append(employee)
        return {position: members for position, members in groups.items() if members}

    def count_by_position(self) -> dict[Position, int]:
        counts = Counter(e.position for e in self._employees.values())
        return {position: counts[position] for position in Position if counts[position]}

    def get_average_salary(self) -> float | None:
        if not self._employees:
            return None
        return sum(e.salary for e in self._employees.values()) / len(self._employees)

    def get_top_earner(self) -> Employee | None:
        # max() keeps the first of equal maxima, i.e. the earliest inserted.
        return max(self._employees.values(), key=lambda e: e.salary, default=None)

    def build_report(self, company: str | None = None) -> DirectoryReport:
        """Summarize the whole directory, or only the employees of ``company``."""
        if company is None:
            employees = self.get_all_employees()
        else:
            employees = self.find_by_company(company)

        counts = Counter(e.position for e in employees)
        top = max(employees, key=lambda e: e.salary, default=None)
        average = sum(e.salary for e in employees) / len(employees) if employees else None

        return DirectoryReport(
            company=company,
            headcount=len(employees),
            average_salary=average,
            top_earner=EmployeeSummary.from_employee(top) if top is not None else None,
            count_by_position={p.name: counts[p] for p in Position if counts[p]},
        )

    def size(self) -> int:
        return len(self._employees)

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, email: object) -> bool:
        return isinstance(email, str) and email.lower() in self._employees
