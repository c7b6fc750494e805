#!/usr/bin/env python3
"""Print a summary report for an employee roster.

Run from the project root:

    python3 scripts/directory_report.py roster.json [--company NAME] [--sorted] [--verbose]

The roster is a JSON array of objects with the keys ``full_name``,
``email``, ``company_name``, ``position`` and ``salary``.
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import Any

_project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from pydantic import ValidationError  # noqa: E402

from employee_directory.core.config import settings  # noqa: E402
from employee_directory.core.errors import DirectoryError, InvalidValueError  # noqa: E402
from employee_directory.models.employee import Employee  # noqa: E402
from employee_directory.services.employee_service import EmployeeService  # noqa: E402

logger = logging.getLogger(__name__)

_ROSTER_FIELDS = ("full_name", "email", "company_name", "position", "salary")


def load_roster(path: str | Path) -> list[dict[str, Any]]:
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, list):
        raise ValueError(f"Roster {path} must contain a JSON array, got {type(data).__name__}")
    return data


def build_directory(rows: list[dict[str, Any]]) -> EmployeeService:
    """Create a directory from roster rows; missing keys count as ``None``."""
    service = EmployeeService()
    for row in rows:
        if not isinstance(row, dict):
            raise InvalidValueError("row", row)
        employee = Employee(**{field: row.get(field) for field in _ROSTER_FIELDS})
        service.add_employee(employee)
    logger.info("Loaded %d employees", service.size())
    return service


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Summarize an employee roster (headcount, salaries, positions)",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {settings.APP_VERSION}",
    )
    parser.add_argument(
        "roster",
        help="Path to a JSON array of employee objects",
    )
    parser.add_argument(
        "--company",
        default=None,
        help="Only report on employees of this company (case-insensitive)",
    )
    parser.add_argument(
        "--sorted",
        action="store_true",
        help="Also list employees sorted by last name",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose (DEBUG) logging",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    level = logging.DEBUG if args.verbose or settings.DEBUG else settings.LOG_LEVEL
    logging.basicConfig(level=level, format=settings.LOG_FORMAT)

    try:
        service = build_directory(load_roster(args.roster))
    except (DirectoryError, ValidationError) as err:
        logger.error("Invalid roster entry: %s", err)
        return 1
    except (OSError, ValueError) as err:
        logger.error("Could not read roster %s: %s", args.roster, err)
        return 1

    report = service.build_report(company=args.company)
    print(report.model_dump_json(indent=2))

    if args.sorted:
        employees = service.get_employees_sorted_by_last_name()
        if args.company is not None:
            members = set(service.find_by_company(args.company))
            employees = [e for e in employees if e in members]
        for employee in employees:
            print(employee)

    return 0


if __name__ == "__main__":
    sys.exit(main())
