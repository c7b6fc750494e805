"""Employee entity with validation on construction and on every assignment."""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field, ValidationInfo, field_validator

from employee_directory.core.errors import InvalidValueError, MissingValueError
from employee_directory.models.position import Position


class Employee(BaseModel):
    """One person's employment record.

    Identity is the email address compared case-insensitively: two
    employees are equal (and hash alike) when their emails match, whatever
    their other fields hold. The email keeps its original casing.
    """

    model_config = {"validate_assignment": True}

    full_name: str
    email: str = Field(frozen=True)
    company_name: str
    position: Position
    salary: float = Field(strict=True)

    def __init__(
        self,
        full_name: str,
        email: str,
        company_name: str,
        position: Position,
        salary: float,
    ) -> None:
        super().__init__(
            full_name=full_name,
            email=email,
            company_name=company_name,
            position=position,
            salary=salary,
        )

    @field_validator("full_name", "email", "company_name", "position", "salary", mode="before")
    @classmethod
    def _require_value(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            raise MissingValueError(info.field_name)
        return value

    @field_validator("salary")
    @classmethod
    def _check_salary(cls, value: float) -> float:
        if value < 0 or math.isnan(value):
            raise InvalidValueError("salary", value)
        return value

    def model_copy(self, *, update: Mapping[str, Any] | None = None, deep: bool = False) -> Employee:
        """Copy the employee; updated fields go through the same validation as the constructor."""
        if not update:
            return super().model_copy(deep=deep)
        return type(self)(**{**self.model_dump(), **update})

    @property
    def last_name(self) -> str:
        parts = self.full_name.split()
        return parts[-1] if parts else ""

    @property
    def email_key(self) -> str:
        return self.email.lower()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Employee):
            return NotImplemented
        return self.email_key == other.email_key

    def __hash__(self) -> int:
        return hash(self.email_key)

    def __str__(self) -> str:
        return (
            f"Employee(full_name={self.full_name!r}, email={self.email!r}, "
            f"company_name={self.company_name!r}, position={self.position.name}, "
            f"salary={self.salary})"
        )
