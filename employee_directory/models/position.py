"""Position catalog: the fixed, ordered set of roles an employee can hold."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel


class PositionDetails(BaseModel):
    """Nominal base salary and hierarchy level (lower is more senior)."""

    model_config = {"frozen": True}

    base_salary: int
    level: int


class Position(Enum):
    PRESIDENT = "PRESIDENT"
    VICE_PRESIDENT = "VICE_PRESIDENT"
    MANAGER = "MANAGER"
    PROGRAMMER = "PROGRAMMER"
    INTERN = "INTERN"

    @property
    def details(self) -> PositionDetails:
        return _POSITION_DETAILS[self]

    @property
    def base_salary(self) -> int:
        return self.details.base_salary

    @property
    def level(self) -> int:
        return self.details.level


_POSITION_DETAILS: dict[Position, PositionDetails] = {
    Position.PRESIDENT: PositionDetails(base_salary=25_000, level=1),
    Position.VICE_PRESIDENT: PositionDetails(base_salary=18_000, level=2),
    Position.MANAGER: PositionDetails(base_salary=12_000, level=3),
    Position.PROGRAMMER: PositionDetails(base_salary=8_000, level=4),
    Position.INTERN: PositionDetails(base_salary=3_000, level=5),
}
