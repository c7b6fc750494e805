"""Exceptions raised by the employee directory."""

from __future__ import annotations

from typing import Any


class DirectoryError(Exception):
    pass


class MissingValueError(DirectoryError):
    """A required argument or field was ``None``."""

    def __init__(self, field: str) -> None:
        super().__init__(f"'{field}' is required")
        self.field = field


class InvalidValueError(DirectoryError):
    """A value is outside the domain allowed for its field."""

    def __init__(self, field: str, value: Any) -> None:
        super().__init__(f"Invalid value for '{field}': {value!r}")
        self.field = field
        self.value = value


class DuplicateEmailError(DirectoryError):
    def __init__(self, email: str) -> None:
        super().__init__(f"Employee with email '{email}' already exists")
        self.email = email
