"""
Exceptions raised by Agebmi.

Validation itself never raises: field errors are collected and returned.
These exceptions are for callers that ask to proceed with invalid input.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from agebmi.models import FieldError


class AgebmiError(Exception):
    """Base class for Agebmi errors."""


class InvalidMeasurementError(AgebmiError, ValueError):
    """Raised when evaluation is requested for input that failed validation."""

    def __init__(self, errors: list[FieldError]):
        self.errors = list(errors)
        detail = "; ".join(f"{e.field.value}: {e.message}" for e in self.errors)
        super().__init__(f"Invalid measurement ({detail})" if detail else "Invalid measurement")

    def as_dict(self) -> dict[str, dict[str, str]]:
        """Errors keyed by field name, for API responses."""
        return {
            e.field.value: {"code": e.code.value, "message": e.message}
            for e in self.errors
        }
