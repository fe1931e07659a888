"""
Raw input validation.
"""

from .validator import (
    ERROR_MESSAGES,
    check_age,
    check_height,
    check_weight,
    validate,
    validate_field,
)

__all__ = [
    "ERROR_MESSAGES",
    "check_age",
    "check_height",
    "check_weight",
    "validate",
    "validate_field",
]
