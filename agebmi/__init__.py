"""
Agebmi - age-adjusted BMI classification and weight advice.

Typical use:

    from agebmi import validate, evaluate, summarize

    checked = validate("70", "175", "30")
    if checked.ok:
        summary = summarize(evaluate(checked.measurement))
"""

__version__ = "0.1.0"

from agebmi.errors import AgebmiError, InvalidMeasurementError
from agebmi.models import (
    AdviceResult,
    AgeGroup,
    Category,
    Direction,
    ErrorCode,
    FieldError,
    HealthSummary,
    Measurement,
    MeasurementField,
    MessageKind,
    ReferenceRange,
    ValidationResult,
)
from agebmi.validation import validate, validate_field
from agebmi.engines import (
    advise,
    age_group_of,
    calculate_bmi,
    classify,
    evaluate,
    evaluate_raw,
    healthy_weight_range,
    reference_ranges,
    summarize,
)

__all__ = [
    "__version__",
    "AgebmiError",
    "InvalidMeasurementError",
    "AdviceResult",
    "AgeGroup",
    "Category",
    "Direction",
    "ErrorCode",
    "FieldError",
    "HealthSummary",
    "Measurement",
    "MeasurementField",
    "MessageKind",
    "ReferenceRange",
    "ValidationResult",
    "validate",
    "validate_field",
    "advise",
    "age_group_of",
    "calculate_bmi",
    "classify",
    "evaluate",
    "evaluate_raw",
    "healthy_weight_range",
    "reference_ranges",
    "summarize",
]
