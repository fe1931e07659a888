"""
BMI classification engine.
"""

from .engine import (
    advise,
    age_group_of,
    calculate_bmi,
    classify,
    evaluate,
    evaluate_raw,
    healthy_weight_range,
    round_half_up,
)
from .summary import reference_ranges, reference_title, summarize

__all__ = [
    "advise",
    "age_group_of",
    "calculate_bmi",
    "classify",
    "evaluate",
    "evaluate_raw",
    "healthy_weight_range",
    "round_half_up",
    "reference_ranges",
    "reference_title",
    "summarize",
]
