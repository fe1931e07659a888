"""
Age-adjusted BMI band tables.
"""

from .age_adjusted import (
    AGE_GROUP_LABELS,
    AGE_GROUP_NOTES,
    AGE_GROUP_RANGES,
    BMI_BANDS,
    CATEGORY_STYLES,
    MIN_AGE_YEARS,
    OBESE_OFFSET,
    REFERENCE_TITLES,
    CategoryStyle,
    get_age_group_key,
    get_band,
    obese_threshold,
    reference_rows,
)

__all__ = [
    "AGE_GROUP_LABELS",
    "AGE_GROUP_NOTES",
    "AGE_GROUP_RANGES",
    "BMI_BANDS",
    "CATEGORY_STYLES",
    "MIN_AGE_YEARS",
    "OBESE_OFFSET",
    "REFERENCE_TITLES",
    "CategoryStyle",
    "get_age_group_key",
    "get_band",
    "obese_threshold",
    "reference_rows",
]
