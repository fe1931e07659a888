"""
Age-adjusted healthy BMI bands.

Each age group has a healthy band [low, high]. The same band drives both
classification and the healthy weight range:

    Underweight : bmi < low
    Normal      : low <= bmi <= high
    Overweight  : high < bmi < high + OBESE_OFFSET
    Obese       : bmi >= high + OBESE_OFFSET

Age groups:
- Child / Teen (2-17): simplified approximation of the BMI-for-age
  percentile charts (~5th percentile = 14, ~84th percentile = 21). Clinical
  assessment uses the percentile tables; this band is a rough stand-in.
- Adult (18-64): WHO thresholds (18.5 / 24.9).
- Senior (65+): slightly elevated band (22 / 27) suggested by geriatric
  health guidelines.
"""

from __future__ import annotations

from dataclasses import dataclass


# Fixed distance from the top of the healthy band to the obese threshold.
# Same for every age group.
OBESE_OFFSET: float = 5.0

MIN_AGE_YEARS = 2

# Age group -> (min_age, max_age) inclusive; None means no upper bound
AGE_GROUP_RANGES: dict[str, tuple[int, int | None]] = {
    "child": (2, 17),
    "adult": (18, 64),
    "senior": (65, None),
}

# Age group -> (bmi_low, bmi_high)
BMI_BANDS: dict[str, tuple[float, float]] = {
    "child": (14.0, 21.0),
    "adult": (18.5, 24.9),
    "senior": (22.0, 27.0),
}

AGE_GROUP_LABELS: dict[str, str] = {
    "child": "Child / Teen",
    "adult": "Adult",
    "senior": "Senior (65+)",
}

AGE_GROUP_NOTES: dict[str, str] = {
    "child": (
        "For children & teens (2-17), BMI is assessed using age-specific "
        "growth charts. These results are an approximation - please consult "
        "a paediatrician for a full assessment."
    ),
    "adult": "",
    "senior": (
        "For adults aged 65+, a slightly higher BMI range (22-27) is "
        "generally considered healthy per geriatric health guidelines."
    ),
}

REFERENCE_TITLES: dict[str, str] = {
    "child": "BMI Categories (Child/Teen, approx.)",
    "adult": "BMI Categories",
    "senior": "BMI Categories (Senior, age-adjusted)",
}


@dataclass(frozen=True)
class CategoryStyle:
    """Display metadata for a BMI category."""
    label: str
    color: str
    sort_order: int


CATEGORY_STYLES: dict[str, CategoryStyle] = {
    "underweight": CategoryStyle(label="Underweight", color="#3b82f6", sort_order=0),
    "normal": CategoryStyle(label="Normal Weight", color="#22c55e", sort_order=1),
    "overweight": CategoryStyle(label="Overweight", color="#f97316", sort_order=2),
    "obese": CategoryStyle(label="Obese", color="#ef4444", sort_order=3),
}


def get_age_group_key(age_years: int) -> str:
    """
    Map an age in whole years to its age group key.

    Raises:
        ValueError: if the age is below the supported minimum of 2 years.
    """
    if age_years < MIN_AGE_YEARS:
        raise ValueError(f"BMI bands only available for ages {MIN_AGE_YEARS}+ (got {age_years})")

    for key, (min_age, max_age) in AGE_GROUP_RANGES.items():
        if age_years >= min_age and (max_age is None or age_years <= max_age):
            return key

    # Unreachable while AGE_GROUP_RANGES is contiguous from MIN_AGE_YEARS
    raise ValueError(f"No age group covers age {age_years}")


def get_band(group: str) -> tuple[float, float]:
    """Get the (low, high) healthy BMI band for an age group."""
    return BMI_BANDS[group]


def obese_threshold(group: str) -> float:
    """BMI at and above which a reading is classified obese."""
    _, high = BMI_BANDS[group]
    return high + OBESE_OFFSET


def _fmt(value: float) -> str:
    """Format a band value the way it is printed in reference tables."""
    return f"{value:g}"


def reference_rows(group: str) -> list[tuple[str, str]]:
    """
    Build the category reference table for an age group.

    Returns:
        List of (category_key, range_text) in category sort order
    """
    low, high = BMI_BANDS[group]
    obese_at = obese_threshold(group)
    return [
        ("underweight", f"< {_fmt(low)}"),
        ("normal", f"{_fmt(low)} – {_fmt(high)}"),
        ("overweight", f"{_fmt(high)} – {_fmt(round(obese_at - 0.1, 1))}"),
        ("obese", f"≥ {_fmt(round(obese_at, 1))}"),
    ]
