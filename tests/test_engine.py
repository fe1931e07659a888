"""
Tests for the BMI classification engine.
"""

import itertools
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest

from agebmi.engines import (
    advise,
    age_group_of,
    calculate_bmi,
    classify,
    evaluate,
    healthy_weight_range,
    round_half_up,
)
from agebmi.models import AgeGroup, Category, Direction, Measurement, MessageKind
from knowledge.bands import AGE_GROUP_RANGES


class TestRounding:

    @pytest.mark.parametrize("value,places,expected", [
        (2.675, 2, 2.68),
        (1.005, 2, 1.01),
        (0.05, 1, 0.1),
        (53.465, 1, 53.5),
        (2.5, 0, 3.0),
        (-0.05, 1, -0.1),
    ])
    def test_half_up(self, value, places, expected):
        assert round_half_up(value, places) == expected


class TestAgeGroups:

    @pytest.mark.parametrize("age,group", [
        (2, AgeGroup.CHILD),
        (17, AgeGroup.CHILD),
        (18, AgeGroup.ADULT),
        (64, AgeGroup.ADULT),
        (65, AgeGroup.SENIOR),
        (120, AgeGroup.SENIOR),
    ])
    def test_boundaries(self, age, group):
        assert age_group_of(age) == group

    def test_partition_is_total_and_disjoint(self):
        for age in range(2, 121):
            matches = [
                key for key, (lo, hi) in AGE_GROUP_RANGES.items()
                if age >= lo and (hi is None or age <= hi)
            ]
            assert len(matches) == 1, age
            assert age_group_of(age).value == matches[0]

    def test_below_minimum_rejected(self):
        with pytest.raises(ValueError):
            age_group_of(1)


class TestBMI:

    @pytest.mark.parametrize("weight,height,expected", [
        (70, 175, 22.86),
        (45, 170, 15.57),
        (90, 170, 31.14),
        (20, 110, 16.53),
        (100, 170, 34.6),
    ])
    def test_calculate(self, weight, height, expected):
        assert calculate_bmi(weight, height) == expected

    @pytest.mark.parametrize("weight,height,expected", [
        (2.0, 80, 3.12),
        (1.2, 80, 1.87),
    ])
    def test_rounds_float_quotient(self, weight, height, expected):
        # 0.8 * 0.8 is 0.6400000000000001, pulling the quotient just below the half
        assert calculate_bmi(weight, height) == expected


class TestClassify:

    @pytest.mark.parametrize("bmi,category", [
        (18.49, Category.UNDERWEIGHT),
        (18.5, Category.NORMAL),
        (24.9, Category.NORMAL),
        (24.91, Category.OVERWEIGHT),
        (29.89, Category.OVERWEIGHT),
        (29.9, Category.OBESE),
        (29.91, Category.OBESE),
    ])
    def test_adult_boundaries(self, bmi, category):
        assert classify(bmi, AgeGroup.ADULT) == category

    @pytest.mark.parametrize("bmi,category", [
        (13.99, Category.UNDERWEIGHT),
        (14, Category.NORMAL),
        (21, Category.NORMAL),
        (21.01, Category.OVERWEIGHT),
        (25.99, Category.OVERWEIGHT),
        (26, Category.OBESE),
    ])
    def test_child_boundaries(self, bmi, category):
        assert classify(bmi, AgeGroup.CHILD) == category

    @pytest.mark.parametrize("bmi,category", [
        (21.99, Category.UNDERWEIGHT),
        (22, Category.NORMAL),
        (27, Category.NORMAL),
        (27.01, Category.OVERWEIGHT),
        (31.99, Category.OVERWEIGHT),
        (32, Category.OBESE),
    ])
    def test_senior_boundaries(self, bmi, category):
        assert classify(bmi, AgeGroup.SENIOR) == category

    def test_same_bmi_differs_by_age_group(self):
        assert classify(20.0, AgeGroup.CHILD) == Category.NORMAL
        assert classify(20.0, AgeGroup.ADULT) == Category.NORMAL
        assert classify(20.0, AgeGroup.SENIOR) == Category.UNDERWEIGHT
        assert classify(26.0, AgeGroup.SENIOR) == Category.NORMAL
        assert classify(26.0, AgeGroup.ADULT) == Category.OVERWEIGHT
        assert classify(26.0, AgeGroup.CHILD) == Category.OBESE


class TestHealthyRange:

    @pytest.mark.parametrize("height,group,expected", [
        (175, AgeGroup.ADULT, (56.7, 76.3)),
        (170, AgeGroup.ADULT, (53.5, 72.0)),
        (170, AgeGroup.SENIOR, (63.6, 78.0)),
        (110, AgeGroup.CHILD, (16.9, 25.4)),
    ])
    def test_range(self, height, group, expected):
        assert healthy_weight_range(height, group) == expected


class TestAdvise:

    def test_normal(self):
        assert advise(70, Category.NORMAL, 56.7, 76.3) == (0.0, Direction.NONE, MessageKind.CONGRATULATE)

    def test_underweight(self):
        assert advise(45, Category.UNDERWEIGHT, 53.5, 72.0) == (8.5, Direction.GAIN, MessageKind.SUGGEST_GAIN)

    def test_overweight(self):
        assert advise(90, Category.OVERWEIGHT, 63.6, 78.0) == (12.0, Direction.LOSE, MessageKind.SUGGEST_LOSE)

    def test_obese(self):
        assert advise(100, Category.OBESE, 53.5, 72.0) == (28.0, Direction.LOSE, MessageKind.SUGGEST_LOSE_URGENT)

    def test_delta_never_negative(self):
        # Weight just under the unrounded bound but above the rounded one
        delta, direction, _ = advise(53.43, Category.UNDERWEIGHT, 53.4, 72.0)

        assert delta == 0.0
        assert direction == Direction.GAIN


class TestEvaluate:

    def test_scenario_a(self):
        result = evaluate(Measurement(weight_kg=70, height_cm=175, age_years=30))

        assert result.bmi == 22.86
        assert result.category == Category.NORMAL
        assert (result.healthy_min_kg, result.healthy_max_kg) == (56.7, 76.3)
        assert result.direction == Direction.NONE
        assert result.message_kind == MessageKind.CONGRATULATE

    def test_scenario_c_obese_threshold_for_seniors(self):
        result = evaluate(Measurement(weight_kg=90, height_cm=170, age_years=70))

        assert result.bmi < result.bmi_high + 5
        assert result.category == Category.OVERWEIGHT

    def test_each_call_is_fresh(self):
        m = Measurement(weight_kg=70, height_cm=175, age_years=30)
        first = evaluate(m)
        second = evaluate(m)

        assert first == second
        assert first is not second

    def test_extreme_small_height_is_total(self):
        result = evaluate(Measurement(weight_kg=500, height_cm=1e-200, age_years=30))

        assert result.category == Category.OBESE
        assert result.delta_kg >= 0


WEIGHTS = [0.5, 5.5, 20, 45, 60, 70, 85.3, 120, 250, 500]
HEIGHTS = [50, 110, 150, 170, 175.5, 200, 250, 300]
AGES = [2, 10, 17, 18, 40, 64, 65, 90, 120]


@pytest.mark.parametrize("weight,height,age", list(itertools.product(WEIGHTS, HEIGHTS, AGES)))
def test_result_invariants(weight, height, age):
    result = evaluate(Measurement(weight_kg=weight, height_cm=height, age_years=age))
    h2 = (height / 100) ** 2
    # Rounding of the BMI (2 dp) and of the healthy bounds (1 dp)
    tolerance = 0.005 * h2 + 0.05 + 1e-9

    assert result.bmi >= 0
    assert result.bmi == pytest.approx(weight / h2, abs=0.005 + 1e-9)
    assert result.delta_kg >= 0

    if result.category == Category.NORMAL:
        assert result.direction == Direction.NONE
        assert result.healthy_min_kg - tolerance <= weight <= result.healthy_max_kg + tolerance
    elif result.category == Category.UNDERWEIGHT:
        assert result.direction == Direction.GAIN
        assert weight <= result.healthy_min_kg + tolerance
        assert result.delta_kg == pytest.approx(max(result.healthy_min_kg - weight, 0), abs=0.05 + 1e-9)
    else:
        assert result.direction == Direction.LOSE
        assert weight >= result.healthy_max_kg - tolerance
        assert result.delta_kg == pytest.approx(max(weight - result.healthy_max_kg, 0), abs=0.05 + 1e-9)
