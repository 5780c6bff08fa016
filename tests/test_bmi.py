"""Tests for the BMI calculator."""

import math

import pytest

from daily_tracker.domain.bmi import BmiResult, calculate_bmi, classify_bmi


def test_calculate_bmi_metric_example() -> None:
    result = calculate_bmi(70, "kg", 175, "cm")

    assert result.bmi == pytest.approx(22.857142857, abs=1e-6)
    assert result.category == "Normal weight"
    assert result.display() == "BMI: 22.9"


def test_calculate_bmi_is_unit_invariant() -> None:
    baseline = calculate_bmi(70, "kg", 1.75, "m").bmi
    pounds = 70 / 0.45359237
    inches = 175 / 2.54

    variants = [
        calculate_bmi(pounds, "lb", 175, "cm"),
        calculate_bmi(70, "kg", inches, "in"),
        calculate_bmi(pounds, "lb", inches, "in"),
        calculate_bmi(70, "kg", 175, "cm"),
    ]

    for variant in variants:
        assert variant.bmi == pytest.approx(baseline, abs=1e-9)


@pytest.mark.parametrize(
    ("weight", "expected"),
    [
        (18.4, "Underweight"),
        (18.5, "Normal weight"),
        (24.999, "Normal weight"),
        (25.0, "Overweight"),
        (29.999, "Overweight"),
        (30.0, "Obesity"),
        (45.0, "Obesity"),
    ],
)
def test_category_boundaries_are_lower_inclusive(weight, expected) -> None:
    result = calculate_bmi(weight, "kg", 1, "m")

    assert result.bmi == weight
    assert result.category == expected
    assert classify_bmi(weight) == expected


@pytest.mark.parametrize(
    ("weight", "height"),
    [
        (0, 175),
        (-70, 175),
        (70, 0),
        (70, -1),
        (math.nan, 175),
        (70, math.inf),
        (None, 175),
        (70, None),
    ],
)
def test_incomplete_input_returns_sentinel(weight, height) -> None:
    result = calculate_bmi(weight, "kg", height, "cm")

    assert result == BmiResult(bmi=None, category="Enter weight and height")
    assert result.display() == "BMI: --"
