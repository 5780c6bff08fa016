"""Body-mass-index calculation."""

import math
from dataclasses import dataclass

from daily_tracker.domain.units import to_kilograms, to_meters

INCOMPLETE_INPUT = "Enter weight and height"
UNDERWEIGHT = "Underweight"
NORMAL_WEIGHT = "Normal weight"
OVERWEIGHT = "Overweight"
OBESITY = "Obesity"

_CATEGORY_THRESHOLDS = (
    (18.5, UNDERWEIGHT),
    (25.0, NORMAL_WEIGHT),
    (30.0, OVERWEIGHT),
)


@dataclass(frozen=True)
class BmiResult:
    """BMI value with its category; ``bmi`` is None when input is incomplete."""

    bmi: float | None
    category: str

    def display(self) -> str:
        """Return the BMI rounded to one decimal for display."""
        if self.bmi is None:
            return "BMI: --"
        return f"BMI: {self.bmi:.1f}"


def classify_bmi(bmi: float) -> str:
    """Return the category for a BMI value; thresholds are lower-inclusive."""
    for upper, category in _CATEGORY_THRESHOLDS:
        if bmi < upper:
            return category
    return OBESITY


def calculate_bmi(
    weight_value: float, weight_unit: str, height_value: float, height_unit: str
) -> BmiResult:
    """Compute BMI from a weight and height in any supported units."""
    kg = to_kilograms(weight_value, weight_unit)
    m = to_meters(height_value, height_unit)
    if not _is_positive(kg) or not _is_positive(m):
        return BmiResult(bmi=None, category=INCOMPLETE_INPUT)
    bmi = kg / (m * m)
    return BmiResult(bmi=bmi, category=classify_bmi(bmi))


def _is_positive(value: float) -> bool:
    return math.isfinite(value) and value > 0
