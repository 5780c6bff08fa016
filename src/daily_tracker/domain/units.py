"""Unit conversion for body measurements.

Weights are normalised to kilograms and heights to meters. Conversions never
raise: anything that is not a finite number maps to NaN and is left for the
caller to treat as missing input.
"""

import math
import re
from enum import StrEnum

POUND_IN_KG = 0.45359237
INCH_IN_M = 0.0254

_LEADING_NUMBER = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


class WeightUnit(StrEnum):
    """Supported weight units."""

    KG = "kg"
    LB = "lb"


class HeightUnit(StrEnum):
    """Supported height units."""

    M = "m"
    CM = "cm"
    IN = "in"


def to_kilograms(weight: float, unit: str) -> float:
    """Convert a weight to kilograms."""
    if not _is_finite(weight):
        return math.nan
    if unit == WeightUnit.LB:
        return weight * POUND_IN_KG
    return weight


def to_meters(height: float, unit: str) -> float:
    """Convert a height to meters; unknown units are taken as meters."""
    if not _is_finite(height):
        return math.nan
    if unit == HeightUnit.IN:
        return height * INCH_IN_M
    if unit == HeightUnit.CM:
        return height / 100
    return height


def parse_measurement(value: object) -> float:
    """Parse user-entered numeric text, accepting ``,`` as decimal separator.

    Only the leading number is read, so ``"120 kcal"`` parses as 120.
    """
    if isinstance(value, bool):
        return math.nan
    if isinstance(value, int | float):
        return float(value) if _is_finite(value) else math.nan
    if not isinstance(value, str):
        return math.nan
    match = _LEADING_NUMBER.match(value.replace(",", ".").lstrip())
    if match is None:
        return math.nan
    parsed = float(match.group())
    return parsed if math.isfinite(parsed) else math.nan


def _is_finite(value: object) -> bool:
    if isinstance(value, bool) or not isinstance(value, int | float):
        return False
    return math.isfinite(value)
