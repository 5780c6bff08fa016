"""Body profile domain model."""

from dataclasses import dataclass

from daily_tracker.domain.units import HeightUnit, WeightUnit


@dataclass(frozen=True)
class BodyProfile:
    """Last-entered body measurements, kept as the text the user typed."""

    weight: str
    weight_unit: WeightUnit
    height: str
    height_unit: HeightUnit
