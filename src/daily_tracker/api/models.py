"""Pydantic models for API request payloads."""

from pydantic import BaseModel


class NutritionEntryIn(BaseModel):
    """Food entry submitted by the client."""

    food: str = ""
    calories: float | str | None = None


class WorkoutEntryIn(BaseModel):
    """Workout session submitted by the client."""

    name: str = ""
    type: str | None = None
    minutes: float | str | None = None


class BodyProfileIn(BaseModel):
    """Partial body profile edit."""

    weight: str | float | None = None
    weight_unit: str | None = None
    height: str | float | None = None
    height_unit: str | None = None
