"""Domain models for dated records."""

from dataclasses import dataclass, field
from enum import StrEnum


class WorkoutType(StrEnum):
    """Fixed set of workout types."""

    CARDIO = "cardio"
    STRENGTH = "strength"
    FLEXIBILITY = "flexibility"
    SPORTS = "sports"
    OTHER = "other"


@dataclass(frozen=True)
class NutritionEntry:
    """A food eaten on a given day."""

    food: str
    calories: int

    @property
    def amount(self) -> int:
        return self.calories

    def to_dict(self) -> dict[str, object]:
        return {"food": self.food, "calories": self.calories}


@dataclass(frozen=True)
class WorkoutEntry:
    """A workout session on a given day."""

    name: str
    type: WorkoutType
    minutes: int

    @property
    def amount(self) -> int:
        return self.minutes

    def to_dict(self) -> dict[str, object]:
        return {"name": self.name, "type": str(self.type), "minutes": self.minutes}


Entry = NutritionEntry | WorkoutEntry


@dataclass(frozen=True)
class DateGroup:
    """Entries for one date, most recent first, with their daily total."""

    date: str
    entries: list[Entry] = field(default_factory=list)
    total: int = 0
