"""Daily summary service."""

from dataclasses import dataclass

from daily_tracker.domain.bmi import BmiResult
from daily_tracker.domain.records import Entry
from daily_tracker.services.profile import BodyProfileService
from daily_tracker.services.records import DatedRecordStore


@dataclass(frozen=True)
class DailySummary:
    """Aggregates for a single date."""

    date: str
    calories: int
    workout_minutes: int
    entries: list[Entry]
    workouts: list[Entry]
    bmi: BmiResult


@dataclass
class SummaryService:
    """Combines the day's records with the current BMI reading."""

    nutrition_log: DatedRecordStore
    workout_log: DatedRecordStore
    profile_service: BodyProfileService

    def get_day(self, date_key: str) -> DailySummary:
        """Return totals for a date."""
        entries = self.nutrition_log.query_group(date_key)
        workouts = self.workout_log.query_group(date_key)
        return DailySummary(
            date=date_key,
            calories=entries.total,
            workout_minutes=workouts.total,
            entries=entries.entries,
            workouts=workouts.entries,
            bmi=self.profile_service.bmi(),
        )
