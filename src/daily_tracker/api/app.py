"""FastAPI application factory."""

import logging

from fastapi import FastAPI, HTTPException, Request, status

from daily_tracker.api.models import BodyProfileIn, NutritionEntryIn, WorkoutEntryIn
from daily_tracker.app_logging import configure_logging
from daily_tracker.containers import AppContainer
from daily_tracker.domain.bmi import BmiResult
from daily_tracker.domain.dates import format_date_key
from daily_tracker.domain.profile import BodyProfile
from daily_tracker.domain.records import DateGroup
from daily_tracker.services.records import DatedRecordStore
from daily_tracker.services.summary import DailySummary


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Daily Tracker")
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/days")
    async def list_days(request: Request) -> dict[str, object]:
        """Return dates with at least one entry or workout."""
        state_container: AppContainer = request.app.state.container
        dates = set(state_container.nutrition_log.dates())
        dates.update(state_container.workout_log.dates())
        return {"dates": sorted(dates, reverse=True)}

    @app.get("/days/{day}/summary")
    async def day_summary(day: str, request: Request) -> dict[str, object]:
        """Return the day's calorie and workout totals with the BMI reading."""
        state_container: AppContainer = request.app.state.container
        summary = state_container.summary_service.get_day(_date_key(day))
        return _format_summary(summary)

    @app.get("/days/{day}/entries")
    async def list_entries(day: str, request: Request) -> dict[str, object]:
        """Return the day's food entries and calorie total."""
        state_container: AppContainer = request.app.state.container
        return _format_group(state_container.nutrition_log.query_group(_date_key(day)))

    @app.post("/days/{day}/entries")
    async def add_entry(
        day: str, payload: NutritionEntryIn, request: Request
    ) -> dict[str, object]:
        """Add a food entry; invalid entries are reported as not accepted."""
        state_container: AppContainer = request.app.state.container
        date_key = _date_key(day)
        accepted = state_container.nutrition_log.insert_entry(
            date_key, payload.model_dump()
        )
        if accepted:
            logger.info("Added food entry for %s", date_key)
        return _mutation_response(
            state_container.nutrition_log, date_key, accepted=accepted
        )

    @app.delete("/days/{day}/entries/{index}")
    async def delete_entry(day: str, index: int, request: Request) -> dict[str, object]:
        """Delete a food entry by position."""
        state_container: AppContainer = request.app.state.container
        date_key = _date_key(day)
        deleted = state_container.nutrition_log.delete_entry(date_key, index)
        return _mutation_response(
            state_container.nutrition_log, date_key, deleted=deleted
        )

    @app.get("/days/{day}/workouts")
    async def list_workouts(day: str, request: Request) -> dict[str, object]:
        """Return the day's workouts and minute total."""
        state_container: AppContainer = request.app.state.container
        return _format_group(state_container.workout_log.query_group(_date_key(day)))

    @app.post("/days/{day}/workouts")
    async def add_workout(
        day: str, payload: WorkoutEntryIn, request: Request
    ) -> dict[str, object]:
        """Add a workout; invalid workouts are reported as not accepted."""
        state_container: AppContainer = request.app.state.container
        date_key = _date_key(day)
        accepted = state_container.workout_log.insert_entry(
            date_key, payload.model_dump()
        )
        if accepted:
            logger.info("Added workout for %s", date_key)
        return _mutation_response(
            state_container.workout_log, date_key, accepted=accepted
        )

    @app.delete("/days/{day}/workouts/{index}")
    async def delete_workout(
        day: str, index: int, request: Request
    ) -> dict[str, object]:
        """Delete a workout by position."""
        state_container: AppContainer = request.app.state.container
        date_key = _date_key(day)
        deleted = state_container.workout_log.delete_entry(date_key, index)
        return _mutation_response(
            state_container.workout_log, date_key, deleted=deleted
        )

    @app.get("/profile")
    async def get_profile(request: Request) -> dict[str, object]:
        """Return the body profile and its BMI reading."""
        state_container: AppContainer = request.app.state.container
        service = state_container.profile_service
        return _format_profile(service.get(), service.bmi())

    @app.put("/profile")
    async def update_profile(
        payload: BodyProfileIn, request: Request
    ) -> dict[str, object]:
        """Edit body measurements."""
        state_container: AppContainer = request.app.state.container
        service = state_container.profile_service
        profile = service.update(**payload.model_dump())
        return _format_profile(profile, service.bmi())

    @app.get("/profile/bmi")
    async def get_bmi(request: Request) -> dict[str, object]:
        """Return the BMI for the current body profile."""
        state_container: AppContainer = request.app.state.container
        return _format_bmi(state_container.profile_service.bmi())

    return app


def _date_key(day: str) -> str:
    if day == "today":
        return format_date_key(None)
    try:
        return format_date_key(day)
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid date: {day}",
        ) from exc


def _format_group(group: DateGroup) -> dict[str, object]:
    return {
        "date": group.date,
        "entries": [entry.to_dict() for entry in group.entries],
        "total": group.total,
    }


def _mutation_response(
    store: DatedRecordStore, date_key: str, **flags: bool
) -> dict[str, object]:
    response = _format_group(store.query_group(date_key))
    response.update(flags)
    return response


def _format_bmi(result: BmiResult) -> dict[str, object]:
    return {
        "bmi": result.bmi,
        "category": result.category,
        "display": result.display(),
    }


def _format_profile(profile: BodyProfile, bmi: BmiResult) -> dict[str, object]:
    return {
        "weight": profile.weight,
        "weight_unit": str(profile.weight_unit),
        "height": profile.height,
        "height_unit": str(profile.height_unit),
        "bmi": _format_bmi(bmi),
    }


def _format_summary(summary: DailySummary) -> dict[str, object]:
    return {
        "date": summary.date,
        "calories": summary.calories,
        "workout_minutes": summary.workout_minutes,
        "entries": [entry.to_dict() for entry in summary.entries],
        "workouts": [entry.to_dict() for entry in summary.workouts],
        "bmi": _format_bmi(summary.bmi),
    }
