"""Dependency container wiring for the application."""

import logging
from dataclasses import dataclass
from pathlib import Path

from supabase import create_client

from daily_tracker.adapters.json_file_store import JsonFileKeyValueStore
from daily_tracker.adapters.supabase_kv_store import SupabaseKeyValueStore
from daily_tracker.config import Settings
from daily_tracker.services.profile import BodyProfileService
from daily_tracker.services.records import (
    DatedRecordStore,
    create_nutrition_log,
    create_workout_log,
)
from daily_tracker.services.storage import InMemoryKeyValueStore, KeyValueStore
from daily_tracker.services.summary import SummaryService

logger = logging.getLogger(__name__)


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    backend: KeyValueStore
    nutrition_log: DatedRecordStore
    workout_log: DatedRecordStore
    profile_service: BodyProfileService
    summary_service: SummaryService


def build_backend(settings: Settings) -> KeyValueStore:
    """Create the key-value backend selected in settings."""
    backend = settings.storage_backend.strip().lower()
    if backend == "memory":
        return InMemoryKeyValueStore()
    if backend == "file":
        return JsonFileKeyValueStore(Path(settings.storage_path))
    if backend == "supabase":
        if not settings.supabase_url or not settings.supabase_service_key:
            raise ValueError("Supabase backend requires URL and service key")
        client = create_client(settings.supabase_url, settings.supabase_service_key)
        return SupabaseKeyValueStore(client, table=settings.supabase_table)
    raise ValueError(f"Unknown storage backend: {settings.storage_backend}")


def build_container(
    settings: Settings | None = None, backend: KeyValueStore | None = None
) -> AppContainer:
    """Create the default dependency container and load persisted state."""
    resolved_settings = settings or Settings()
    resolved_backend = backend if backend is not None else build_backend(
        resolved_settings
    )
    nutrition_log = create_nutrition_log(resolved_backend)
    workout_log = create_workout_log(resolved_backend)
    profile_service = BodyProfileService(
        resolved_backend, resolved_settings.unit_options()
    )
    for store in (nutrition_log, workout_log):
        result = store.load()
        logger.info(
            "Loaded %s log: %s (%d dates)", store.kind.name, result.status, result.dates
        )
    profile_service.load()
    summary_service = SummaryService(
        nutrition_log=nutrition_log,
        workout_log=workout_log,
        profile_service=profile_service,
    )
    return AppContainer(
        settings=resolved_settings,
        backend=resolved_backend,
        nutrition_log=nutrition_log,
        workout_log=workout_log,
        profile_service=profile_service,
        summary_service=summary_service,
    )
