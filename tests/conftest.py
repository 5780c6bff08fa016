"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from daily_tracker.config import Settings
from daily_tracker.containers import AppContainer, build_container
from daily_tracker.services.storage import KeyValueStore


@dataclass
class RecordingKeyValueStore(KeyValueStore):
    """In-memory key-value store that records every write."""

    values: dict[str, str] = field(default_factory=dict)
    writes: list[tuple[str, str]] = field(default_factory=list)

    def get(self, key: str) -> str | None:
        return self.values.get(key)

    def set(self, key: str, value: str) -> None:
        self.writes.append((key, value))
        self.values[key] = value


@pytest.fixture
def settings() -> Settings:
    return Settings(storage_backend="memory")


@pytest.fixture
def backend() -> RecordingKeyValueStore:
    return RecordingKeyValueStore()


@pytest.fixture
def container(settings: Settings, backend: RecordingKeyValueStore) -> AppContainer:
    return build_container(settings, backend=backend)
