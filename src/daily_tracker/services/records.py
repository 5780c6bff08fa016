"""Dated record store for nutrition entries and workout sessions.

Each store owns one mapping of date key to entries (most recent first) and
writes the whole mapping back to the key-value backend after every mutation.
Persisted state that cannot be read is treated as empty, and invalid input
is refused without touching state, so no operation here raises for bad data.
"""

import json
import logging
import math
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import StrEnum

from daily_tracker.domain.records import (
    DateGroup,
    Entry,
    NutritionEntry,
    WorkoutEntry,
    WorkoutType,
)
from daily_tracker.domain.units import parse_measurement
from daily_tracker.services.storage import ENTRIES_KEY, WORKOUTS_KEY, KeyValueStore

logger = logging.getLogger(__name__)


class LoadStatus(StrEnum):
    """Outcome of reading persisted state."""

    OK = "ok"
    EMPTY = "empty"


@dataclass(frozen=True)
class LoadResult:
    """Result of loading a mapping from the backend."""

    status: LoadStatus
    dates: int = 0


@dataclass(frozen=True)
class RecordKind:
    """Describes one kind of dated record and how it is stored."""

    name: str
    storage_key: str
    build: Callable[[Mapping[str, object]], Entry | None]


@dataclass
class DatedRecordStore:
    """Date-keyed entries of a single kind backed by a key-value store."""

    backend: KeyValueStore
    kind: RecordKind
    _groups: dict[str, list[Entry]]
    _loaded: bool

    def __init__(self, backend: KeyValueStore, kind: RecordKind) -> None:
        self.backend = backend
        self.kind = kind
        self._groups = {}
        self._loaded = False

    def load(self) -> LoadResult:
        """Replace in-memory state with the persisted mapping."""
        self._loaded = True
        raw = self.backend.get(self.kind.storage_key)
        if raw is None:
            self._groups = {}
            return LoadResult(status=LoadStatus.EMPTY)
        try:
            payload = json.loads(raw)
        except (ValueError, RecursionError):
            logger.warning("Discarding unreadable %s state", self.kind.name)
            self._groups = {}
            return LoadResult(status=LoadStatus.EMPTY)
        if not isinstance(payload, dict):
            logger.warning("Discarding %s state that is not a mapping", self.kind.name)
            self._groups = {}
            return LoadResult(status=LoadStatus.EMPTY)
        self._groups = _parse_groups(payload, self.kind)
        return LoadResult(status=LoadStatus.OK, dates=len(self._groups))

    def persist(self) -> None:
        """Write the whole mapping to the backend."""
        payload = {
            date_key: [entry.to_dict() for entry in entries]
            for date_key, entries in self._groups.items()
        }
        self.backend.set(
            self.kind.storage_key,
            json.dumps(payload, separators=(",", ":"), ensure_ascii=False),
        )

    def insert_entry(self, date_key: str, record: Mapping[str, object]) -> bool:
        """Prepend a record to a date's entries; invalid records are refused."""
        self._ensure_loaded()
        entry = self.kind.build(record)
        if entry is None:
            logger.debug("Refused invalid %s record for %s", self.kind.name, date_key)
            return False
        self._groups.setdefault(date_key, []).insert(0, entry)
        self.persist()
        return True

    def delete_entry(self, date_key: str, index: int) -> bool:
        """Remove the entry at a position; out-of-range positions are ignored."""
        self._ensure_loaded()
        entries = self._groups.get(date_key, [])
        deleted = 0 <= index < len(entries)
        if deleted:
            del entries[index]
        self.persist()
        return deleted

    def query_group(self, date_key: str) -> DateGroup:
        """Return a date's entries and their total."""
        self._ensure_loaded()
        entries = list(self._groups.get(date_key, []))
        total = sum(entry.amount for entry in entries)
        return DateGroup(date=date_key, entries=entries, total=total)

    def dates(self) -> list[str]:
        """Return dates that have entries, newest first."""
        self._ensure_loaded()
        return sorted(
            (date_key for date_key, entries in self._groups.items() if entries),
            reverse=True,
        )

    def _ensure_loaded(self) -> None:
        if not self._loaded:
            self.load()


def build_nutrition_entry(record: Mapping[str, object]) -> NutritionEntry | None:
    """Validate a raw nutrition record, rounding calories."""
    food = _clean_text(record.get("food"))
    calories = _clean_amount(record.get("calories"))
    if food is None or calories is None:
        return None
    return NutritionEntry(food=food, calories=calories)


def build_workout_entry(record: Mapping[str, object]) -> WorkoutEntry | None:
    """Validate a raw workout record, rounding minutes."""
    name = _clean_text(record.get("name"))
    minutes = _clean_amount(record.get("minutes"))
    workout_type = _clean_workout_type(record.get("type"))
    if name is None or minutes is None or workout_type is None:
        return None
    return WorkoutEntry(name=name, type=workout_type, minutes=minutes)


NUTRITION = RecordKind(
    name="nutrition",
    storage_key=ENTRIES_KEY,
    build=build_nutrition_entry,
)

WORKOUTS = RecordKind(
    name="workout",
    storage_key=WORKOUTS_KEY,
    build=build_workout_entry,
)


def create_nutrition_log(backend: KeyValueStore) -> DatedRecordStore:
    """Return a store for food-intake entries."""
    return DatedRecordStore(backend, NUTRITION)


def create_workout_log(backend: KeyValueStore) -> DatedRecordStore:
    """Return a store for workout sessions."""
    return DatedRecordStore(backend, WORKOUTS)


def _parse_groups(
    payload: dict[object, object], kind: RecordKind
) -> dict[str, list[Entry]]:
    groups: dict[str, list[Entry]] = {}
    for date_key, rows in payload.items():
        if not isinstance(rows, list):
            logger.warning("Skipping %s group %r: not a list", kind.name, date_key)
            continue
        entries: list[Entry] = []
        for row in rows:
            entry = kind.build(row) if isinstance(row, dict) else None
            if entry is None:
                logger.warning("Skipping malformed %s record on %s", kind.name, date_key)
                continue
            entries.append(entry)
        groups[str(date_key)] = entries
    return groups


def _clean_text(value: object) -> str | None:
    if not isinstance(value, str):
        return None
    text = value.strip()
    return text or None


def _clean_amount(value: object) -> int | None:
    amount = parse_measurement(value)
    if math.isnan(amount) or amount < 0:
        return None
    # Halves round up.
    return math.floor(amount + 0.5)


def _clean_workout_type(value: object) -> WorkoutType | None:
    if value is None or value == "":
        return WorkoutType.OTHER
    if not isinstance(value, str):
        return None
    try:
        return WorkoutType(value.strip().lower())
    except ValueError:
        return None
