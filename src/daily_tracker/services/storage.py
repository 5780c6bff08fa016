"""Key-value storage abstractions."""

from dataclasses import dataclass
from typing import Protocol

ENTRIES_KEY = "ct.entries"
WORKOUTS_KEY = "ct.workouts"
WEIGHT_KEY = "ct.weight"
WEIGHT_UNIT_KEY = "ct.weightUnit"
HEIGHT_KEY = "ct.height"
HEIGHT_UNIT_KEY = "ct.heightUnit"


class KeyValueStore(Protocol):
    """Durable string storage addressed by fixed keys."""

    def get(self, key: str) -> str | None:
        """Return the stored value or None when the key is absent."""

    def set(self, key: str, value: str) -> None:
        """Store a value under a key, replacing any previous value."""


@dataclass
class InMemoryKeyValueStore(KeyValueStore):
    """Non-durable store kept in process memory."""

    _values: dict[str, str]

    def __init__(self, values: dict[str, str] | None = None) -> None:
        self._values = dict(values or {})

    def get(self, key: str) -> str | None:
        """Return a stored value."""
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        """Store a value."""
        self._values[key] = value
