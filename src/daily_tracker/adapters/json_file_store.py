"""File-backed key-value store."""

import json
import logging
import os
import tempfile
from dataclasses import dataclass
from pathlib import Path

from daily_tracker.services.storage import KeyValueStore

logger = logging.getLogger(__name__)


@dataclass
class JsonFileKeyValueStore(KeyValueStore):
    """Stores all keys as one JSON object in a file on disk."""

    path: Path

    def get(self, key: str) -> str | None:
        """Return the stored value for a key."""
        value = self._read().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        """Store a value and rewrite the file atomically."""
        values = self._read()
        values[key] = value
        self._write(values)

    def _read(self) -> dict[str, object]:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        except UnicodeDecodeError:
            logger.warning("Ignoring unreadable storage file %s", self.path)
            return {}
        try:
            payload = json.loads(raw)
        except (ValueError, RecursionError):
            logger.warning("Ignoring unreadable storage file %s", self.path)
            return {}
        if not isinstance(payload, dict):
            logger.warning("Ignoring storage file %s: not an object", self.path)
            return {}
        return payload

    def _write(self, values: dict[str, object]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                json.dump(values, handle, ensure_ascii=False, indent=2)
            Path(tmp_name).replace(self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
