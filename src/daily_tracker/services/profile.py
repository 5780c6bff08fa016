"""Body profile service."""

from dataclasses import dataclass, replace

from daily_tracker.config import UnitOptions
from daily_tracker.domain.bmi import BmiResult, calculate_bmi
from daily_tracker.domain.profile import BodyProfile
from daily_tracker.domain.units import parse_measurement
from daily_tracker.services.storage import (
    HEIGHT_KEY,
    HEIGHT_UNIT_KEY,
    WEIGHT_KEY,
    WEIGHT_UNIT_KEY,
    KeyValueStore,
)


@dataclass
class BodyProfileService:
    """Keeps the last-entered body measurements and derives BMI from them."""

    backend: KeyValueStore
    units: UnitOptions
    _profile: BodyProfile | None

    def __init__(self, backend: KeyValueStore, units: UnitOptions | None = None) -> None:
        self.backend = backend
        self.units = units or UnitOptions()
        self._profile = None

    def load(self) -> BodyProfile:
        """Read the profile fields from the backend, defaulting absent ones."""
        self._profile = BodyProfile(
            weight=self.backend.get(WEIGHT_KEY) or "",
            weight_unit=self.units.resolve_weight_unit(
                self.backend.get(WEIGHT_UNIT_KEY)
            ),
            height=self.backend.get(HEIGHT_KEY) or "",
            height_unit=self.units.resolve_height_unit(
                self.backend.get(HEIGHT_UNIT_KEY)
            ),
        )
        return self._profile

    def get(self) -> BodyProfile:
        """Return the current profile."""
        if self._profile is None:
            return self.load()
        return self._profile

    def update(
        self,
        weight: str | float | None = None,
        weight_unit: str | None = None,
        height: str | float | None = None,
        height_unit: str | None = None,
    ) -> BodyProfile:
        """Edit any subset of fields and persist all four."""
        profile = self.get()
        changes: dict[str, object] = {}
        if weight is not None:
            changes["weight"] = _as_text(weight)
        if weight_unit is not None:
            changes["weight_unit"] = self.units.resolve_weight_unit(weight_unit)
        if height is not None:
            changes["height"] = _as_text(height)
        if height_unit is not None:
            changes["height_unit"] = self.units.resolve_height_unit(height_unit)
        self._profile = replace(profile, **changes)
        self._persist(self._profile)
        return self._profile

    def bmi(self) -> BmiResult:
        """Return BMI for the current profile."""
        profile = self.get()
        return calculate_bmi(
            parse_measurement(profile.weight),
            profile.weight_unit,
            parse_measurement(profile.height),
            profile.height_unit,
        )

    def _persist(self, profile: BodyProfile) -> None:
        self.backend.set(WEIGHT_KEY, profile.weight)
        self.backend.set(WEIGHT_UNIT_KEY, str(profile.weight_unit))
        self.backend.set(HEIGHT_KEY, profile.height)
        self.backend.set(HEIGHT_UNIT_KEY, str(profile.height_unit))


def _as_text(value: str | float) -> str:
    if isinstance(value, str):
        return value.strip()
    return str(value)
