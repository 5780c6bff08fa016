"""Application configuration."""

import os
from dataclasses import dataclass

from pydantic_settings import BaseSettings, SettingsConfigDict

from daily_tracker.domain.units import HeightUnit, WeightUnit

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


@dataclass(frozen=True)
class UnitOptions:
    """Recognised measurement units and the defaults used when one is absent."""

    default_weight_unit: WeightUnit = WeightUnit.KG
    default_height_unit: HeightUnit = HeightUnit.CM

    @property
    def weight_units(self) -> tuple[WeightUnit, ...]:
        return tuple(WeightUnit)

    @property
    def height_units(self) -> tuple[HeightUnit, ...]:
        return tuple(HeightUnit)

    def resolve_weight_unit(self, raw: str | None) -> WeightUnit:
        """Return the matching weight unit or the default."""
        return WeightUnit(_resolve(WeightUnit, raw, self.default_weight_unit))

    def resolve_height_unit(self, raw: str | None) -> HeightUnit:
        """Return the matching height unit or the default."""
        return HeightUnit(_resolve(HeightUnit, raw, self.default_height_unit))


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    storage_backend: str = "file"
    storage_path: str = "daily_tracker.json"
    supabase_url: str | None = None
    supabase_service_key: str | None = None
    supabase_table: str = "kv_store"
    default_weight_unit: WeightUnit = WeightUnit.KG
    default_height_unit: HeightUnit = HeightUnit.CM
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    def unit_options(self) -> UnitOptions:
        """Build unit options from the configured defaults."""
        return UnitOptions(
            default_weight_unit=self.default_weight_unit,
            default_height_unit=self.default_height_unit,
        )


def _resolve(
    enum_type: type[WeightUnit] | type[HeightUnit],
    raw: str | None,
    default: WeightUnit | HeightUnit,
) -> WeightUnit | HeightUnit:
    if raw is None:
        return default
    try:
        return enum_type(raw.strip().lower())
    except ValueError:
        return default
