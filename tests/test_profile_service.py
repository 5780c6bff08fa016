"""Tests for the body profile service."""

import pytest

from daily_tracker.config import UnitOptions
from daily_tracker.domain.units import HeightUnit, WeightUnit
from daily_tracker.services.profile import BodyProfileService
from daily_tracker.services.storage import (
    HEIGHT_KEY,
    HEIGHT_UNIT_KEY,
    WEIGHT_KEY,
    WEIGHT_UNIT_KEY,
)
from tests.conftest import RecordingKeyValueStore


def test_load_defaults_when_backend_empty() -> None:
    service = BodyProfileService(RecordingKeyValueStore())

    profile = service.load()

    assert profile.weight == ""
    assert profile.weight_unit is WeightUnit.KG
    assert profile.height == ""
    assert profile.height_unit is HeightUnit.CM
    assert service.bmi().bmi is None
    assert service.bmi().category == "Enter weight and height"


def test_load_reads_stored_fields() -> None:
    backend = RecordingKeyValueStore(
        values={
            WEIGHT_KEY: "154",
            WEIGHT_UNIT_KEY: "lb",
            HEIGHT_KEY: "69",
            HEIGHT_UNIT_KEY: "in",
        }
    )
    service = BodyProfileService(backend)

    profile = service.load()

    assert profile.weight_unit is WeightUnit.LB
    assert profile.height_unit is HeightUnit.IN
    assert service.bmi().bmi == pytest.approx(22.74, abs=0.01)


def test_load_falls_back_on_unknown_units() -> None:
    backend = RecordingKeyValueStore(
        values={WEIGHT_UNIT_KEY: "stone", HEIGHT_UNIT_KEY: "ft"}
    )
    units = UnitOptions(
        default_weight_unit=WeightUnit.LB, default_height_unit=HeightUnit.M
    )

    profile = BodyProfileService(backend, units).load()

    assert profile.weight_unit is WeightUnit.LB
    assert profile.height_unit is HeightUnit.M


def test_update_persists_every_field() -> None:
    backend = RecordingKeyValueStore()
    service = BodyProfileService(backend)

    service.update(weight="70")

    assert backend.values == {
        WEIGHT_KEY: "70",
        WEIGHT_UNIT_KEY: "kg",
        HEIGHT_KEY: "",
        HEIGHT_UNIT_KEY: "cm",
    }
    assert [key for key, _ in backend.writes] == [
        WEIGHT_KEY,
        WEIGHT_UNIT_KEY,
        HEIGHT_KEY,
        HEIGHT_UNIT_KEY,
    ]


def test_update_computes_bmi_and_survives_reload() -> None:
    backend = RecordingKeyValueStore()
    service = BodyProfileService(backend)

    service.update(weight="70", height="1,75", height_unit="m")
    result = service.bmi()

    assert result.bmi == pytest.approx(22.857, abs=0.001)
    assert result.category == "Normal weight"

    reloaded = BodyProfileService(backend)
    reloaded.load()
    assert reloaded.bmi() == result


def test_update_accepts_numbers() -> None:
    service = BodyProfileService(RecordingKeyValueStore())

    profile = service.update(weight=80.5, height=180)

    assert profile.weight == "80.5"
    assert profile.height == "180"
    assert service.bmi().category == "Normal weight"
