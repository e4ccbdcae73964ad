from __future__ import annotations

import pytest
from pydantic import ValidationError

from catalog import DEFAULT_CATALOG, build_catalog
from model import TimeOfDay


def test_default_catalog_has_five_rooms_each_with_activities():
    room_ids = [room.id for room in DEFAULT_CATALOG.rooms]
    assert room_ids == ["bedroom", "living", "kitchen", "gym", "bathroom"]
    for room_id in room_ids:
        assert len(DEFAULT_CATALOG.activities_in(room_id)) >= 1
    assert len(DEFAULT_CATALOG.activities) == 21


def test_by_room_keeps_definition_order():
    ids = [row.id for row in DEFAULT_CATALOG.by_room["kitchen"]]
    assert ids == ["table", "fridge", "stove", "microwave", "water"]


def test_sleep_definition():
    sleep = DEFAULT_CATALOG.by_id["sleep"]
    assert sleep.room == "bedroom"
    assert (sleep.energy_cost, sleep.energy_gain) == (0, 40)
    assert (sleep.happiness_gain, sleep.health_gain, sleep.sleep_quality_gain) == (10, 15, 30)
    assert sleep.duration == 480
    assert sleep.time_of_day == TimeOfDay.NIGHT


def test_lookup_of_unknown_ids_returns_none():
    assert DEFAULT_CATALOG.activity("nope") is None
    assert DEFAULT_CATALOG.room("attic") is None
    assert DEFAULT_CATALOG.activities_in("attic") == ()
    assert not DEFAULT_CATALOG.has_room("attic")


def test_lookup_maps_are_copies():
    by_id = DEFAULT_CATALOG.by_id
    by_id.clear()
    assert DEFAULT_CATALOG.activity("sleep") is not None


def test_activities_are_immutable():
    with pytest.raises(ValidationError):
        DEFAULT_CATALOG.activity("sleep").duration = 1


def test_build_catalog_rejects_unknown_room():
    with pytest.raises(ValueError, match="unknown room"):
        build_catalog(
            rooms=[{"id": "bedroom", "name": "Quarto"}],
            activities=[{"id": "x", "name": "X", "room": "attic"}],
        )


def test_build_catalog_rejects_duplicate_activity():
    rows = [{"id": "x", "name": "X", "room": "bedroom"}] * 2
    with pytest.raises(ValueError, match="duplicate activity"):
        build_catalog(rooms=[{"id": "bedroom", "name": "Quarto"}], activities=rows)


def test_build_catalog_validates_fields():
    with pytest.raises(ValidationError):
        build_catalog(
            rooms=[{"id": "bedroom", "name": "Quarto"}],
            activities=[{"id": "x", "name": "X", "room": "bedroom", "duration": -1}],
        )
