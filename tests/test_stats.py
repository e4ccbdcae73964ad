from __future__ import annotations

import pytest

import stats
from catalog import DEFAULT_CATALOG
from model import Activity, SimulationState, StatTier


def test_decay_ten_ticks_reduces_each_stat_by_rate():
    state = SimulationState()

    for _ in range(10):
        stats.apply_decay(state)

    assert state.energy == pytest.approx(79.0)
    assert state.happiness == pytest.approx(69.5)
    assert state.health == pytest.approx(74.8)
    assert state.sleep_quality == pytest.approx(59.7)


def test_decay_floors_at_zero():
    state = SimulationState(energy=0.25, happiness=0.0, health=0.01, sleep_quality=0.05)

    for _ in range(10):
        stats.apply_decay(state)

    assert state.energy == 0.0
    assert state.happiness == 0.0
    assert state.health == 0.0
    assert state.sleep_quality == 0.0


def test_decay_with_zero_rates_is_noop():
    state = SimulationState()
    before = state.stats()

    stats.apply_decay(state, {"energy": 0.0, "happiness": 0.0, "health": 0.0, "sleep_quality": 0.0})

    assert state.stats() == before


def test_apply_sleep_clamps_energy_at_100():
    state = SimulationState()

    deltas = stats.apply_activity(state, DEFAULT_CATALOG.activity("sleep"))

    assert state.stats() == {"energy": 100.0, "happiness": 80.0, "health": 90.0, "sleep_quality": 90.0}
    assert deltas["energy"] == 20.0


def test_apply_activity_clamps_negative_gains_at_zero():
    state = SimulationState(energy=50, happiness=50, health=3, sleep_quality=4)

    stats.apply_activity(state, DEFAULT_CATALOG.activity("videogame"))

    assert state.energy == 35.0
    assert state.happiness == 80.0
    assert state.health == 0.0
    assert state.sleep_quality == 0.0


def test_energy_uses_cost_and_gain_together():
    state = SimulationState(energy=50)
    activity = Activity(id="x", name="X", room="gym", energy_cost=10, energy_gain=20)

    stats.apply_activity(state, activity)

    assert state.energy == 60.0


@pytest.mark.parametrize(
    "value,tier",
    [
        (100, StatTier.EXCELLENT),
        (80, StatTier.EXCELLENT),
        (79.99, StatTier.GOOD),
        (60, StatTier.GOOD),
        (40, StatTier.FAIR),
        (39.9, StatTier.POOR),
        (0, StatTier.POOR),
    ],
)
def test_stat_tier_boundaries(value, tier):
    assert stats.stat_tier(value) == tier


def test_stat_tiers_for_initial_state():
    tiers = stats.stat_tiers(SimulationState())
    assert tiers == {
        "energy": StatTier.EXCELLENT,
        "happiness": StatTier.GOOD,
        "health": StatTier.GOOD,
        "sleep_quality": StatTier.GOOD,
    }
