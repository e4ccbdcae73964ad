from __future__ import annotations

import pytest

import config
from catalog import DEFAULT_CATALOG
from model import ActivityOutcome, SimulationState, Weekday
from resolver import ActivityResolver, push_notification, recent_notifications


def _resolver(**kwargs) -> ActivityResolver:
    return ActivityResolver(DEFAULT_CATALOG, **kwargs)


def test_perform_sleep_from_initial_state():
    state = SimulationState()

    result = _resolver().perform(state, "sleep", now=0.0)

    assert result.outcome == ActivityOutcome.PERFORMED
    assert state.stats() == {"energy": 100.0, "happiness": 80.0, "health": 90.0, "sleep_quality": 90.0}
    assert state.game_time.hour == 15 and state.game_time.minute == 30
    assert state.day_of_week == Weekday.MONDAY
    assert "sleep" in state.active_cooldowns
    assert state.cooldown_expiry_by_id["sleep"] == config.ACTIVITY_COOLDOWN_SECONDS
    assert state.completed_activities == ["sleep"]
    assert state.notifications == ["Uma boa noite de sono restaurador (+10 felicidade)"]


def test_insufficient_energy_changes_nothing_but_one_notification():
    state = SimulationState(energy=20)
    before = state.model_copy(deep=True)

    result = _resolver().perform(state, "exercise", now=0.0)

    assert result.outcome == ActivityOutcome.INSUFFICIENT_ENERGY
    assert state.stats() == before.stats()
    assert state.game_time == before.game_time
    assert state.notifications == ["Energia insuficiente para Levantar Peso!"]
    assert state.completed_activities == []
    assert state.cooldown_expiry_by_id == {}


def test_energy_gate_applies_even_when_net_energy_is_positive():
    state = SimulationState(energy=4)

    result = _resolver().perform(state, "fridge", now=0.0)

    assert result.outcome == ActivityOutcome.INSUFFICIENT_ENERGY
    assert state.energy == 4


def test_energy_equal_to_cost_is_affordable():
    state = SimulationState(energy=30)

    result = _resolver().perform(state, "exercise", now=0.0)

    assert result.performed
    assert state.energy == 0.0


def test_second_attempt_before_cooldown_is_silent_noop():
    state = SimulationState()
    resolver = _resolver()
    resolver.perform(state, "water", now=0.0)
    after_first = state.model_copy(deep=True)

    result = resolver.perform(state, "water", now=10.0)

    assert result.outcome == ActivityOutcome.ON_COOLDOWN
    assert state == after_first


def test_cooldown_elapses_after_thirty_seconds():
    state = SimulationState()
    resolver = _resolver()
    resolver.perform(state, "water", now=0.0)

    assert resolver.is_on_cooldown(state, "water", now=29.9)
    assert not resolver.is_on_cooldown(state, "water", now=30.0)
    assert resolver.perform(state, "water", now=30.0).performed
    assert state.completed_activities == ["water", "water"]


def test_expire_cooldown_ignores_stale_expiry():
    state = SimulationState()
    resolver = _resolver()
    resolver.perform(state, "water", now=0.0)
    resolver.expire_cooldown(state, "water", now=30.0)
    resolver.perform(state, "water", now=30.0)

    assert resolver.expire_cooldown(state, "water", now=31.0) is False
    assert "water" in state.active_cooldowns
    assert resolver.expire_cooldown(state, "water", now=60.0) is True
    assert "water" not in state.active_cooldowns


def test_unknown_activity_is_noop():
    state = SimulationState()
    before = state.model_copy(deep=True)

    result = _resolver().perform(state, "teleport", now=0.0)

    assert result.outcome == ActivityOutcome.UNKNOWN_ACTIVITY
    assert state == before


def test_perform_crossing_midnight_reports_day_change():
    state = SimulationState(game_time=config.EPOCH_START.replace(hour=22, minute=0))

    result = _resolver().perform(state, "sleep", now=0.0)

    assert result.day_changed
    assert state.day_of_week == Weekday.TUESDAY
    assert (state.game_time.hour, state.game_time.minute) == (6, 0)


def test_activity_status_flags():
    state = SimulationState(energy=12)
    resolver = _resolver()
    resolver.perform(state, "computer", now=0.0)

    computer = resolver.activity_status(state, "computer", now=1.0)
    videogame = resolver.activity_status(state, "videogame", now=1.0)

    assert computer.on_cooldown and computer.completed and not computer.available
    assert not videogame.affordable and not videogame.available
    assert resolver.activity_status(state, "nope", now=1.0) is None


def test_notifications_are_capped_and_displayed_newest_first():
    state = SimulationState()
    for idx in range(8):
        push_notification(state, f"n{idx}", limit=6)

    assert state.notifications == ["n2", "n3", "n4", "n5", "n6", "n7"]
    assert recent_notifications(state) == ["n7", "n6", "n5", "n4", "n3"]
    assert recent_notifications(state, limit=0) == []


@pytest.mark.parametrize("activity_id", [row.id for row in DEFAULT_CATALOG.activities])
def test_every_activity_keeps_stats_in_bounds(activity_id):
    state = SimulationState(energy=100, happiness=100, health=1, sleep_quality=1)

    _resolver().perform(state, activity_id, now=0.0)

    for value in state.stats().values():
        assert 0.0 <= value <= 100.0
