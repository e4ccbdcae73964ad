#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""스탯 원장: 자연 감소와 활동 효과 적용.

모든 값은 커밋 전에 [STAT_MIN, STAT_MAX] 로 보정한다.
"""

from __future__ import annotations

from typing import Dict, Mapping

import config
from model import Activity, STAT_NAMES, SimulationState, StatTier

DEFAULT_DECAY: Dict[str, float] = {
    "energy": config.ENERGY_DECAY_PER_TICK,
    "happiness": config.HAPPINESS_DECAY_PER_TICK,
    "health": config.HEALTH_DECAY_PER_TICK,
    "sleep_quality": config.SLEEP_QUALITY_DECAY_PER_TICK,
}


def clamp_stat(value: float) -> float:
    return max(config.STAT_MIN, min(config.STAT_MAX, float(value)))


def _commit(state: SimulationState, updated: Mapping[str, float]) -> None:
    for name in STAT_NAMES:
        setattr(state, name, updated[name])


def apply_decay(state: SimulationState, decay: Mapping[str, float] = DEFAULT_DECAY) -> None:
    updated = {}
    for name in STAT_NAMES:
        current = float(getattr(state, name))
        rate = max(0.0, float(decay.get(name, 0.0)))
        updated[name] = max(config.STAT_MIN, current - rate)
    _commit(state, updated)


def activity_deltas(activity: Activity) -> Dict[str, float]:
    return {
        "energy": float(activity.energy_gain) - float(activity.energy_cost),
        "happiness": float(activity.happiness_gain),
        "health": float(activity.health_gain),
        "sleep_quality": float(activity.sleep_quality_gain),
    }


def apply_activity(state: SimulationState, activity: Activity) -> Dict[str, float]:
    """네 스탯을 한꺼번에 계산한 뒤 커밋하고 실제 변화량을 돌려준다."""
    deltas = activity_deltas(activity)
    before = state.stats()
    updated = {name: clamp_stat(before[name] + deltas[name]) for name in STAT_NAMES}
    _commit(state, updated)
    return {name: updated[name] - before[name] for name in STAT_NAMES}


def stat_tier(value: float) -> StatTier:
    if value >= config.STAT_TIER_EXCELLENT:
        return StatTier.EXCELLENT
    if value >= config.STAT_TIER_GOOD:
        return StatTier.GOOD
    if value >= config.STAT_TIER_FAIR:
        return StatTier.FAIR
    return StatTier.POOR


def stat_tiers(state: SimulationState) -> Dict[str, StatTier]:
    return {name: stat_tier(value) for name, value in state.stats().items()}
