#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""Data model (Enums + pydantic models).

UI 프레임워크와 독립적인 순수 모델 계층.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

import config


# =============================
# Enums
# =============================
class Weekday(Enum):
    MONDAY = "Segunda-feira"
    TUESDAY = "Terça-feira"
    WEDNESDAY = "Quarta-feira"
    THURSDAY = "Quinta-feira"
    FRIDAY = "Sexta-feira"
    SATURDAY = "Sábado"
    SUNDAY = "Domingo"


WEEKDAYS: List[Weekday] = list(Weekday)


class TimeOfDay(str, Enum):
    MORNING = "morning"
    AFTERNOON = "afternoon"
    EVENING = "evening"
    NIGHT = "night"
    ANY = "any"


class LoopState(str, Enum):
    STOPPED = "STOPPED"
    RUNNING = "RUNNING"
    PAUSED = "PAUSED"


class StatTier(str, Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"


class ActivityOutcome(str, Enum):
    PERFORMED = "performed"
    INSUFFICIENT_ENERGY = "insufficient_energy"
    ON_COOLDOWN = "on_cooldown"
    UNKNOWN_ACTIVITY = "unknown_activity"


STAT_NAMES = ("energy", "happiness", "health", "sleep_quality")


# =============================
# Catalog objects
# =============================
class Room(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str
    name: str
    icon: str = ""


class Activity(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str
    name: str
    room: str
    energy_cost: float = Field(default=0.0, ge=0)
    energy_gain: float = Field(default=0.0, ge=0)
    happiness_gain: float = 0.0
    health_gain: float = 0.0
    sleep_quality_gain: float = 0.0
    duration: int = Field(default=0, ge=0)  # 게임 시간(분)
    description: str = ""
    icon: str = ""
    time_of_day: Optional[TimeOfDay] = None


# =============================
# Simulation state
# =============================
class SimulationState(BaseModel):
    """코어만 변경하는 단일 상태 집합. UI는 스냅샷만 읽는다."""

    model_config = ConfigDict(extra="forbid")

    energy: float = config.INITIAL_ENERGY
    happiness: float = config.INITIAL_HAPPINESS
    health: float = config.INITIAL_HEALTH
    sleep_quality: float = config.INITIAL_SLEEP_QUALITY
    current_room: str = config.INITIAL_ROOM
    game_time: datetime = config.EPOCH_START
    day_of_week: Weekday = Weekday.MONDAY
    is_playing: bool = False
    is_paused: bool = False
    game_speed: float = config.DEFAULT_GAME_SPEED
    cooldown_expiry_by_id: Dict[str, float] = Field(default_factory=dict)
    completed_activities: List[str] = Field(default_factory=list)
    notifications: List[str] = Field(default_factory=list)
    sound_enabled: bool = True

    @property
    def active_cooldowns(self) -> set[str]:
        return set(self.cooldown_expiry_by_id)

    @property
    def loop_state(self) -> LoopState:
        if not self.is_playing:
            return LoopState.STOPPED
        if self.is_paused:
            return LoopState.PAUSED
        return LoopState.RUNNING

    def stats(self) -> Dict[str, float]:
        return {name: float(getattr(self, name)) for name in STAT_NAMES}


class ActivityStatus(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    activity_id: str
    on_cooldown: bool
    affordable: bool
    completed: bool

    @property
    def available(self) -> bool:
        return not self.on_cooldown and self.affordable


class SimulationSnapshot(BaseModel):
    """렌더링 계층에 넘기는 읽기 전용 스냅샷."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    state: SimulationState
    loop_state: LoopState
    formatted_time: str
    day_label: str
    time_of_day: TimeOfDay
    time_of_day_icon: str
    stat_tiers: Dict[str, StatTier]
    active_cooldowns: List[str]
    recent_notifications: List[str]
