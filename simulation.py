#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""Dream Story 시뮬레이션 코어.

렌더 계층과 분리된 단일 진입점. UI 는 의도(intent)를 넘기고 snapshot() 만 읽는다.
- 의도: start / toggle_pause / reset / change_room / perform / set_game_speed / set_sound_enabled
- 구동: advance(현실시간 초)
"""

from __future__ import annotations

import math
from datetime import datetime
from typing import List, Optional, Tuple

import clock
import stats
from catalog import DEFAULT_CATALOG, ActivityCatalog
from config import EPOCH_START, NOTIFICATION_DISPLAY_LIMIT
from model import Activity, ActivityOutcome, ActivityStatus, LoopState, SimulationSnapshot, SimulationState
from resolver import ActivityResolver, ActivityResult, recent_notifications
from scheduler import GameLoopScheduler
from sim_settings import DEFAULT_SIM_SETTINGS, SimSettings
from simulation_contract import toggled_pause_state, transition_loop_state


def initial_state(
    epoch: datetime = EPOCH_START,
    settings: SimSettings = DEFAULT_SIM_SETTINGS,
    catalog: ActivityCatalog = DEFAULT_CATALOG,
) -> SimulationState:
    state = SimulationState(
        game_time=epoch,
        day_of_week=clock.day_of_week_for(epoch, epoch),
        game_speed=settings.initial_game_speed,
    )
    if not catalog.has_room(state.current_room):
        state.current_room = catalog.rooms[0].id
    return state


class DreamSimulation:
    def __init__(
        self,
        catalog: Optional[ActivityCatalog] = None,
        settings: Optional[SimSettings] = None,
        epoch: datetime = EPOCH_START,
    ):
        if epoch.weekday() != 0:
            raise ValueError(f"epoch must be a Monday: {epoch.isoformat()}")
        self.catalog = catalog or DEFAULT_CATALOG
        if not self.catalog.rooms:
            raise ValueError("catalog has no rooms")
        self.settings = settings or DEFAULT_SIM_SETTINGS
        self.epoch = epoch
        self.resolver = ActivityResolver(
            self.catalog,
            cooldown_seconds=self.settings.cooldown_seconds,
            notification_limit=self.settings.notification_log_limit,
            epoch=epoch,
        )
        self.state = initial_state(epoch, self.settings, self.catalog)
        self.scheduler = GameLoopScheduler(
            self._on_tick,
            tick_ms=self.settings.tick_ms,
            speed=self.state.game_speed,
        )
        self.logs: List[str] = []

    # =============================
    # Event log
    # =============================
    def _log(self, message: str) -> None:
        stamp = f"{clock.format_day_label(self.state)} {clock.format_time(self.state.game_time)}"
        self.logs.append(f"[{stamp}] {message}")
        overflow = len(self.logs) - self.settings.event_log_limit
        if overflow > 0:
            del self.logs[:overflow]

    # =============================
    # Scheduled effects
    # =============================
    def _on_tick(self) -> None:
        minutes = self.settings.tick_minutes * self.state.game_speed
        day_changed = clock.advance(self.state, minutes, self.epoch)
        stats.apply_decay(self.state, self.settings.decay.as_dict())
        if day_changed:
            self._log(f"새 날: {clock.format_day_label(self.state)}")

    def _expire_cooldown(self, activity_id: str, now: float) -> None:
        self.resolver.expire_cooldown(self.state, activity_id, now)

    # =============================
    # Intents
    # =============================
    def start(self) -> bool:
        if self.state.loop_state != LoopState.STOPPED:
            return False
        transition_loop_state(self.state, LoopState.RUNNING, reason="start")
        self.scheduler.start_ticking()
        self._log("시작")
        return True

    def toggle_pause(self) -> bool:
        current = self.state.loop_state
        if current == LoopState.STOPPED:
            return False
        next_state = toggled_pause_state(current)
        transition_loop_state(self.state, next_state, reason="toggle_pause")
        if next_state == LoopState.RUNNING:
            self.scheduler.start_ticking()
            self._log("재개")
        else:
            self.scheduler.stop_ticking()
            self._log("일시정지")
        return True

    def reset(self) -> None:
        """상태를 초기 스냅샷으로 통째로 교체하고 모든 예약 작업을 취소한다."""
        self.scheduler.reset()
        self.state = initial_state(self.epoch, self.settings, self.catalog)
        self.scheduler.set_speed(self.state.game_speed)
        self._log("초기화")

    def change_room(self, room_id: str) -> bool:
        if room_id == self.state.current_room or not self.catalog.has_room(room_id):
            return False
        self.state.current_room = room_id
        self._log(f"이동: {room_id}")
        return True

    def perform(self, activity_id: str) -> ActivityResult:
        now = self.scheduler.now
        result = self.resolver.perform(self.state, activity_id, now)
        if result.outcome == ActivityOutcome.PERFORMED:
            self.scheduler.call_later(
                self.resolver.cooldown_seconds,
                lambda at, key=activity_id: self._expire_cooldown(key, at),
                key=f"cooldown:{activity_id}",
            )
            self._log(f"활동: {activity_id}")
            if result.day_changed:
                self._log(f"새 날: {clock.format_day_label(self.state)}")
        elif result.outcome == ActivityOutcome.INSUFFICIENT_ENERGY:
            self._log(f"에너지 부족: {activity_id}")
        return result

    def set_game_speed(self, speed: float) -> bool:
        try:
            value = float(speed)
        except (TypeError, ValueError):
            return False
        if not math.isfinite(value) or value <= 0:
            return False
        self.state.game_speed = value
        self.scheduler.set_speed(value)
        self._log(f"속도: x{value:g}")
        return True

    def set_sound_enabled(self, enabled: bool) -> None:
        self.state.sound_enabled = bool(enabled)

    def advance(self, real_seconds: float) -> int:
        return self.scheduler.advance(real_seconds)

    # =============================
    # Read side
    # =============================
    def current_room_activities(self) -> Tuple[Activity, ...]:
        return self.catalog.activities_in(self.state.current_room)

    def activity_status(self, activity_id: str) -> Optional[ActivityStatus]:
        return self.resolver.activity_status(self.state, activity_id, self.scheduler.now)

    def is_completed(self, activity_id: str) -> bool:
        return activity_id in self.state.completed_activities

    def recent_notifications(self, limit: int = NOTIFICATION_DISPLAY_LIMIT) -> List[str]:
        return recent_notifications(self.state, limit)

    def snapshot(self, hour12: bool = False) -> SimulationSnapshot:
        state = self.state.model_copy(deep=True)
        now = self.scheduler.now
        return SimulationSnapshot(
            state=state,
            loop_state=state.loop_state,
            formatted_time=clock.format_time(state.game_time, hour12=hour12),
            day_label=clock.format_day_label(state),
            time_of_day=clock.time_of_day_for_hour(state.game_time.hour),
            time_of_day_icon=clock.time_of_day_icon(state.game_time),
            stat_tiers=stats.stat_tiers(state),
            active_cooldowns=sorted(
                key for key in state.cooldown_expiry_by_id if self.resolver.is_on_cooldown(state, key, now)
            ),
            recent_notifications=recent_notifications(state),
        )
