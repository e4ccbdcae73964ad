#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""활동 실행기.

검증 순서: 쿨다운 -> 에너지. 통과하면 스탯 -> 쿨다운 -> 완료기록 -> 알림 -> 시계 순으로 반영한다.
쿨다운은 현실시간(초) 만료 테이블로 관리한다.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional

import clock
import config
import stats
from catalog import ActivityCatalog
from model import Activity, ActivityOutcome, ActivityStatus, SimulationState


def push_notification(state: SimulationState, message: str, limit: int = config.NOTIFICATION_LOG_LIMIT) -> None:
    state.notifications.append(message)
    overflow = len(state.notifications) - max(1, int(limit))
    if overflow > 0:
        del state.notifications[:overflow]


def recent_notifications(state: SimulationState, limit: int = config.NOTIFICATION_DISPLAY_LIMIT) -> List[str]:
    """최신순 표시 창."""
    if limit <= 0:
        return []
    return list(reversed(state.notifications[-limit:]))


def insufficient_energy_message(activity: Activity) -> str:
    return f"Energia insuficiente para {activity.name}!"


def performed_message(activity: Activity) -> str:
    return f"{activity.description} (+{activity.happiness_gain:g} felicidade)"


@dataclass(frozen=True)
class ActivityResult:
    outcome: ActivityOutcome
    activity_id: str
    cooldown_expires_at: Optional[float] = None
    day_changed: bool = False

    @property
    def performed(self) -> bool:
        return self.outcome == ActivityOutcome.PERFORMED


class ActivityResolver:
    def __init__(
        self,
        catalog: ActivityCatalog,
        *,
        cooldown_seconds: float = config.ACTIVITY_COOLDOWN_SECONDS,
        notification_limit: int = config.NOTIFICATION_LOG_LIMIT,
        epoch: datetime = config.EPOCH_START,
    ):
        self.catalog = catalog
        self.cooldown_seconds = max(0.0, float(cooldown_seconds))
        self.notification_limit = int(notification_limit)
        self.epoch = epoch

    @staticmethod
    def is_on_cooldown(state: SimulationState, activity_id: str, now: float) -> bool:
        expiry = state.cooldown_expiry_by_id.get(activity_id)
        return expiry is not None and expiry > now

    @staticmethod
    def can_afford(state: SimulationState, activity: Activity) -> bool:
        return state.energy >= activity.energy_cost

    def activity_status(self, state: SimulationState, activity_id: str, now: float) -> Optional[ActivityStatus]:
        activity = self.catalog.activity(activity_id)
        if activity is None:
            return None
        return ActivityStatus(
            activity_id=activity_id,
            on_cooldown=self.is_on_cooldown(state, activity_id, now),
            affordable=self.can_afford(state, activity),
            completed=activity_id in state.completed_activities,
        )

    def perform(self, state: SimulationState, activity_id: str, now: float) -> ActivityResult:
        activity = self.catalog.activity(activity_id)
        if activity is None:
            return ActivityResult(ActivityOutcome.UNKNOWN_ACTIVITY, activity_id)

        # 쿨다운 중에는 알림 없이 무시
        if self.is_on_cooldown(state, activity_id, now):
            return ActivityResult(ActivityOutcome.ON_COOLDOWN, activity_id)

        if not self.can_afford(state, activity):
            push_notification(state, insufficient_energy_message(activity), self.notification_limit)
            return ActivityResult(ActivityOutcome.INSUFFICIENT_ENERGY, activity_id)

        stats.apply_activity(state, activity)
        expires_at = float(now) + self.cooldown_seconds
        state.cooldown_expiry_by_id[activity_id] = expires_at
        state.completed_activities.append(activity_id)
        push_notification(state, performed_message(activity), self.notification_limit)
        day_changed = clock.advance(state, activity.duration, self.epoch)
        return ActivityResult(
            ActivityOutcome.PERFORMED,
            activity_id,
            cooldown_expires_at=expires_at,
            day_changed=day_changed,
        )

    @staticmethod
    def expire_cooldown(state: SimulationState, activity_id: str, now: float) -> bool:
        """만료 시각이 지난 항목만 지운다. 이후 다시 걸린 쿨다운은 건드리지 않는다."""
        expiry = state.cooldown_expiry_by_id.get(activity_id)
        if expiry is None or expiry > now:
            return False
        del state.cooldown_expiry_by_id[activity_id]
        return True
