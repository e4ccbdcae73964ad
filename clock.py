#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""게임 시계.

요일은 에포크(월요일 07:30)로부터 지난 달력 일수로만 계산한다.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Dict

import config
from model import SimulationState, TimeOfDay, WEEKDAYS, Weekday

_TIME_OF_DAY_ICONS: Dict[TimeOfDay, str] = {
    TimeOfDay.MORNING: "🌅",
    TimeOfDay.AFTERNOON: "☀️",
    TimeOfDay.EVENING: "🌆",
    TimeOfDay.NIGHT: "🌙",
}


def elapsed_days(game_time: datetime, epoch: datetime = config.EPOCH_START) -> int:
    return (game_time.date() - epoch.date()).days


def day_of_week_for(game_time: datetime, epoch: datetime = config.EPOCH_START) -> Weekday:
    return WEEKDAYS[elapsed_days(game_time, epoch) % 7]


def is_day_change(before: datetime, after: datetime) -> bool:
    # 여러 시간을 한 번에 건너뛰어도 자정을 넘으면 날짜가 바뀐다
    return after.date() != before.date() or (before.hour == 23 and after.hour == 0)


def advance(state: SimulationState, minutes: float, epoch: datetime = config.EPOCH_START) -> bool:
    """게임 시간을 minutes 만큼 진행하고 날짜가 바뀌었는지 돌려준다."""
    if minutes <= 0:
        return False
    before = state.game_time
    after = before + timedelta(minutes=minutes)
    state.game_time = after
    if not is_day_change(before, after):
        return False
    state.day_of_week = day_of_week_for(after, epoch)
    return True


def format_time(game_time: datetime, hour12: bool = False) -> str:
    if hour12:
        hour = game_time.hour % 12 or 12
        suffix = "AM" if game_time.hour < 12 else "PM"
        return f"{hour:02d}:{game_time.minute:02d} {suffix}"
    return f"{game_time.hour:02d}:{game_time.minute:02d}"


def time_of_day_for_hour(hour: int) -> TimeOfDay:
    hour = hour % 24
    if 6 <= hour < 12:
        return TimeOfDay.MORNING
    if 12 <= hour < 18:
        return TimeOfDay.AFTERNOON
    if 18 <= hour < 22:
        return TimeOfDay.EVENING
    return TimeOfDay.NIGHT


def time_of_day_icon(game_time: datetime) -> str:
    return _TIME_OF_DAY_ICONS[time_of_day_for_hour(game_time.hour)]


def format_day_label(state: SimulationState) -> str:
    return state.day_of_week.value
