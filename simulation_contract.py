#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""게임 루프 상태 전이 계약.

Stopped --start--> Running, Running <--pause--> Paused, Running|Paused --reset--> Stopped.
"""

from __future__ import annotations

from typing import Any

from model import LoopState


_ALLOWED_LOOP_TRANSITIONS = {
    LoopState.STOPPED: {LoopState.RUNNING, LoopState.STOPPED},
    LoopState.RUNNING: {LoopState.PAUSED, LoopState.STOPPED, LoopState.RUNNING},
    LoopState.PAUSED: {LoopState.RUNNING, LoopState.STOPPED, LoopState.PAUSED},
}


def can_transition(current: LoopState, next_state: LoopState) -> bool:
    return next_state in _ALLOWED_LOOP_TRANSITIONS.get(current, set())


def transition_loop_state(state: Any, next_state: LoopState, *, reason: str = "") -> LoopState:
    """state.is_playing/is_paused 를 다음 루프 상태에 맞춰 바꾼다."""
    current = state.loop_state
    if not can_transition(current, next_state):
        raise ValueError(f"invalid loop transition: {current.value} -> {next_state.value} ({reason})")
    state.is_playing = next_state != LoopState.STOPPED
    state.is_paused = next_state == LoopState.PAUSED
    return current


def toggled_pause_state(current: LoopState) -> LoopState:
    if current == LoopState.RUNNING:
        return LoopState.PAUSED
    if current == LoopState.PAUSED:
        return LoopState.RUNNING
    raise ValueError(f"pause toggle is undefined in {current.value}")
