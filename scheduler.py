#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""게임 루프 스케줄러.

렌더 루프와 분리된 현실시간 구동기. 호출자가 advance(delta) 로 흐른 현실시간을 넘기면
반복 틱과 지연 작업(쿨다운 만료 등)을 시각 순서대로 하나씩 실행한다.
모든 변경은 이 한 경로로 직렬화된다.
"""

from __future__ import annotations

import heapq
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

import config

_EPSILON = 1e-9


@dataclass(order=True)
class ScheduledTask:
    due_at: float
    seq: int
    key: str = field(compare=False, default="")
    callback: Callable[[float], None] = field(compare=False, default=lambda _now: None)
    cancelled: bool = field(compare=False, default=False)

    def cancel(self) -> None:
        self.cancelled = True


class GameLoopScheduler:
    """고정 주기 틱 + 취소 가능한 지연 작업.

    - 틱 주기: (tick_ms / 1000) / speed 초
    - 틱은 start_ticking ~ stop_ticking 사이에서만 발생
    - 지연 작업은 틱 상태와 무관하게 현실시간으로 만료
    """

    def __init__(
        self,
        on_tick: Callable[[], None],
        *,
        tick_ms: float = config.SIM_TICK_MS,
        speed: float = config.DEFAULT_GAME_SPEED,
    ):
        if tick_ms <= 0:
            raise ValueError("tick_ms must be positive")
        if speed <= 0:
            raise ValueError("speed must be positive")
        self.on_tick = on_tick
        self.tick_ms = float(tick_ms)
        self.speed = float(speed)
        self.now = 0.0
        self.ticks = 0
        self._ticking = False
        self._tick_origin = 0.0
        self._ticks_since_origin = 0
        self._tasks: List[ScheduledTask] = []
        self._task_by_key: Dict[str, ScheduledTask] = {}
        self._seq = 0

    @property
    def tick_seconds(self) -> float:
        return (self.tick_ms / 1000.0) / self.speed

    @property
    def is_ticking(self) -> bool:
        return self._ticking

    def _restart_tick(self) -> None:
        self._tick_origin = self.now
        self._ticks_since_origin = 0

    def start_ticking(self) -> None:
        if self._ticking:
            return
        self._ticking = True
        self._restart_tick()

    def stop_ticking(self) -> None:
        self._ticking = False
        self._ticks_since_origin = 0

    def set_speed(self, speed: float) -> None:
        """주기를 바꾸면 진행 중인 틱을 내리고 새 주기로 다시 건다."""
        if speed <= 0:
            raise ValueError("speed must be positive")
        self.speed = float(speed)
        if self._ticking:
            self._restart_tick()

    def next_tick_at(self) -> Optional[float]:
        if not self._ticking:
            return None
        return self._tick_origin + (self._ticks_since_origin + 1) * self.tick_seconds

    # =============================
    # Deferred tasks
    # =============================
    def call_later(self, delay: float, callback: Callable[[float], None], key: str = "") -> ScheduledTask:
        """같은 key 로 다시 걸면 기존 작업은 취소되고 타이머가 재설정된다."""
        if key:
            self.cancel(key)
        self._seq += 1
        task = ScheduledTask(
            due_at=self.now + max(0.0, float(delay)),
            seq=self._seq,
            key=key,
            callback=callback,
        )
        heapq.heappush(self._tasks, task)
        if key:
            self._task_by_key[key] = task
        return task

    def cancel(self, key: str) -> bool:
        task = self._task_by_key.pop(key, None)
        if task is None:
            return False
        task.cancel()
        return True

    def cancel_all(self) -> None:
        for task in self._tasks:
            task.cancel()
        self._tasks.clear()
        self._task_by_key.clear()

    def pending_tasks(self) -> List[ScheduledTask]:
        return sorted(task for task in self._tasks if not task.cancelled)

    def _next_task(self) -> Optional[ScheduledTask]:
        while self._tasks and self._tasks[0].cancelled:
            heapq.heappop(self._tasks)
        return self._tasks[0] if self._tasks else None

    def _run_task(self, task: ScheduledTask) -> None:
        heapq.heappop(self._tasks)
        if task.key and self._task_by_key.get(task.key) is task:
            del self._task_by_key[task.key]
        self.now = max(self.now, task.due_at)
        task.callback(self.now)

    def _run_tick(self, due_at: float) -> None:
        self.now = max(self.now, due_at)
        self._ticks_since_origin += 1
        self.ticks += 1
        self.on_tick()

    # =============================
    # Driver
    # =============================
    def advance(self, delta_seconds: float) -> int:
        """흐른 현실시간만큼 밀린 이벤트를 실행하고 발생한 틱 수를 돌려준다."""
        target = self.now + max(0.0, float(delta_seconds))
        fired = 0
        while True:
            task = self._next_task()
            task_at = task.due_at if task is not None else None
            tick_at = self.next_tick_at()

            if task_at is not None and task_at <= target + _EPSILON and (tick_at is None or task_at <= tick_at):
                self._run_task(task)
                continue
            if tick_at is not None and tick_at <= target + _EPSILON:
                self._run_tick(tick_at)
                fired += 1
                continue
            break
        self.now = max(self.now, target)
        return fired

    def reset(self) -> None:
        self.stop_ticking()
        self.cancel_all()
