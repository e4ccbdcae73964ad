#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""텍스트 기반 Dream Story 실행기.

코어 스냅샷만 읽어 출력하는 얇은 표시 계층.
- 스탯(값/등급)
- 시간/요일/시간대 아이콘
- 현재 방의 활동 목록(쿨다운/가능 여부/완료 표시)
- 최근 알림 5개, 최근 시스템 로그
"""

from __future__ import annotations

import argparse
import time
from pathlib import Path
from typing import Callable, List, Optional

from sim_settings import SIM_SETTINGS_FILE, load_sim_settings
from simulation import DreamSimulation


def _dump_status(sim: DreamSimulation) -> None:
    snap = sim.snapshot()
    st = snap.state
    print("[STATUS]")
    print(
        f"- {snap.day_label} {snap.formatted_time} {snap.time_of_day_icon} "
        f"loop={snap.loop_state.value} speed=x{st.game_speed:g} sound={'on' if st.sound_enabled else 'off'}"
    )
    for name, value in st.stats().items():
        print(f"- {name}: {value:.2f} ({snap.stat_tiers[name].value})")


def _dump_room(sim: DreamSimulation) -> None:
    room = sim.catalog.room(sim.state.current_room)
    label = sim.state.current_room if room is None else f"{room.icon} {room.name}"
    print(f"[ROOM] {label}")
    for activity in sim.current_room_activities():
        status = sim.activity_status(activity.id)
        if status is None:
            continue
        flag = "cooldown" if status.on_cooldown else ("ok" if status.affordable else "no-energy")
        done = " ✓" if status.completed else ""
        print(f"- {activity.icon} {activity.id} ({activity.name}) cost={activity.energy_cost:g} {flag}{done}")


def _dump_notifications(sim: DreamSimulation) -> None:
    print("[NOTIFICATIONS]")
    rows = sim.recent_notifications()
    if not rows:
        print("- (없음)")
    for row in rows:
        print(f"- {row}")


def _dump_logs(sim: DreamSimulation, limit: int = 10) -> None:
    print("[RECENT LOGS]")
    if not sim.logs:
        print("- (없음)")
        return
    for ln in sim.logs[-limit:]:
        print(f"- {ln}")


def dump(sim: DreamSimulation) -> None:
    _dump_status(sim)
    _dump_room(sim)
    _dump_notifications(sim)
    _dump_logs(sim)


def apply_command(sim: DreamSimulation, command: str) -> str:
    """'room:kitchen', 'do:sleep', 'speed:2', 'pause', 'start', 'reset', 'sound:off' 형식."""
    name, _, arg = command.strip().partition(":")
    name = name.strip().lower()
    arg = arg.strip()
    if name == "start":
        return f"start -> {sim.start()}"
    if name == "pause":
        return f"pause -> {sim.toggle_pause()}"
    if name == "reset":
        sim.reset()
        return "reset"
    if name == "room":
        return f"room {arg} -> {sim.change_room(arg)}"
    if name == "do":
        return f"do {arg} -> {sim.perform(arg).outcome.value}"
    if name == "speed":
        try:
            value = float(arg)
        except ValueError:
            return f"speed {arg} -> invalid"
        return f"speed {arg} -> {sim.set_game_speed(value)}"
    if name == "sound":
        sim.set_sound_enabled(arg.lower() in {"1", "on", "true", "yes"})
        return f"sound {arg}"
    return f"unknown command: {command}"


def run_realtime(
    sim: DreamSimulation,
    seconds: float,
    *,
    frame_seconds: float = 0.05,
    monotonic: Callable[[], float] = time.monotonic,
    sleep: Callable[[float], None] = time.sleep,
) -> int:
    """현실시간으로 advance 를 구동한다. 발생한 틱 수를 돌려준다."""
    fired = 0
    started = last = monotonic()
    while last - started < seconds:
        sleep(frame_seconds)
        now = monotonic()
        fired += sim.advance(now - last)
        last = now
    return fired


def run_text_simulation(
    commands: List[str],
    ticks: int,
    speed: float,
    settings_path: Optional[Path] = None,
    realtime: bool = False,
) -> DreamSimulation:
    sim = DreamSimulation(settings=load_sim_settings(settings_path))
    sim.set_game_speed(speed)

    print(f"[TEXT-SIM] 시작 ticks={ticks} speed=x{speed:g}")
    for command in commands:
        print(f"> {apply_command(sim, command)}")

    sim.start()
    tick_seconds = sim.scheduler.tick_seconds
    if realtime:
        run_realtime(sim, ticks * tick_seconds)
    else:
        for _ in range(ticks):
            sim.advance(tick_seconds)

    print(f"\n{'=' * 28} Tick {sim.scheduler.ticks:04d} {'=' * 28}")
    dump(sim)
    print("\n[TEXT-SIM] 완료")
    return sim


def main() -> None:
    parser = argparse.ArgumentParser(description="텍스트 기반 Dream Story 시뮬레이션")
    parser.add_argument("--ticks", type=int, default=10, help="진행할 틱 수(기본: 10)")
    parser.add_argument("--speed", type=float, default=1.0, help="게임 속도 배율(기본: 1)")
    parser.add_argument("--cmd", action="append", default=[], help="시작 전에 실행할 명령 (예: room:kitchen, do:table)")
    parser.add_argument("--settings", default=None, help=f"설정 파일 경로 (기본: {SIM_SETTINGS_FILE})")
    parser.add_argument("--realtime", action="store_true", help="현실시간으로 틱을 진행")
    args = parser.parse_args()

    if args.ticks < 0:
        raise SystemExit("--ticks 는 0 이상이어야 합니다.")
    if args.speed <= 0:
        raise SystemExit("--speed 는 0보다 커야 합니다.")

    run_text_simulation(
        commands=args.cmd,
        ticks=args.ticks,
        speed=args.speed,
        settings_path=Path(args.settings) if args.settings else None,
        realtime=args.realtime,
    )


if __name__ == "__main__":
    main()
