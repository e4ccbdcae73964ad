#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""Game configuration.

규칙: 이 파일에는 '상수/설정'만 둡니다. (로직 금지)
"""

from datetime import datetime

# --- Simulation ---
SIM_TICK_MS = 1000           # 속도 1배일 때 1시뮬 틱 당 현실시간(ms)
SIM_TICK_MINUTES = 1         # 1시뮬 틱의 게임 시간(분), 속도 배율을 곱해 적용
DEFAULT_GAME_SPEED = 1.0

# 2024-01-01 은 월요일
EPOCH_START = datetime(2024, 1, 1, 7, 30)

# --- Stats ---
STAT_MIN = 0.0
STAT_MAX = 100.0

INITIAL_ENERGY = 80.0
INITIAL_HAPPINESS = 70.0
INITIAL_HEALTH = 75.0
INITIAL_SLEEP_QUALITY = 60.0
INITIAL_ROOM = "bedroom"

# 틱마다 부동소수 뺄셈이 누적되므로 10틱 뒤 값이 정확히 -1.0 은 아니다 (79.00000000000006)
ENERGY_DECAY_PER_TICK = 0.1
HAPPINESS_DECAY_PER_TICK = 0.05
HEALTH_DECAY_PER_TICK = 0.02
SLEEP_QUALITY_DECAY_PER_TICK = 0.03

# 표시용 등급 하한 (EXCELLENT, GOOD, FAIR), 그 아래는 POOR
STAT_TIER_EXCELLENT = 80.0
STAT_TIER_GOOD = 60.0
STAT_TIER_FAIR = 40.0

# --- Activities ---
ACTIVITY_COOLDOWN_SECONDS = 30.0   # 현실시간 기준, 게임 속도와 무관

# --- Logs ---
NOTIFICATION_DISPLAY_LIMIT = 5
NOTIFICATION_LOG_LIMIT = 200
EVENT_LOG_LIMIT = 200
