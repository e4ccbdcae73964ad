#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""시뮬레이션 튜닝값 로더.

- schema validation: pydantic
- JSON I/O: orjson

파일이 없으면 config.py 기본값을 그대로 쓴다. 잘못된 값은 ValidationError 로 드러낸다.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional

import orjson
from pydantic import BaseModel, ConfigDict, Field

import config

DATA_DIR = Path(__file__).parent / "data"
SIM_SETTINGS_FILE = DATA_DIR / "sim_settings.json"


class DecayRates(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    energy: float = Field(default=config.ENERGY_DECAY_PER_TICK, ge=0)
    happiness: float = Field(default=config.HAPPINESS_DECAY_PER_TICK, ge=0)
    health: float = Field(default=config.HEALTH_DECAY_PER_TICK, ge=0)
    sleep_quality: float = Field(default=config.SLEEP_QUALITY_DECAY_PER_TICK, ge=0)

    def as_dict(self) -> Dict[str, float]:
        return self.model_dump()


class SimSettings(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    tick_ms: float = Field(default=config.SIM_TICK_MS, gt=0)
    tick_minutes: float = Field(default=config.SIM_TICK_MINUTES, gt=0)
    initial_game_speed: float = Field(default=config.DEFAULT_GAME_SPEED, gt=0)
    cooldown_seconds: float = Field(default=config.ACTIVITY_COOLDOWN_SECONDS, ge=0)
    notification_log_limit: int = Field(default=config.NOTIFICATION_LOG_LIMIT, ge=1)
    event_log_limit: int = Field(default=config.EVENT_LOG_LIMIT, ge=1)
    decay: DecayRates = Field(default_factory=DecayRates)


DEFAULT_SIM_SETTINGS = SimSettings()


def _read_json(path: Path) -> object:
    return orjson.loads(path.read_bytes())


def _write_json(path: Path, obj: object) -> None:
    path.write_bytes(orjson.dumps(obj, option=orjson.OPT_INDENT_2))


def load_sim_settings(path: Optional[Path] = None) -> SimSettings:
    """sim_settings.json 을 읽어 검증된 설정을 돌려준다."""
    target = Path(path) if path is not None else SIM_SETTINGS_FILE
    if not target.exists():
        return DEFAULT_SIM_SETTINGS
    return SimSettings.model_validate(_read_json(target))


def save_sim_settings(settings: SimSettings, path: Optional[Path] = None) -> Path:
    target = Path(path) if path is not None else SIM_SETTINGS_FILE
    target.parent.mkdir(parents=True, exist_ok=True)
    _write_json(target, settings.model_dump())
    return target
