#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""방/활동 정적 카탈로그.

런타임에 변경하지 않는다. 표시 문자열은 고정 로케일(pt-BR)이다.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Tuple

from model import Activity, Room

DEFAULT_ROOMS: List[Dict[str, object]] = [
    {"id": "bedroom", "name": "Quarto", "icon": "🛏️"},
    {"id": "living", "name": "Sala", "icon": "🛋️"},
    {"id": "kitchen", "name": "Cozinha", "icon": "🍳"},
    {"id": "gym", "name": "Academia", "icon": "💪"},
    {"id": "bathroom", "name": "Banheiro", "icon": "🚿"},
]

DEFAULT_ACTIVITIES: List[Dict[str, object]] = [
    # bedroom
    {"id": "sleep", "name": "Dormir", "room": "bedroom", "energy_cost": 0, "energy_gain": 40, "happiness_gain": 10, "health_gain": 15, "sleep_quality_gain": 30, "duration": 480, "description": "Uma boa noite de sono restaurador", "icon": "😴", "time_of_day": "night"},
    {"id": "computer", "name": "Usar Computador", "room": "bedroom", "energy_cost": 10, "energy_gain": 0, "happiness_gain": 15, "health_gain": -5, "sleep_quality_gain": -10, "duration": 60, "description": "Trabalhar ou se divertir no computador", "icon": "💻"},
    {"id": "wardrobe", "name": "Escolher Roupa", "room": "bedroom", "energy_cost": 5, "energy_gain": 0, "happiness_gain": 10, "health_gain": 0, "sleep_quality_gain": 0, "duration": 15, "description": "Escolher a roupa perfeita para o dia", "icon": "👔"},
    {"id": "bedroom-mirror", "name": "Se Arrumar", "room": "bedroom", "energy_cost": 5, "energy_gain": 0, "happiness_gain": 15, "health_gain": 5, "sleep_quality_gain": 0, "duration": 20, "description": "Cuidar da aparência e autoestima", "icon": "✨"},
    # living
    {"id": "sofa", "name": "Relaxar no Sofá", "room": "living", "energy_cost": 0, "energy_gain": 15, "happiness_gain": 20, "health_gain": 5, "sleep_quality_gain": 10, "duration": 45, "description": "Momento de relaxamento e descanso", "icon": "😌"},
    {"id": "tv", "name": "Assistir TV", "room": "living", "energy_cost": 5, "energy_gain": 0, "happiness_gain": 25, "health_gain": -5, "sleep_quality_gain": -5, "duration": 90, "description": "Entretenimento e diversão", "icon": "📺"},
    {"id": "bookshelf", "name": "Ler Livro", "room": "living", "energy_cost": 10, "energy_gain": 0, "happiness_gain": 20, "health_gain": 5, "sleep_quality_gain": 15, "duration": 60, "description": "Expandir conhecimento e relaxar a mente", "icon": "📚"},
    {"id": "videogame", "name": "Jogar Videogame", "room": "living", "energy_cost": 15, "energy_gain": 0, "happiness_gain": 30, "health_gain": -10, "sleep_quality_gain": -15, "duration": 120, "description": "Diversão e entretenimento digital", "icon": "🎮"},
    # kitchen
    {"id": "table", "name": "Fazer Refeição", "room": "kitchen", "energy_cost": 0, "energy_gain": 25, "happiness_gain": 15, "health_gain": 20, "sleep_quality_gain": 5, "duration": 30, "description": "Nutrir o corpo com uma refeição saudável", "icon": "🍽️"},
    {"id": "fridge", "name": "Buscar Lanche", "room": "kitchen", "energy_cost": 5, "energy_gain": 10, "happiness_gain": 10, "health_gain": 5, "sleep_quality_gain": 0, "duration": 10, "description": "Um lanche rápido para matar a fome", "icon": "🥪"},
    {"id": "stove", "name": "Cozinhar", "room": "kitchen", "energy_cost": 20, "energy_gain": 0, "happiness_gain": 25, "health_gain": 15, "sleep_quality_gain": 5, "duration": 45, "description": "Preparar uma refeição deliciosa", "icon": "👨‍🍳"},
    {"id": "microwave", "name": "Esquentar Comida", "room": "kitchen", "energy_cost": 5, "energy_gain": 15, "happiness_gain": 5, "health_gain": 10, "sleep_quality_gain": 0, "duration": 5, "description": "Refeição rápida e prática", "icon": "🔥"},
    {"id": "water", "name": "Beber Água", "room": "kitchen", "energy_cost": 0, "energy_gain": 5, "happiness_gain": 5, "health_gain": 15, "sleep_quality_gain": 10, "duration": 2, "description": "Hidratação essencial para o corpo", "icon": "💧"},
    # gym
    {"id": "exercise", "name": "Levantar Peso", "room": "gym", "energy_cost": 30, "energy_gain": 0, "happiness_gain": 20, "health_gain": 25, "sleep_quality_gain": 20, "duration": 60, "description": "Fortalecer músculos e melhorar condicionamento", "icon": "💪"},
    {"id": "treadmill", "name": "Correr na Esteira", "room": "gym", "energy_cost": 25, "energy_gain": 0, "happiness_gain": 25, "health_gain": 30, "sleep_quality_gain": 25, "duration": 45, "description": "Exercício cardiovascular energizante", "icon": "🏃‍♂️"},
    {"id": "dumbbells", "name": "Exercício com Halteres", "room": "gym", "energy_cost": 20, "energy_gain": 0, "happiness_gain": 15, "health_gain": 20, "sleep_quality_gain": 15, "duration": 30, "description": "Treino focado em grupos musculares", "icon": "🏋️‍♂️"},
    {"id": "yoga-mat", "name": "Yoga e Meditação", "room": "gym", "energy_cost": 10, "energy_gain": 20, "happiness_gain": 30, "health_gain": 15, "sleep_quality_gain": 35, "duration": 45, "description": "Relaxamento e conexão mente-corpo", "icon": "🧘‍♂️"},
    # bathroom
    {"id": "shower", "name": "Tomar Banho", "room": "bathroom", "energy_cost": 5, "energy_gain": 15, "happiness_gain": 20, "health_gain": 15, "sleep_quality_gain": 10, "duration": 20, "description": "Higiene e relaxamento", "icon": "🚿"},
    {"id": "bathroom-sink", "name": "Escovar Dentes", "room": "bathroom", "energy_cost": 5, "energy_gain": 0, "happiness_gain": 10, "health_gain": 15, "sleep_quality_gain": 5, "duration": 5, "description": "Cuidados com higiene bucal", "icon": "🦷"},
    {"id": "toilet", "name": "Usar Banheiro", "room": "bathroom", "energy_cost": 0, "energy_gain": 5, "happiness_gain": 5, "health_gain": 5, "sleep_quality_gain": 0, "duration": 5, "description": "Necessidades básicas", "icon": "🚽"},
    {"id": "skincare", "name": "Cuidados com a Pele", "room": "bathroom", "energy_cost": 10, "energy_gain": 0, "happiness_gain": 25, "health_gain": 10, "sleep_quality_gain": 5, "duration": 15, "description": "Rotina de beleza e autocuidado", "icon": "🧴"},
]


class ActivityCatalog:
    """id/방 기준 조회만 제공하는 불변 레지스트리."""

    def __init__(self, rooms: Iterable[Room], activities: Iterable[Activity]):
        room_rows = tuple(rooms)
        self._rooms: Dict[str, Room] = {}
        for room in room_rows:
            if room.id in self._rooms:
                raise ValueError(f"duplicate room id: {room.id}")
            self._rooms[room.id] = room

        by_id: Dict[str, Activity] = {}
        by_room: Dict[str, List[Activity]] = {room.id: [] for room in room_rows}
        for activity in activities:
            if activity.id in by_id:
                raise ValueError(f"duplicate activity id: {activity.id}")
            if activity.room not in self._rooms:
                raise ValueError(f"activity {activity.id} refers to unknown room: {activity.room}")
            by_id[activity.id] = activity
            by_room[activity.room].append(activity)

        self._by_id = by_id
        self._by_room: Dict[str, Tuple[Activity, ...]] = {key: tuple(rows) for key, rows in by_room.items()}

    @property
    def rooms(self) -> Tuple[Room, ...]:
        return tuple(self._rooms.values())

    @property
    def activities(self) -> Tuple[Activity, ...]:
        return tuple(self._by_id.values())

    @property
    def by_id(self) -> Dict[str, Activity]:
        return dict(self._by_id)

    @property
    def by_room(self) -> Dict[str, Tuple[Activity, ...]]:
        return dict(self._by_room)

    def has_room(self, room_id: str) -> bool:
        return room_id in self._rooms

    def room(self, room_id: str) -> Optional[Room]:
        return self._rooms.get(room_id)

    def activity(self, activity_id: str) -> Optional[Activity]:
        return self._by_id.get(activity_id)

    def activities_in(self, room_id: str) -> Tuple[Activity, ...]:
        return self._by_room.get(room_id, ())


def build_catalog(
    rooms: Optional[Iterable[Dict[str, object]]] = None,
    activities: Optional[Iterable[Dict[str, object]]] = None,
) -> ActivityCatalog:
    room_rows = DEFAULT_ROOMS if rooms is None else rooms
    activity_rows = DEFAULT_ACTIVITIES if activities is None else activities
    return ActivityCatalog(
        [Room.model_validate(row) for row in room_rows],
        [Activity.model_validate(row) for row in activity_rows],
    )


DEFAULT_CATALOG = build_catalog()
