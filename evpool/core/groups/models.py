# evpool/core/groups/models.py
"""
Модели групп пассажиров и назначений.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Group:
    """Группа пассажиров, едущая вместе."""
    id: int
    people: int


@dataclass(frozen=True)
class Assignment:
    """Назначение группы на электромобиль."""
    group_id: int
    vehicle_id: int
    # Сколько мест заняла группа (освобождается при высадке)
    people: int
