# evpool/shared/models/fleet_dto.py
"""
DTO запросов и ответов сервиса совместных поездок.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field, StrictInt


class VehicleDTO(BaseModel):
    """Электромобиль в запросе регистрации автопарка."""

    id: StrictInt
    seats: StrictInt = Field(ge=0)


class GroupDTO(BaseModel):
    """Группа пассажиров в запросе поездки."""

    id: StrictInt
    people: StrictInt = Field(ge=1)


class GroupIdRequest(BaseModel):
    """Запрос по идентификатору группы (высадка, поиск)."""

    id: StrictInt


class JourneyResult(BaseModel):
    """Результат запроса поездки."""

    assigned: bool
    vehicle_id: Optional[int] = None


class CarPoolStats(BaseModel):
    """Счётчики состояния для проверки здоровья."""

    vehicles: int
    free_seats: int
    occupied_seats: int
    waiting_groups: int
    riding_groups: int
