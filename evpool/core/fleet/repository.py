# evpool/core/fleet/repository.py
"""
Хранилище автопарка в памяти процесса.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable, Optional

from evpool.core.fleet.models import Vehicle


class VehicleRepository:
    """
    Инвентарь электромобилей и их свободных мест.

    Не синхронизирован: доступ сериализует вызывающий сервис.
    """

    def __init__(self) -> None:
        self._vehicles: list[Vehicle] = []

    def list_vehicles(self) -> list[Vehicle]:
        """
        Возвращает снимок автопарка в порядке регистрации.

        Returns:
            Копии электромобилей; их изменение не влияет на хранилище
        """
        return [replace(vehicle) for vehicle in self._vehicles]

    def get_vehicle(self, vehicle_id: int) -> Optional[Vehicle]:
        """Возвращает копию электромобиля или None."""
        for vehicle in self._vehicles:
            if vehicle.id == vehicle_id:
                return replace(vehicle)
        return None

    def replace_fleet(self, vehicles: Iterable[Vehicle]) -> None:
        """
        Заменяет весь автопарк.

        Args:
            vehicles: Новые электромобили; seats каждого становится
                и вместимостью, и числом свободных мест
        """
        self._vehicles = [Vehicle.registered(v.id, v.seats) for v in vehicles]

    def set_remaining_seats(self, vehicle_id: int, seats: int) -> None:
        """
        Устанавливает число свободных мест.

        Неизвестный vehicle_id молча игнорируется. Значение не проверяется
        на попадание в [0, capacity], это ответственность вызывающего.
        """
        for vehicle in self._vehicles:
            if vehicle.id == vehicle_id:
                vehicle.seats = seats
                break

    def __len__(self) -> int:
        return len(self._vehicles)
