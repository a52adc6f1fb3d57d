# evpool/core/fleet/models.py
"""
Модель электромобиля.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Vehicle:
    """
    Электромобиль автопарка.

    capacity фиксируется при регистрации, seats — оставшиеся свободные места.
    """
    id: int
    capacity: int
    seats: int

    @classmethod
    def registered(cls, vehicle_id: int, seats: int) -> "Vehicle":
        """Создаёт только что зарегистрированный (пустой) электромобиль."""
        return cls(id=vehicle_id, capacity=seats, seats=seats)

    @property
    def occupied_seats(self) -> int:
        """Занятые места."""
        return self.capacity - self.seats
