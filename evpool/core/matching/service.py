# evpool/core/matching/service.py
"""
Сервис подбора электромобиля для группы.
Политика first-fit: первый по порядку регистрации электромобиль
с достаточным числом свободных мест.
"""

from __future__ import annotations

from typing import Optional

from evpool.common.constants import TypeMsg
from evpool.common.logger import log_info
from evpool.core.fleet.repository import VehicleRepository
from evpool.core.groups.models import Group
from evpool.infra.event_bus import EventBus
from evpool.shared.events.fleet_events import VehicleAssigned


class MatchingService:
    """
    Сервис матчинга групп с электромобилями.

    Не держит собственных блокировок: вызывающий сервис обязан
    сериализовать вызовы вместе с изменениями реестра групп.
    """

    def __init__(
        self,
        vehicles: VehicleRepository,
        event_bus: EventBus,
    ) -> None:
        """
        Инициализация сервиса.

        Args:
            vehicles: Инвентарь электромобилей
            event_bus: Шина уведомлений
        """
        self._vehicles = vehicles
        self._event_bus = event_bus

    async def assign_vehicle(self, group: Group) -> Optional[int]:
        """
        Подбирает электромобиль для группы и занимает в нём места.

        Не ищет наилучшее совпадение и не балансирует загрузку.

        Args:
            group: Группа пассажиров

        Returns:
            id электромобиля или None, если ни в одном нет мест
            (постановка в очередь — забота вызывающего)
        """
        for vehicle in self._vehicles.list_vehicles():
            if vehicle.seats >= group.people:
                self._vehicles.set_remaining_seats(vehicle.id, vehicle.seats - group.people)

                await self._event_bus.publish(
                    VehicleAssigned(group_id=group.id, vehicle_id=vehicle.id)
                )
                return vehicle.id

        await log_info(
            f"Нет электромобиля для группы {group.id} ({group.people} чел.)",
            type_msg=TypeMsg.DEBUG,
        )
        return None

    async def release_seats(self, vehicle_id: int, seats: int) -> None:
        """
        Возвращает места электромобилю после высадки группы.

        Args:
            vehicle_id: ID электромобиля
            seats: Сколько мест занимала группа
        """
        vehicle = self._vehicles.get_vehicle(vehicle_id)
        if vehicle is None:
            return

        self._vehicles.set_remaining_seats(vehicle_id, vehicle.seats + seats)
