# evpool/core/notifications/service.py
"""
Сервис уведомлений.
Подписчики шины, реагирующие на события автопарка.
Сейчас уведомления пишутся в лог; сюда же подключаются e-mail, SMS и т.п.
"""

from __future__ import annotations

from evpool.common.constants import EventTypes, TypeMsg
from evpool.common.logger import log_info
from evpool.infra.event_bus import EventBus
from evpool.shared.events.base import DomainEvent
from evpool.shared.events.fleet_events import (
    FleetRegistered,
    GroupDroppedOff,
    GroupQueued,
    VehicleAssigned,
)


class NotificationService:
    """
    Регистрирует обработчики уведомлений в шине событий.
    """

    def __init__(self, event_bus: EventBus) -> None:
        """
        Args:
            event_bus: Шина событий
        """
        self._event_bus = event_bus

    async def register(self) -> None:
        """Подписывает обработчики по умолчанию."""
        await self._event_bus.subscribe(EventTypes.VEHICLE_ASSIGNED, self.on_vehicle_assigned)
        await self._event_bus.subscribe(EventTypes.GROUP_QUEUED, self.on_group_queued)
        await self._event_bus.subscribe(EventTypes.GROUP_DROPPED_OFF, self.on_group_dropped_off)
        await self._event_bus.subscribe(EventTypes.FLEET_REGISTERED, self.on_fleet_registered)

    async def on_vehicle_assigned(self, event: DomainEvent) -> None:
        """Группа получила электромобиль."""
        if not isinstance(event, VehicleAssigned):
            return
        await log_info(
            f"Группа {event.group_id} назначена на электромобиль {event.vehicle_id}",
            extra={
                "group_id": event.group_id,
                "vehicle_id": event.vehicle_id,
                "event_id": event.event_id,
                "assigned_at": event.timestamp.isoformat(),
            },
        )

    async def on_group_queued(self, event: DomainEvent) -> None:
        if not isinstance(event, GroupQueued):
            return
        await log_info(
            f"Группа {event.group_id} ({event.people} чел.) ожидает свободный электромобиль",
            type_msg=TypeMsg.DEBUG,
        )

    async def on_group_dropped_off(self, event: DomainEvent) -> None:
        if not isinstance(event, GroupDroppedOff):
            return
        await log_info(
            f"Группа {event.group_id} высажена, электромобиль {event.vehicle_id} "
            f"освободил {event.released_seats} мест",
        )

    async def on_fleet_registered(self, event: DomainEvent) -> None:
        if not isinstance(event, FleetRegistered):
            return
        await log_info(
            f"Зарегистрировано электромобилей: {event.vehicle_count}, мест: {event.total_seats}",
        )
