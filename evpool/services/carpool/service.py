# evpool/services/carpool/service.py
"""
Фасад сервиса совместных поездок.
Единственная точка входа для HTTP-слоя: регистрация автопарка,
запрос поездки, высадка и поиск группы.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Any, Optional

from pydantic import TypeAdapter, ValidationError

from evpool.common.constants import TypeMsg
from evpool.common.logger import log_info
from evpool.core.fleet import Vehicle, VehicleRepository
from evpool.core.groups import Group, GroupLedger
from evpool.core.matching import MatchingService
from evpool.infra.event_bus import EventBus
from evpool.services.carpool.exceptions import GroupNotFound, InvalidPayload
from evpool.shared.events.fleet_events import FleetRegistered, GroupDroppedOff, GroupQueued
from evpool.shared.models.fleet_dto import (
    CarPoolStats,
    GroupDTO,
    GroupIdRequest,
    JourneyResult,
    VehicleDTO,
)


_FLEET_ADAPTER = TypeAdapter(list[VehicleDTO])
_GROUP_ADAPTER = TypeAdapter(GroupDTO)
_GROUP_ID_ADAPTER = TypeAdapter(GroupIdRequest)


def _parse(adapter: TypeAdapter, payload: Any) -> Any:
    """Валидирует payload, ошибки pydantic превращает в InvalidPayload."""
    try:
        return adapter.validate_python(payload)
    except ValidationError as e:
        raise InvalidPayload(f"Некорректные данные: {e.error_count()} ошибок") from e


@dataclass
class CarPoolState:
    """Всё изменяемое состояние сервиса."""
    vehicles: VehicleRepository = field(default_factory=VehicleRepository)
    groups: GroupLedger = field(default_factory=GroupLedger)


class CarPoolService:
    """
    Сервис совместных поездок на электромобилях.

    Все чтения и изменения состояния выполняются под одним asyncio.Lock.
    Обработчики событий работают в своих задачах вне блокировки,
    поэтому могут сами обращаться к сервису.
    """

    def __init__(self, event_bus: EventBus, state: CarPoolState | None = None) -> None:
        """
        Args:
            event_bus: Шина уведомлений
            state: Начальное состояние (по умолчанию пустое)
        """
        self.event_bus = event_bus
        self.state = state or CarPoolState()
        self.matching = MatchingService(self.state.vehicles, event_bus)
        self._lock = asyncio.Lock()

    async def register_fleet(self, vehicles: Any) -> None:
        """
        Заменяет автопарк и сбрасывает очередь и назначения.

        Args:
            vehicles: Список {id, seats}

        Raises:
            InvalidPayload: Данные не являются списком {int id, int seats}
                или содержат повторяющиеся id
        """
        fleet: list[VehicleDTO] = _parse(_FLEET_ADAPTER, vehicles)

        ids = [v.id for v in fleet]
        if len(set(ids)) != len(ids):
            raise InvalidPayload("Повторяющиеся id электромобилей")

        async with self._lock:
            self.state.vehicles.replace_fleet(Vehicle.registered(v.id, v.seats) for v in fleet)
            self.state.groups.clear()

            await self.event_bus.publish(FleetRegistered(
                vehicle_count=len(fleet),
                total_seats=sum(v.seats for v in fleet),
            ))

    async def request_journey(self, group: Any) -> JourneyResult:
        """
        Пытается посадить группу в электромобиль.

        Если мест нет, группа ставится в очередь ожидания.
        Автоматического повторного подбора для очереди нет.

        Args:
            group: {id, people}

        Returns:
            JourneyResult(assigned=True, vehicle_id=...) или JourneyResult(assigned=False)

        Raises:
            InvalidPayload: Некорректные данные или группа уже известна
        """
        dto: GroupDTO = _parse(_GROUP_ADAPTER, group)
        new_group = Group(id=dto.id, people=dto.people)

        async with self._lock:
            if self.state.groups.contains(new_group.id):
                raise InvalidPayload(f"Группа {new_group.id} уже ожидает или едет")

            vehicle_id = await self.matching.assign_vehicle(new_group)
            if vehicle_id is not None:
                self.state.groups.assign(new_group.id, vehicle_id, new_group.people)
                return JourneyResult(assigned=True, vehicle_id=vehicle_id)

            self.state.groups.enqueue(new_group)
            await self.event_bus.publish(GroupQueued(group_id=new_group.id, people=new_group.people))

        return JourneyResult(assigned=False)

    async def drop_off(self, group_id: Any) -> None:
        """
        Высаживает едущую группу и возвращает места электромобилю.

        Raises:
            InvalidPayload: group_id не целое число
            GroupNotFound: У группы нет назначения (в том числе если она в очереди)
        """
        gid = self._parse_group_id(group_id)

        async with self._lock:
            assignment = self.state.groups.assignment_of(gid)
            if assignment is None:
                raise GroupNotFound(gid)

            await self.matching.release_seats(assignment.vehicle_id, assignment.people)
            self.state.groups.unassign(gid)

            await self.event_bus.publish(GroupDroppedOff(
                group_id=gid,
                vehicle_id=assignment.vehicle_id,
                released_seats=assignment.people,
            ))

    async def locate_group(self, group_id: Any) -> Optional[int]:
        """
        Возвращает id электромобиля, в котором едет группа.

        Returns:
            id электромобиля или None, если группа ещё не назначена
            (ожидает или неизвестна); это не ошибка

        Raises:
            InvalidPayload: group_id не целое число
        """
        gid = self._parse_group_id(group_id)

        async with self._lock:
            assignment = self.state.groups.assignment_of(gid)

        if assignment is None:
            await log_info(f"Группа {gid} пока без электромобиля", type_msg=TypeMsg.DEBUG)
            return None
        return assignment.vehicle_id

    async def stats(self) -> CarPoolStats:
        """Счётчики текущего состояния."""
        async with self._lock:
            vehicles = self.state.vehicles.list_vehicles()
            return CarPoolStats(
                vehicles=len(vehicles),
                free_seats=sum(v.seats for v in vehicles),
                occupied_seats=sum(v.occupied_seats for v in vehicles),
                waiting_groups=self.state.groups.waiting_count(),
                riding_groups=self.state.groups.riding_count(),
            )

    @staticmethod
    def _parse_group_id(group_id: Any) -> int:
        if isinstance(group_id, GroupIdRequest):
            return group_id.id
        return _parse(_GROUP_ID_ADAPTER, {"id": group_id}).id
