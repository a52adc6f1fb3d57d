# evpool/shared/events/fleet_events.py
"""
События домена автопарка и групп пассажиров.
"""

from __future__ import annotations

from typing import Literal

from evpool.common.constants import EventTypes
from evpool.shared.events.base import DomainEvent


class FleetRegistered(DomainEvent):
    """Событие: автопарк заменён целиком."""

    event_type: Literal["fleet.registered"] = EventTypes.FLEET_REGISTERED

    vehicle_count: int
    total_seats: int


class VehicleAssigned(DomainEvent):
    """Событие: группе назначен электромобиль."""

    event_type: Literal["vehicle.assigned"] = EventTypes.VEHICLE_ASSIGNED

    group_id: int
    vehicle_id: int


class GroupQueued(DomainEvent):
    """Событие: группа поставлена в очередь ожидания."""

    event_type: Literal["group.queued"] = EventTypes.GROUP_QUEUED

    group_id: int
    people: int


class GroupDroppedOff(DomainEvent):
    """Событие: группа высажена, места освобождены."""

    event_type: Literal["group.dropped_off"] = EventTypes.GROUP_DROPPED_OFF

    group_id: int
    vehicle_id: int
    released_seats: int
