"""
Схемы доменных событий.

Все события содержат event_id и передаются через внутреннюю шину
уведомлений (evpool.infra.event_bus).
"""

from evpool.shared.events.base import DomainEvent, EventMetadata
from evpool.shared.events.fleet_events import (
    FleetRegistered,
    GroupDroppedOff,
    GroupQueued,
    VehicleAssigned,
)

__all__ = [
    "DomainEvent",
    "EventMetadata",
    "FleetRegistered",
    "VehicleAssigned",
    "GroupQueued",
    "GroupDroppedOff",
]
