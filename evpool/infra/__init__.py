"""
Инфраструктурный слой.
Внутренняя шина уведомлений.
"""

from evpool.infra.event_bus import EventBus, EventHandler, close_event_bus, get_event_bus

__all__ = [
    "EventBus",
    "EventHandler",
    "get_event_bus",
    "close_event_bus",
]
