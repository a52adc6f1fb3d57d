# evpool/common/constants.py
"""
Общие константы и перечисления.
"""

from enum import Enum


class TypeMsg(str, Enum):
    """Типы сообщений для логирования."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class EventTypes:
    """Константы типов событий."""
    FLEET_REGISTERED = "fleet.registered"
    VEHICLE_ASSIGNED = "vehicle.assigned"
    GROUP_QUEUED = "group.queued"
    GROUP_DROPPED_OFF = "group.dropped_off"
