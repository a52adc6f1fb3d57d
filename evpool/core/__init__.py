"""
Доменный слой (Core Domain).
Чистая бизнес-логика, независимая от HTTP.
"""

from evpool.core.fleet import Vehicle, VehicleRepository
from evpool.core.groups import Assignment, Group, GroupLedger
from evpool.core.matching import MatchingService
from evpool.core.notifications import NotificationService

__all__ = [
    "Vehicle",
    "VehicleRepository",
    "Group",
    "Assignment",
    "GroupLedger",
    "MatchingService",
    "NotificationService",
]
