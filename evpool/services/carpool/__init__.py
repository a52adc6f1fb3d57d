"""
Сервис совместных поездок: фасад и HTTP-слой.
"""

from evpool.services.carpool.exceptions import CarPoolError, GroupNotFound, InvalidPayload
from evpool.services.carpool.service import CarPoolService, CarPoolState

__all__ = [
    "CarPoolService",
    "CarPoolState",
    "CarPoolError",
    "InvalidPayload",
    "GroupNotFound",
]
