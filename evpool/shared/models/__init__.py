"""
Общие DTO для всех слоёв.
"""

from evpool.shared.models.fleet_dto import (
    CarPoolStats,
    GroupDTO,
    GroupIdRequest,
    JourneyResult,
    VehicleDTO,
)

__all__ = [
    "VehicleDTO",
    "GroupDTO",
    "GroupIdRequest",
    "JourneyResult",
    "CarPoolStats",
]
