"""
Домен автопарка.
Электромобили и их свободные места.
"""

from evpool.core.fleet.models import Vehicle
from evpool.core.fleet.repository import VehicleRepository

__all__ = [
    "Vehicle",
    "VehicleRepository",
]
