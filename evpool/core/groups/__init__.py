"""
Домен групп пассажиров.
Очередь ожидания и назначения на электромобили.
"""

from evpool.core.groups.models import Assignment, Group
from evpool.core.groups.repository import GroupLedger

__all__ = [
    "Group",
    "Assignment",
    "GroupLedger",
]
