"""
Домен уведомлений.
"""

from evpool.core.notifications.service import NotificationService

__all__ = [
    "NotificationService",
]
