# evpool/services/carpool/dependencies.py
"""
Dependency Injection для сервиса совместных поездок.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from evpool.infra.event_bus import EventBus
    from evpool.services.carpool.service import CarPoolService


# Синглтон на процесс
_carpool_service: "CarPoolService | None" = None


async def init_dependencies(event_bus: "EventBus") -> None:
    """Создать сервис при старте приложения."""
    global _carpool_service

    from evpool.services.carpool.service import CarPoolService
    _carpool_service = CarPoolService(event_bus)


def get_carpool_service() -> "CarPoolService":
    """Получить сервис совместных поездок."""
    if _carpool_service is None:
        raise RuntimeError("CarPoolService не инициализирован. Вызовите init_dependencies()")
    return _carpool_service


async def cleanup_dependencies() -> None:
    """Освободить зависимости при остановке."""
    global _carpool_service
    _carpool_service = None
