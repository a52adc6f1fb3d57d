"""
Общие фикстуры и настройки для тестов.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Generator
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

# Устанавливаем переменные окружения перед импортом модулей
os.environ.setdefault("LOG_LEVEL", "DEBUG")
os.environ.setdefault("LOG_FORMAT", "colored")

from evpool.core.fleet import Vehicle, VehicleRepository
from evpool.core.groups import GroupLedger
from evpool.infra.event_bus import EventBus
from evpool.services.carpool.service import CarPoolService


# =============================================================================
# ФИКСТУРЫ КОНФИГУРАЦИИ
# =============================================================================

@pytest.fixture(scope="session")
def project_root() -> Path:
    """Корневая директория проекта."""
    return Path(__file__).parent.parent


@pytest.fixture
def mock_config() -> dict[str, Any]:
    """Мок конфигурации для тестов."""
    return {
        "_comment_system": "Системные настройки",
        "PROJECT_NAME": "evpool_test",
        "VERSION": "1.0.0-test",
        "DEBUG": True,
        "ENVIRONMENT": "test",
        "LOG_LEVEL": "DEBUG",
        "LOG_TO_FILE": False,
        "LOG_FILE_PATH": "logs/test.log",
        "LOG_FORMAT": "json",
        "LOG_MAX_BYTES": 1024,
        "HOST": "127.0.0.1",
        "PORT": 8080,
        "EVENT_BUS_DRAIN_TIMEOUT": 1.0,
    }


# =============================================================================
# ФИКСТУРЫ ИНФРАСТРУКТУРЫ
# =============================================================================

@pytest.fixture
def event_bus() -> EventBus:
    """Настоящая шина событий без подписчиков."""
    return EventBus()


@pytest.fixture
def mock_event_bus() -> AsyncMock:
    """Мок шины событий."""
    bus = AsyncMock()
    bus.publish = AsyncMock(return_value=None)
    bus.subscribe = AsyncMock(return_value=None)
    return bus


# =============================================================================
# ФИКСТУРЫ ДОМЕНА
# =============================================================================

@pytest.fixture
def sample_fleet() -> list[dict[str, int]]:
    """Пример автопарка в формате запроса."""
    return [
        {"id": 1, "seats": 4},
        {"id": 2, "seats": 6},
        {"id": 3, "seats": 5},
    ]


@pytest.fixture
def vehicles(sample_fleet: list[dict[str, int]]) -> VehicleRepository:
    """Инвентарь с зарегистрированным автопарком."""
    repo = VehicleRepository()
    repo.replace_fleet(Vehicle.registered(v["id"], v["seats"]) for v in sample_fleet)
    return repo


@pytest.fixture
def ledger() -> GroupLedger:
    """Пустой реестр групп."""
    return GroupLedger()


@pytest.fixture
def carpool_service(event_bus: EventBus) -> CarPoolService:
    """Сервис с настоящей шиной и пустым состоянием."""
    return CarPoolService(event_bus)


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    """HTTP-клиент с выполненным lifespan приложения."""
    from evpool.services.carpool.app import app

    with TestClient(app) as test_client:
        yield test_client
