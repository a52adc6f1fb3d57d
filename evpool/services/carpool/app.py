# evpool/services/carpool/app.py
"""
FastAPI приложение сервиса совместных поездок.

Endpoints:
- GET /status - готовность сервиса
- GET /health - счётчики состояния
- PUT /evs - регистрация автопарка
- POST /journey - запрос поездки
- POST /dropoff - высадка группы
- POST /locate - где едет группа
"""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from evpool.common.constants import TypeMsg
from evpool.common.logger import log_info, setup_logging
from evpool.config import settings
from evpool.core.notifications import NotificationService
from evpool.infra.event_bus import close_event_bus, get_event_bus
from evpool.services.carpool.dependencies import (
    cleanup_dependencies,
    get_carpool_service,
    init_dependencies,
)
from evpool.services.carpool.routes import router
from evpool.services.carpool.service import CarPoolService


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Жизненный цикл приложения."""
    setup_logging()

    event_bus = get_event_bus()
    await NotificationService(event_bus).register()
    await init_dependencies(event_bus)

    await log_info("Сервис совместных поездок готов", type_msg=TypeMsg.INFO)

    yield

    await cleanup_dependencies()
    await close_event_bus()


app = FastAPI(
    title="EV CarPool Service",
    version=settings.system.VERSION,
    lifespan=lifespan,
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Любые ошибки разбора тела запроса отдаются как 400."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "Invalid payload"},
    )


app.include_router(router)


@app.get("/health")
async def health_check(service: CarPoolService = Depends(get_carpool_service)):
    stats = await service.stats()
    return {"status": "ok", "service": "evpool", **stats.model_dump()}
