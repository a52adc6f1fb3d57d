#!/usr/bin/env python3
# main.py
"""
Точка входа сервиса совместных поездок на электромобилях.
Запускает HTTP API (uvicorn) с настройками из config/config.json.
"""

from __future__ import annotations

import asyncio
import sys

import uvicorn

from evpool.common.constants import TypeMsg
from evpool.common.logger import log_error, log_info, setup_logging
from evpool.config import settings


async def main() -> None:
    """Запуск HTTP API."""
    setup_logging()

    await log_info(
        f"Запуск {settings.system.PROJECT_NAME} v{settings.system.VERSION} "
        f"на {settings.server.HOST}:{settings.server.PORT}",
        type_msg=TypeMsg.INFO,
    )

    config = uvicorn.Config(
        "evpool.services.carpool.app:app",
        host=settings.server.HOST,
        port=settings.server.PORT,
        reload=False,
        log_level="debug" if settings.system.DEBUG else "info",
    )

    server = uvicorn.Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        pass
    except Exception as e:
        asyncio.run(log_error(f"Критическая ошибка: {e}", exc_info=True))
        sys.exit(1)
