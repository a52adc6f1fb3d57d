# evpool/infra/event_bus.py
"""
Внутренняя шина уведомлений.
Реализует паттерн Pub/Sub в пределах процесса на задачах asyncio.
"""

from __future__ import annotations

import asyncio
from typing import Awaitable, Callable

from evpool.common.constants import TypeMsg
from evpool.common.logger import log_error, log_info
from evpool.shared.events.base import DomainEvent


# Тип обработчика событий
EventHandler = Callable[[DomainEvent], Awaitable[None]]


class EventBus:
    """
    Шина событий, ключ подписки — event_type.

    Реализует:
    - Несколько независимых обработчиков на один тип события
    - Публикацию "выстрелил и забыл": каждый обработчик запускается
      отдельной задачей, publish не ждёт их завершения
    - Перехват ошибок обработчиков на границе задачи
    """

    def __init__(self) -> None:
        self._handlers: dict[str, list[EventHandler]] = {}
        self._pending: set[asyncio.Task] = set()

    @property
    def pending_count(self) -> int:
        """Количество ещё не завершившихся обработчиков."""
        return len(self._pending)

    def handlers_for(self, event_type: str) -> list[EventHandler]:
        """Возвращает копию списка обработчиков типа события."""
        return list(self._handlers.get(event_type, []))

    async def subscribe(self, event_type: str, handler: EventHandler) -> None:
        """
        Подписывается на события определённого типа.

        Args:
            event_type: Тип события
            handler: Асинхронный обработчик события
        """
        self._handlers.setdefault(event_type, []).append(handler)

        await log_info(
            f"Подписка на события: {event_type} -> {getattr(handler, '__name__', repr(handler))}",
            type_msg=TypeMsg.DEBUG,
        )

    async def publish(self, event: DomainEvent) -> None:
        """
        Публикует событие всем текущим подписчикам.

        Возвращается сразу после постановки обработчиков в планировщик.

        Args:
            event: Доменное событие
        """
        handlers = self._handlers.get(event.event_type)
        if not handlers:
            return

        for handler in list(handlers):
            task = asyncio.create_task(self._dispatch(handler, event))
            self._pending.add(task)
            task.add_done_callback(self._pending.discard)

        await log_info(
            f"Событие опубликовано: {event.event_type} ({len(handlers)} обработчиков)",
            type_msg=TypeMsg.DEBUG,
        )

    async def _dispatch(self, handler: EventHandler, event: DomainEvent) -> None:
        """Вызывает обработчик; ошибка логируется и не покидает задачу."""
        try:
            await handler(event)
        except Exception as e:
            await log_error(
                f"Ошибка в обработчике {getattr(handler, '__name__', repr(handler))}: {e}",
                extra={"event_type": event.event_type, "event_id": event.event_id},
                exc_info=True,
            )

    async def drain(self, timeout: float | None = None) -> None:
        """
        Ожидает завершения всех запущенных обработчиков.

        Обработчики, опубликованные другими обработчиками во время
        ожидания, тоже дожидаются в пределах того же timeout.

        Args:
            timeout: Максимальное время ожидания в секундах (None — без ограничения)
        """
        loop = asyncio.get_running_loop()
        deadline = None if timeout is None else loop.time() + timeout

        while self._pending:
            remaining = None if deadline is None else max(deadline - loop.time(), 0)
            _, pending = await asyncio.wait(set(self._pending), timeout=remaining)
            if pending:
                await log_error(f"Не дождались {len(pending)} обработчиков событий, отменяем")
                for task in pending:
                    task.cancel()
                await asyncio.gather(*pending, return_exceptions=True)

    async def close(self, timeout: float | None = None) -> None:
        """Дожидается обработчиков и снимает все подписки."""
        await self.drain(timeout=timeout)
        self._handlers.clear()


# Глобальный экземпляр
_event_bus: EventBus | None = None


def get_event_bus() -> EventBus:
    """
    Возвращает глобальный экземпляр EventBus.

    Returns:
        EventBus
    """
    global _event_bus
    if _event_bus is None:
        _event_bus = EventBus()
    return _event_bus


async def close_event_bus() -> None:
    """
    Закрывает глобальную шину: ждёт обработчиков в пределах DRAIN_TIMEOUT.
    """
    global _event_bus
    from evpool.config import settings

    if _event_bus is None:
        return

    await _event_bus.close(timeout=settings.event_bus.DRAIN_TIMEOUT)
    _event_bus = None
    await log_info("Шина уведомлений остановлена", type_msg=TypeMsg.INFO)
