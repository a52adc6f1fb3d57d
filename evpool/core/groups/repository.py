# evpool/core/groups/repository.py
"""
Реестр групп: очередь ожидания и таблица назначений.
"""

from __future__ import annotations

from collections import deque
from typing import Optional

from evpool.core.groups.models import Assignment, Group


class GroupLedger:
    """
    Хранит FIFO-очередь ожидающих групп и таблицу group_id -> назначение.

    Группа находится либо в очереди, либо в таблице назначений.
    Не синхронизирован: доступ сериализует вызывающий сервис.
    """

    def __init__(self) -> None:
        self._queue: deque[Group] = deque()
        self._assignments: dict[int, Assignment] = {}

    # -------------------------------------------------------------------------
    # Очередь ожидания
    # -------------------------------------------------------------------------

    def enqueue(self, group: Group) -> None:
        """Добавляет группу в конец очереди."""
        self._queue.append(group)

    def dequeue_by_id(self, group_id: int) -> bool:
        """
        Удаляет первую группу с данным id из очереди.

        Таблицу назначений не затрагивает.

        Returns:
            True если группа была в очереди
        """
        for group in self._queue:
            if group.id == group_id:
                self._queue.remove(group)
                return True
        return False

    def find(self, group_id: int) -> Optional[Group]:
        """Ищет группу только в очереди ожидания."""
        for group in self._queue:
            if group.id == group_id:
                return group
        return None

    def peek_next(self) -> Optional[Group]:
        """Возвращает голову очереди без удаления."""
        return self._queue[0] if self._queue else None

    def waiting(self) -> list[Group]:
        """Снимок очереди от головы к хвосту."""
        return list(self._queue)

    # -------------------------------------------------------------------------
    # Таблица назначений
    # -------------------------------------------------------------------------

    def assign(self, group_id: int, vehicle_id: int, people: int) -> None:
        """Записывает назначение группы на электромобиль."""
        self._assignments[group_id] = Assignment(
            group_id=group_id,
            vehicle_id=vehicle_id,
            people=people,
        )

    def unassign(self, group_id: int) -> bool:
        """Удаляет назначение. Возвращает True, если оно было."""
        return self._assignments.pop(group_id, None) is not None

    def assignment_of(self, group_id: int) -> Optional[Assignment]:
        """Возвращает назначение группы или None."""
        return self._assignments.get(group_id)

    def riding_count(self) -> int:
        return len(self._assignments)

    def waiting_count(self) -> int:
        return len(self._queue)

    def contains(self, group_id: int) -> bool:
        """Проверяет, известна ли группа (ожидает или едет)."""
        return group_id in self._assignments or self.find(group_id) is not None

    def clear(self) -> None:
        """Очищает очередь и таблицу назначений."""
        self._queue.clear()
        self._assignments.clear()
