"""
Тесты для реестра групп.
"""

from __future__ import annotations

from evpool.core.groups import Assignment, Group, GroupLedger


class TestWaitingQueue:
    """Тесты очереди ожидания."""

    def test_enqueue_keeps_fifo_order(self, ledger: GroupLedger) -> None:
        ledger.enqueue(Group(id=1, people=2))
        ledger.enqueue(Group(id=2, people=3))

        assert [g.id for g in ledger.waiting()] == [1, 2]
        assert ledger.peek_next() == Group(id=1, people=2)
        assert ledger.waiting_count() == 2

    def test_peek_next_empty(self, ledger: GroupLedger) -> None:
        assert ledger.peek_next() is None

    def test_peek_next_does_not_remove(self, ledger: GroupLedger) -> None:
        ledger.enqueue(Group(id=1, people=2))

        ledger.peek_next()

        assert ledger.waiting_count() == 1

    def test_find(self, ledger: GroupLedger) -> None:
        ledger.enqueue(Group(id=5, people=4))

        assert ledger.find(5) == Group(id=5, people=4)
        assert ledger.find(6) is None

    def test_find_ignores_assignments(self, ledger: GroupLedger) -> None:
        """find ищет только в очереди."""
        ledger.assign(5, vehicle_id=1, people=4)

        assert ledger.find(5) is None

    def test_dequeue_by_id(self, ledger: GroupLedger) -> None:
        ledger.enqueue(Group(id=1, people=2))
        ledger.enqueue(Group(id=2, people=3))
        ledger.enqueue(Group(id=3, people=1))

        assert ledger.dequeue_by_id(2) is True
        assert [g.id for g in ledger.waiting()] == [1, 3]

    def test_dequeue_by_id_missing(self, ledger: GroupLedger) -> None:
        ledger.enqueue(Group(id=1, people=2))

        assert ledger.dequeue_by_id(9) is False
        assert ledger.waiting_count() == 1

    def test_dequeue_by_id_does_not_touch_assignments(self, ledger: GroupLedger) -> None:
        ledger.assign(1, vehicle_id=2, people=3)

        assert ledger.dequeue_by_id(1) is False
        assert ledger.assignment_of(1) is not None


class TestAssignments:
    """Тесты таблицы назначений."""

    def test_assign_and_lookup(self, ledger: GroupLedger) -> None:
        ledger.assign(1, vehicle_id=7, people=3)

        assert ledger.assignment_of(1) == Assignment(group_id=1, vehicle_id=7, people=3)
        assert ledger.riding_count() == 1

    def test_assignment_of_unknown(self, ledger: GroupLedger) -> None:
        assert ledger.assignment_of(42) is None

    def test_unassign(self, ledger: GroupLedger) -> None:
        ledger.assign(1, vehicle_id=7, people=3)

        assert ledger.unassign(1) is True
        assert ledger.unassign(1) is False
        assert ledger.assignment_of(1) is None

    def test_contains(self, ledger: GroupLedger) -> None:
        ledger.enqueue(Group(id=1, people=2))
        ledger.assign(2, vehicle_id=1, people=2)

        assert ledger.contains(1)
        assert ledger.contains(2)
        assert not ledger.contains(3)

    def test_clear(self, ledger: GroupLedger) -> None:
        ledger.enqueue(Group(id=1, people=2))
        ledger.assign(2, vehicle_id=1, people=2)

        ledger.clear()

        assert ledger.waiting() == []
        assert ledger.riding_count() == 0
