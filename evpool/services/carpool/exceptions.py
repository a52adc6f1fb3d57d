# evpool/services/carpool/exceptions.py
"""
Ошибки сервиса совместных поездок.
"""


class CarPoolError(Exception):
    """Базовая ошибка сервиса."""
    pass


class InvalidPayload(CarPoolError):
    """Входные данные не разобрать; состояние не изменено."""
    pass


class GroupNotFound(CarPoolError):
    """У группы нет текущего назначения на электромобиль."""

    def __init__(self, group_id: int) -> None:
        super().__init__(f"Группа {group_id} не найдена")
        self.group_id = group_id
