"""
Исключения доменного слоя.
"""

from typing import Optional


class DomainException(Exception):
    """Базовое исключение для доменных ошибок."""

    pass


class BookingError(DomainException):
    """Бронирование отклонено; хранилище при этом не меняется."""

    pass


class MissingSelectionError(BookingError):
    """Не выбран тип мероприятия или слот."""

    MESSAGES = {
        "event_type": "Please select an event type",
        "slot": "Please select a time slot",
    }

    def __init__(self, missing: str):
        super().__init__(self.MESSAGES.get(missing, f"Please select a {missing}"))
        self.missing = missing


class InvalidSelectionError(BookingError):
    """Дата, площадка или слот не соответствуют допустимым значениям."""

    pass


class SlotConflictError(BookingError):
    """Слот недоступен из-за существующего бронирования."""

    def __init__(self, reason: str, conflicting_event: Optional[str] = None):
        super().__init__(reason)
        self.reason = reason
        self.conflicting_event = conflicting_event


class PersistenceFailure(DomainException):
    """Ошибка чтения или записи сохраненного состояния."""

    pass
