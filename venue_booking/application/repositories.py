from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from venue_booking.domain.schedule import BookingSchedule


@dataclass(frozen=True)
class PersistenceResult:
    """Итог записи в хранилище."""

    ok: bool
    error: Optional[str] = None

    @classmethod
    def success(cls) -> "PersistenceResult":
        return cls(ok=True)

    @classmethod
    def failure(cls, error: str) -> "PersistenceResult":
        return cls(ok=False, error=error)


class BookingScheduleRepository(ABC):
    """Абстрактный репозиторий для расписания бронирований."""

    @abstractmethod
    def load(self) -> BookingSchedule:
        """
        Загружает сохраненное расписание.

        Не выбрасывает исключений: если данных нет или их не удалось
        прочитать, возвращается расписание по умолчанию.
        """
        raise NotImplementedError

    @abstractmethod
    def save(self, schedule: BookingSchedule) -> PersistenceResult:
        """Сохраняет расписание. Ошибки возвращаются в результате, а не выбрасываются."""
        raise NotImplementedError
