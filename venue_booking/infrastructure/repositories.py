"""
Репозиторий расписания поверх локального хранилища.

Расписание хранится одной JSON-строкой под фиксированным ключом,
в том же виде, что и в памяти: дата -> площадка -> слот -> метка.
"""

import json
from typing import Callable, Optional

from pydantic import ValidationError

from venue_booking.application.interfaces import IKeyValueStorage, ILogger
from venue_booking.application.repositories import (
    BookingScheduleRepository,
    PersistenceResult,
)
from venue_booking.domain.errors import PersistenceFailure
from venue_booking.domain.schedule import BookingSchedule, ScheduleMap

DEFAULT_STORAGE_KEY = "venueBookings"

SEED_BOOKINGS: ScheduleMap = {
    "2025-09-15": {"Hall 1": {"Morning": "Wedding"}},
    "2025-09-20": {"Hall 2": {"Full Day": "Meeting"}},
}


def seed_schedule() -> BookingSchedule:
    """Расписание по умолчанию для первого запуска."""
    return BookingSchedule(bookings=SEED_BOOKINGS)


def serialize_schedule(schedule: BookingSchedule) -> str:
    return json.dumps(schedule.bookings, ensure_ascii=False, sort_keys=True)


def deserialize_schedule(raw: str) -> BookingSchedule:
    try:
        return BookingSchedule(bookings=json.loads(raw))
    except (ValueError, TypeError, RecursionError, ValidationError) as e:
        raise PersistenceFailure(f"Некорректные сохраненные данные: {e}") from e


class StorageBookingScheduleRepository(BookingScheduleRepository):
    """Хранит расписание в IKeyValueStorage под одним ключом."""

    def __init__(
        self,
        storage: IKeyValueStorage,
        logger: ILogger,
        key: str = DEFAULT_STORAGE_KEY,
        default_factory: Callable[[], BookingSchedule] = seed_schedule,
    ):
        self._storage = storage
        self._logger = logger
        self._key = key
        self._default_factory = default_factory

    def load(self) -> BookingSchedule:
        try:
            schedule = self._read()
        except PersistenceFailure as e:
            self._logger.warning(
                "Could not load bookings, using defaults", key=self._key, error=str(e)
            )
            return self._default_factory()

        if schedule is None:
            self._logger.debug("No persisted bookings, using defaults", key=self._key)
            return self._default_factory()
        return schedule

    def save(self, schedule: BookingSchedule) -> PersistenceResult:
        try:
            self._write(serialize_schedule(schedule))
        except PersistenceFailure as e:
            self._logger.error("Could not save bookings", key=self._key, error=str(e))
            return PersistenceResult.failure(str(e))
        return PersistenceResult.success()

    def _read(self) -> Optional[BookingSchedule]:
        try:
            raw = self._storage.get_item(self._key)
        except Exception as e:
            raise PersistenceFailure(f"Ошибка чтения хранилища: {e}") from e
        if raw is None:
            return None
        if not isinstance(raw, str):
            raise PersistenceFailure(
                f"Ожидалась строка, получено {type(raw).__name__}"
            )
        return deserialize_schedule(raw)

    def _write(self, raw: str) -> None:
        try:
            self._storage.set_item(self._key, raw)
        except Exception as e:
            raise PersistenceFailure(f"Ошибка записи в хранилище: {e}") from e
