"""
Обработка команды бронирования.

submit_booking - чистая функция: принимает расписание и возвращает новое
либо выбрасывает BookingError. BookingCommandHandler применяет результат
к хранилищу сессии.
"""

from dataclasses import dataclass
from typing import Optional, Sequence

from venue_booking.domain.availability import check_availability
from venue_booking.domain.errors import (
    BookingError,
    InvalidSelectionError,
    MissingSelectionError,
    SlotConflictError,
)
from venue_booking.domain.events import BookingCreated
from venue_booking.domain.schedule import BookingSchedule
from venue_booking.domain.value_objects import DateLike, Slot, to_date_key

from .interfaces import ILogger
from .store import BookingStore


@dataclass(frozen=True)
class SubmitBookingCommand:
    """Команда на создание бронирования."""

    date: DateLike
    venue: str
    event_type: Optional[str]
    slot: Optional[str]


def submit_booking(
    schedule: BookingSchedule,
    date: DateLike,
    venue: str,
    event_type: Optional[str],
    slot: Optional[str],
    venues: Optional[Sequence[str]] = None,
) -> BookingSchedule:
    """
    Проверяет предложенное бронирование и возвращает расписание с ним.

    Порядок проверок:
    1. Выбраны тип мероприятия и слот (MissingSelectionError).
    2. Дата, площадка и слот корректны (InvalidSelectionError).
    3. Слот доступен (SlotConflictError).

    Исходное расписание не меняется ни при успехе, ни при ошибке.
    """
    if not event_type:
        raise MissingSelectionError("event_type")
    if not slot:
        raise MissingSelectionError("slot")

    try:
        date_key = to_date_key(date)
        parsed_slot = Slot.parse(slot)
    except ValueError as e:
        raise InvalidSelectionError(str(e)) from e
    if not venue or (venues is not None and venue not in venues):
        raise InvalidSelectionError(f"Неизвестная площадка: {venue!r}")

    availability = check_availability(schedule, date_key, venue, parsed_slot)
    if not availability.available:
        raise SlotConflictError(availability.reason, availability.conflicting_event)

    return schedule.with_booking(date_key, venue, parsed_slot, event_type)


class BookingCommandHandler:
    """Применяет команды бронирования к хранилищу сессии."""

    def __init__(
        self,
        store: BookingStore,
        logger: ILogger,
        venues: Optional[Sequence[str]] = None,
    ):
        self._store = store
        self._logger = logger
        self._venues = list(venues) if venues is not None else None

    def handle(self, command: SubmitBookingCommand) -> BookingCreated:
        try:
            schedule = submit_booking(
                self._store.schedule,
                command.date,
                command.venue,
                command.event_type,
                command.slot,
                venues=self._venues,
            )
        except BookingError as e:
            self._logger.warning(
                "Booking rejected",
                error_type=type(e).__name__,
                error=str(e),
                venue=command.venue,
                slot=command.slot,
            )
            raise

        self._store.commit(schedule)
        event = BookingCreated(
            date_key=to_date_key(command.date),
            venue=command.venue,
            slot=Slot.parse(command.slot),
            event_label=command.event_type,
        )
        self._logger.info(
            "Booking created",
            date=event.date_key,
            venue=event.venue,
            slot=event.slot.value,
            event=event.event_label,
        )
        return event
