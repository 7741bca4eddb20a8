"""
Проверка доступности слота.

Правила применяются строго по порядку, срабатывает первое подходящее:

1. На дату у площадки нет бронирований - слот свободен.
2. Площадка занята на весь день - слот недоступен.
3. Запрошен Full Day, а часть дня уже занята - слот недоступен.
4. Запрошенный слот уже занят - слот недоступен.
5. Иначе слот свободен.

Правило 2 перекрывает правило 4: при бронировании на весь день
пользователь видит именно это сообщение, а не "слот занят".
"""

from dataclasses import dataclass
from typing import Optional

from .schedule import BookingSchedule
from .value_objects import DateLike, Slot

FULL_DAY_BOOKED = "venue booked for full day"
PARTIAL_BOOKINGS_BLOCK_FULL_DAY = "existing partial bookings block full-day booking"
SLOT_ALREADY_BOOKED = "slot already booked"


@dataclass(frozen=True)
class AvailabilityResult:
    """Результат проверки доступности."""

    available: bool
    reason: Optional[str] = None
    conflicting_event: Optional[str] = None

    @classmethod
    def free(cls) -> "AvailabilityResult":
        return cls(available=True)

    @classmethod
    def blocked(cls, reason: str, conflicting_event: str) -> "AvailabilityResult":
        return cls(available=False, reason=reason, conflicting_event=conflicting_event)


def check_availability(
    schedule: BookingSchedule, date: DateLike, venue: str, slot: Slot
) -> AvailabilityResult:
    """Проверяет, можно ли забронировать слот. Расписание не меняется."""
    slot = Slot.parse(slot)
    booked = schedule.venue_bookings(date, venue)

    if not booked:
        return AvailabilityResult.free()

    full_day_label = booked.get(Slot.FULL_DAY.value)
    if full_day_label is not None:
        return AvailabilityResult.blocked(FULL_DAY_BOOKED, full_day_label)

    if slot.is_full_day:
        first_booked = next(s for s in Slot.partial() if s.value in booked)
        return AvailabilityResult.blocked(
            PARTIAL_BOOKINGS_BLOCK_FULL_DAY, booked[first_booked.value]
        )

    label = booked.get(slot.value)
    if label is not None:
        return AvailabilityResult.blocked(SLOT_ALREADY_BOOKED, label)

    return AvailabilityResult.free()
