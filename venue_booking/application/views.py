"""
Модели представления для календаря и формы бронирования.

Все функции чистые и пересчитываются по запросу из расписания
и текущего выбора.
"""

import calendar
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import List, Optional, Tuple

from venue_booking.domain.schedule import BookingSchedule
from venue_booking.domain.value_objects import DateLike, Slot


class DayStatus(str, Enum):
    """Занятость площадки на день."""

    FREE = "free"
    PARTIAL = "partial"
    FULL = "full"


def day_status(schedule: BookingSchedule, date: DateLike, venue: str) -> DayStatus:
    booked = schedule.booked_slots(date, venue)
    if Slot.FULL_DAY in booked:
        return DayStatus.FULL
    if booked:
        return DayStatus.PARTIAL
    return DayStatus.FREE


@dataclass(frozen=True)
class CalendarDay:
    day: date
    status: DayStatus


@dataclass(frozen=True)
class MonthView:
    """Сетка месяца, неделя начинается с воскресенья."""

    year: int
    month: int
    leading_blanks: int
    days: Tuple[CalendarDay, ...]
    trailing_blanks: int

    @property
    def weeks(self) -> int:
        return (self.leading_blanks + len(self.days) + self.trailing_blanks) // 7

    def previous_month(self) -> Tuple[int, int]:
        if self.month == 1:
            return self.year - 1, 12
        return self.year, self.month - 1

    def next_month(self) -> Tuple[int, int]:
        if self.month == 12:
            return self.year + 1, 1
        return self.year, self.month + 1


def month_view(
    year: int, month: int, schedule: BookingSchedule, venue: str
) -> MonthView:
    # monthrange считает понедельник нулевым днем
    first_weekday, days_in_month = calendar.monthrange(year, month)
    leading = (first_weekday + 1) % 7
    days = tuple(
        CalendarDay(d, day_status(schedule, d, venue))
        for d in (date(year, month, day) for day in range(1, days_in_month + 1))
    )
    trailing = (7 - (leading + days_in_month) % 7) % 7
    return MonthView(
        year=year,
        month=month,
        leading_blanks=leading,
        days=days,
        trailing_blanks=trailing,
    )


@dataclass(frozen=True)
class SlotOption:
    """Состояние кнопки слота в форме бронирования."""

    slot: Slot
    booked_label: Optional[str]
    disabled: bool
    slots_taken: bool = False

    @property
    def is_booked(self) -> bool:
        return self.booked_label is not None


def slot_options(
    schedule: BookingSchedule,
    date: DateLike,
    venue: str,
    selected_slot: Optional[Slot] = None,
) -> List[SlotOption]:
    """
    Возвращает состояние каждого слота для выбранной даты и площадки.

    Слот недоступен, если он занят, если занят весь день, если выбран
    Full Day (для остальных слотов) или если это Full Day, а часть дня
    уже занята.
    """
    booked = schedule.venue_bookings(date, venue)
    full_day_booked = Slot.FULL_DAY.value in booked
    full_day_selected = selected_slot is not None and Slot.parse(selected_slot).is_full_day

    options = []
    for slot in Slot.ordered():
        label = booked.get(slot.value)
        slots_taken = slot.is_full_day and bool(booked) and not full_day_booked
        disabled = (
            label is not None
            or full_day_booked
            or (full_day_selected and not slot.is_full_day)
            or slots_taken
        )
        options.append(SlotOption(slot, label, disabled, slots_taken))
    return options
