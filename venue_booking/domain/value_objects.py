"""
Объекты-значения календаря бронирования.
"""

import re
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import List, Union

_DATE_KEY_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

DateLike = Union[date, datetime, str]


class Slot(str, Enum):
    """Часть дня, которую можно забронировать."""

    MORNING = "Morning"
    AFTERNOON = "Afternoon"
    EVENING = "Evening"
    FULL_DAY = "Full Day"

    @classmethod
    def ordered(cls) -> List["Slot"]:
        """Все слоты в фиксированном порядке."""
        return list(cls)

    @classmethod
    def partial(cls) -> List["Slot"]:
        """Слоты, занимающие часть дня."""
        return [slot for slot in cls if slot is not cls.FULL_DAY]

    @classmethod
    def parse(cls, value: Union["Slot", str]) -> "Slot":
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"Неизвестный слот: {value!r}") from None

    @property
    def is_full_day(self) -> bool:
        return self is Slot.FULL_DAY


class EventType(str, Enum):
    """Типы мероприятий с известной базовой ценой."""

    WEDDING = "Wedding"
    CEREMONY = "Ceremony"
    BIRTHDAY = "Birthday"
    ANNIVERSARY = "Anniversary"
    MEETING = "Meeting"
    CONFERENCE = "Conference"
    PARTY = "Party"
    EXHIBITION = "Exhibition"


def to_date_key(value: DateLike) -> str:
    """
    Приводит дату к каноническому ключу YYYY-MM-DD.

    Строка принимается только в том же формате и только если это
    существующая календарная дата.
    """
    if isinstance(value, datetime):
        value = value.date()
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, str):
        if not _DATE_KEY_RE.match(value):
            raise ValueError(f"Дата должна быть в формате YYYY-MM-DD: {value!r}")
        return date.fromisoformat(value).isoformat()
    raise ValueError(f"Некорректная дата: {value!r}")


def from_date_key(key: str) -> date:
    return date.fromisoformat(to_date_key(key))


@dataclass(frozen=True)
class Booking:
    """Одно бронирование: дата, площадка, слот и метка мероприятия."""

    date_key: str
    venue: str
    slot: Slot
    event_label: str

    @property
    def day(self) -> date:
        return from_date_key(self.date_key)
