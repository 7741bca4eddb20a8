"""
Состояние хранилища бронирований.

BookingSchedule - неизменяемое отображение
дата -> площадка -> слот -> метка мероприятия.
Инварианты проверяются при каждом создании, поэтому невалидное
состояние невозможно ни собрать в коде, ни прочитать из хранилища.
"""

from typing import Dict, Iterator, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .value_objects import Booking, DateLike, Slot, to_date_key

SlotMap = Dict[str, str]
VenueMap = Dict[str, SlotMap]
ScheduleMap = Dict[str, VenueMap]


class BookingSchedule(BaseModel):
    """Все существующие бронирования."""

    model_config = ConfigDict(frozen=True)

    bookings: ScheduleMap = Field(default_factory=dict)

    @field_validator("bookings")
    @classmethod
    def keys_are_canonical(cls, v: ScheduleMap) -> ScheduleMap:
        for date_key, venues in v.items():
            if to_date_key(date_key) != date_key:
                raise ValueError(f"Неканонический ключ даты: {date_key!r}")
            for venue, slots in venues.items():
                if not venue:
                    raise ValueError(f"Пустое имя площадки на {date_key}")
                for slot, label in slots.items():
                    Slot.parse(slot)
                    if not label:
                        raise ValueError(
                            f"Пустая метка мероприятия: {date_key} / {venue} / {slot}"
                        )
        return v

    @model_validator(mode="after")
    def full_day_is_exclusive(self) -> "BookingSchedule":
        for date_key, venues in self.bookings.items():
            for venue, slots in venues.items():
                if Slot.FULL_DAY.value in slots and len(slots) > 1:
                    raise ValueError(
                        f"Full Day совмещен с другими слотами: {date_key} / {venue}"
                    )
        return self

    @classmethod
    def empty(cls) -> "BookingSchedule":
        return cls()

    def venue_bookings(self, date: DateLike, venue: str) -> SlotMap:
        """Копия бронирований площадки на дату (слот -> метка)."""
        return dict(self.bookings.get(to_date_key(date), {}).get(venue, {}))

    def booked_slots(self, date: DateLike, venue: str) -> List[Slot]:
        """Занятые слоты в фиксированном порядке."""
        booked = self.venue_bookings(date, venue)
        return [slot for slot in Slot.ordered() if slot.value in booked]

    def label_for(self, date: DateLike, venue: str, slot: Slot) -> Optional[str]:
        return self.venue_bookings(date, venue).get(Slot.parse(slot).value)

    def with_booking(
        self, date: DateLike, venue: str, slot: Slot, event_label: str
    ) -> "BookingSchedule":
        """
        Возвращает новое расписание с одной добавленной записью.

        Текущий объект не меняется; промежуточные уровни создаются
        при необходимости.
        """
        date_key = to_date_key(date)
        slot = Slot.parse(slot)
        bookings = {
            d: {v: dict(slots) for v, slots in venues.items()}
            for d, venues in self.bookings.items()
        }
        bookings.setdefault(date_key, {}).setdefault(venue, {})[slot.value] = event_label
        return BookingSchedule(bookings=bookings)

    def iter_bookings(self) -> Iterator[Booking]:
        """Все бронирования по порядку даты, площадки и слота."""
        for date_key in sorted(self.bookings):
            venues = self.bookings[date_key]
            for venue in sorted(venues):
                slots = venues[venue]
                for slot in Slot.ordered():
                    if slot.value in slots:
                        yield Booking(date_key, venue, slot, slots[slot.value])

    @property
    def is_empty(self) -> bool:
        return self.booking_count == 0

    @property
    def booking_count(self) -> int:
        return sum(
            len(slots) for venues in self.bookings.values() for slots in venues.values()
        )
