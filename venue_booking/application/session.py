"""
Состояние выбора пользователя в форме бронирования.

Сессия хранит выбранные дату, площадку, тип мероприятия и слот,
пересчитывает производные значения по запросу и передает подтверждение
обработчику команд. Незавершенный выбор никогда не попадает в хранилище.
"""

from datetime import date
from typing import List, Optional, Sequence

from venue_booking.domain.errors import (
    InvalidSelectionError,
    MissingSelectionError,
    SlotConflictError,
)
from venue_booking.domain.events import BookingCreated
from venue_booking.domain.pricing import DEFAULT_PRICING, PricingPolicy, calculate_price
from venue_booking.domain.value_objects import DateLike, Slot, from_date_key, to_date_key

from .commands import BookingCommandHandler, SubmitBookingCommand
from .notifications import NotificationCenter
from .store import BookingStore
from .views import DayStatus, MonthView, SlotOption, day_status, month_view, slot_options

SLOT_UNAVAILABLE_MESSAGE = "This slot is no longer available."


class BookingSession:
    """Фасад для слоя отображения."""

    def __init__(
        self,
        store: BookingStore,
        handler: BookingCommandHandler,
        notifications: NotificationCenter,
        venues: Sequence[str],
        pricing: PricingPolicy = DEFAULT_PRICING,
        today: Optional[date] = None,
    ):
        if not venues:
            raise ValueError("Нужна хотя бы одна площадка")
        self._store = store
        self._handler = handler
        self._notifications = notifications
        self._venues = list(venues)
        self._pricing = pricing

        start = today or date.today()
        self.selected_date_key = to_date_key(start)
        self.selected_venue = self._venues[0]
        self.event_type: Optional[str] = None
        self.selected_slot: Optional[Slot] = None
        self.displayed_year = start.year
        self.displayed_month = start.month

    @property
    def venues(self) -> List[str]:
        return list(self._venues)

    @property
    def notifications(self) -> NotificationCenter:
        return self._notifications

    @property
    def selected_date(self) -> date:
        return from_date_key(self.selected_date_key)

    # --- Выбор ---

    def select_date(self, value: DateLike) -> None:
        """Выбирает дату; выбранный слот сбрасывается."""
        self.selected_date_key = to_date_key(value)
        self.selected_slot = None

    def select_venue(self, venue: str) -> None:
        if venue not in self._venues:
            raise InvalidSelectionError(f"Неизвестная площадка: {venue!r}")
        self.selected_venue = venue

    def select_event_type(self, event_type: Optional[str]) -> None:
        self.event_type = event_type or None

    def select_slot(self, slot: Slot) -> bool:
        """Выбирает слот. Недоступный слот игнорируется, возвращается False."""
        try:
            slot = Slot.parse(slot)
        except ValueError as e:
            raise InvalidSelectionError(str(e)) from e
        option = next(o for o in self.slot_options() if o.slot is slot)
        if option.disabled:
            return False
        self.selected_slot = slot
        return True

    # --- Производные значения ---

    @property
    def price(self) -> float:
        return calculate_price(self.event_type, self.selected_slot, self._pricing)

    @property
    def can_confirm(self) -> bool:
        return bool(self.event_type) and self.selected_slot is not None

    def slot_options(self) -> List[SlotOption]:
        return slot_options(
            self._store.schedule,
            self.selected_date_key,
            self.selected_venue,
            self.selected_slot,
        )

    def day_status(self, value: DateLike) -> DayStatus:
        return day_status(self._store.schedule, value, self.selected_venue)

    def month_view(self) -> MonthView:
        return month_view(
            self.displayed_year,
            self.displayed_month,
            self._store.schedule,
            self.selected_venue,
        )

    def show_previous_month(self) -> MonthView:
        self.displayed_year, self.displayed_month = self.month_view().previous_month()
        return self.month_view()

    def show_next_month(self) -> MonthView:
        self.displayed_year, self.displayed_month = self.month_view().next_month()
        return self.month_view()

    # --- Подтверждение ---

    def confirm(self) -> Optional[BookingCreated]:
        """
        Подтверждает бронирование текущего выбора.

        При успехе показывает уведомление и сбрасывает тип мероприятия и
        слот. При ошибке показывает ее текст; хранилище не меняется.
        """
        command = SubmitBookingCommand(
            date=self.selected_date_key,
            venue=self.selected_venue,
            event_type=self.event_type,
            slot=self.selected_slot.value if self.selected_slot else None,
        )
        try:
            event = self._handler.handle(command)
        except SlotConflictError as e:
            self._notifications.error(e.reason or SLOT_UNAVAILABLE_MESSAGE)
            return None
        except (MissingSelectionError, InvalidSelectionError) as e:
            self._notifications.error(str(e))
            return None

        self._notifications.success(
            f"Successfully booked for {event.event_label} at {event.venue}!"
        )
        self.event_type = None
        self.selected_slot = None
        return event
