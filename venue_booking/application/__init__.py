"""
Прикладной слой: хранилище сессии, обработка команд и модели представления.
"""

from .commands import BookingCommandHandler, SubmitBookingCommand, submit_booking
from .notifications import Notification, NotificationCenter, NotificationKind
from .repositories import BookingScheduleRepository, PersistenceResult
from .session import BookingSession
from .store import BookingStore
from .views import (
    CalendarDay,
    DayStatus,
    MonthView,
    SlotOption,
    day_status,
    month_view,
    slot_options,
)

__all__ = [
    "BookingCommandHandler",
    "SubmitBookingCommand",
    "submit_booking",
    "BookingScheduleRepository",
    "PersistenceResult",
    "BookingStore",
    "BookingSession",
    "Notification",
    "NotificationCenter",
    "NotificationKind",
    "CalendarDay",
    "DayStatus",
    "MonthView",
    "SlotOption",
    "day_status",
    "month_view",
    "slot_options",
]
