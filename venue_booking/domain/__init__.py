"""
Доменный слой: расписание бронирований и правила, которые его защищают.
"""

from .availability import (
    FULL_DAY_BOOKED,
    PARTIAL_BOOKINGS_BLOCK_FULL_DAY,
    SLOT_ALREADY_BOOKED,
    AvailabilityResult,
    check_availability,
)
from .errors import (
    BookingError,
    DomainException,
    InvalidSelectionError,
    MissingSelectionError,
    PersistenceFailure,
    SlotConflictError,
)
from .events import BookingCreated, DomainEvent
from .pricing import DEFAULT_PRICING, PricingPolicy, calculate_price
from .schedule import BookingSchedule
from .value_objects import Booking, EventType, Slot, from_date_key, to_date_key

__all__ = [
    # Объекты-значения
    "Booking",
    "EventType",
    "Slot",
    "from_date_key",
    "to_date_key",
    # Состояние
    "BookingSchedule",
    # Правила
    "AvailabilityResult",
    "check_availability",
    "FULL_DAY_BOOKED",
    "PARTIAL_BOOKINGS_BLOCK_FULL_DAY",
    "SLOT_ALREADY_BOOKED",
    "PricingPolicy",
    "DEFAULT_PRICING",
    "calculate_price",
    # События
    "DomainEvent",
    "BookingCreated",
    # Исключения
    "DomainException",
    "BookingError",
    "MissingSelectionError",
    "InvalidSelectionError",
    "SlotConflictError",
    "PersistenceFailure",
]
