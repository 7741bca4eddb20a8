"""
Тесты для моделей представления: статус дня, сетка месяца, слоты формы.
"""

from datetime import date

import pytest

from venue_booking.application.views import (
    DayStatus,
    day_status,
    month_view,
    slot_options,
)
from venue_booking.domain.schedule import BookingSchedule
from venue_booking.domain.value_objects import Slot


@pytest.fixture
def schedule() -> BookingSchedule:
    return BookingSchedule(
        bookings={
            "2025-10-10": {
                "Hall 1": {"Morning": "Wedding"},
                "Hall 2": {"Full Day": "Conference"},
            }
        }
    )


class TestDayStatus:
    def test_statuses(self, schedule: BookingSchedule):
        assert day_status(schedule, "2025-10-10", "Hall 1") is DayStatus.PARTIAL
        assert day_status(schedule, "2025-10-10", "Hall 2") is DayStatus.FULL
        assert day_status(schedule, "2025-10-11", "Hall 1") is DayStatus.FREE


class TestMonthView:
    def test_october_2025_grid(self, schedule: BookingSchedule):
        # 1 октября 2025 - среда
        view = month_view(2025, 10, schedule, "Hall 1")

        assert view.leading_blanks == 3
        assert len(view.days) == 31
        assert view.trailing_blanks == 1
        assert view.weeks == 5
        assert view.days[0].day == date(2025, 10, 1)
        assert view.days[9].status is DayStatus.PARTIAL
        assert view.days[10].status is DayStatus.FREE

    def test_month_starting_on_sunday_has_no_leading_blanks(self):
        # 1 июня 2025 - воскресенье
        view = month_view(2025, 6, BookingSchedule.empty(), "Hall 1")
        assert view.leading_blanks == 0
        assert view.trailing_blanks == 5

    def test_february_2026_fills_exact_weeks(self):
        # 1 февраля 2026 - воскресенье, 28 дней
        view = month_view(2026, 2, BookingSchedule.empty(), "Hall 1")
        assert view.leading_blanks == 0
        assert view.trailing_blanks == 0
        assert view.weeks == 4

    def test_navigation_wraps_year(self):
        january = month_view(2026, 1, BookingSchedule.empty(), "Hall 1")
        december = month_view(2025, 12, BookingSchedule.empty(), "Hall 1")

        assert january.previous_month() == (2025, 12)
        assert december.next_month() == (2026, 1)
        assert january.next_month() == (2026, 2)


class TestSlotOptions:
    def test_empty_day_everything_enabled(self):
        options = slot_options(BookingSchedule.empty(), "2025-10-10", "Hall 1")

        assert [o.slot for o in options] == Slot.ordered()
        assert not any(o.disabled for o in options)

    def test_partial_booking(self, schedule: BookingSchedule):
        options = {o.slot: o for o in slot_options(schedule, "2025-10-10", "Hall 1")}

        assert options[Slot.MORNING].disabled
        assert options[Slot.MORNING].booked_label == "Wedding"
        assert not options[Slot.AFTERNOON].disabled
        assert options[Slot.FULL_DAY].disabled
        assert options[Slot.FULL_DAY].slots_taken
        assert not options[Slot.FULL_DAY].is_booked

    def test_full_day_booked_disables_everything(self, schedule: BookingSchedule):
        options = slot_options(schedule, "2025-10-10", "Hall 2")

        assert all(o.disabled for o in options)
        assert not any(o.slots_taken for o in options)
        assert options[-1].booked_label == "Conference"

    def test_selected_full_day_disables_other_slots(self):
        options = slot_options(
            BookingSchedule.empty(), "2025-10-10", "Hall 1", selected_slot=Slot.FULL_DAY
        )
        disabled = {o.slot for o in options if o.disabled}
        assert disabled == set(Slot.partial())
