"""
Тесты для проверки доступности слотов.

Проверяют порядок правил: бронирование на весь день перекрывает
остальные причины отказа.
"""

from datetime import date

import pytest

from venue_booking.domain.availability import (
    FULL_DAY_BOOKED,
    PARTIAL_BOOKINGS_BLOCK_FULL_DAY,
    SLOT_ALREADY_BOOKED,
    AvailabilityResult,
    check_availability,
)
from venue_booking.domain.schedule import BookingSchedule
from venue_booking.domain.value_objects import Slot

DAY = "2025-10-10"


def schedule_with(slots: dict, venue: str = "Hall 1") -> BookingSchedule:
    return BookingSchedule(bookings={DAY: {venue: slots}})


class TestCheckAvailability:
    @pytest.mark.parametrize("slot", list(Slot))
    def test_empty_schedule_is_available(self, slot: Slot):
        result = check_availability(BookingSchedule.empty(), DAY, "Hall 1", slot)
        assert result == AvailabilityResult(available=True)

    def test_other_venue_does_not_block(self):
        schedule = schedule_with({"Full Day": "Conference"}, venue="Hall 2")
        assert check_availability(schedule, DAY, "Hall 1", Slot.MORNING).available

    def test_empty_venue_entry_counts_as_free(self):
        schedule = schedule_with({})
        assert check_availability(schedule, DAY, "Hall 1", Slot.FULL_DAY).available

    @pytest.mark.parametrize("slot", list(Slot))
    def test_full_day_blocks_every_slot(self, slot: Slot):
        schedule = schedule_with({"Full Day": "Conference"})
        result = check_availability(schedule, DAY, "Hall 1", slot)

        assert not result.available
        assert result.reason == FULL_DAY_BOOKED
        assert result.conflicting_event == "Conference"

    def test_partial_booking_blocks_full_day(self):
        schedule = schedule_with({"Morning": "Wedding"})
        result = check_availability(schedule, DAY, "Hall 1", Slot.FULL_DAY)

        assert not result.available
        assert result.reason == PARTIAL_BOOKINGS_BLOCK_FULL_DAY
        assert result.conflicting_event == "Wedding"

    def test_full_day_conflict_reports_first_slot_in_order(self):
        schedule = schedule_with({"Evening": "Party", "Afternoon": "Meeting"})
        result = check_availability(schedule, DAY, "Hall 1", Slot.FULL_DAY)
        assert result.conflicting_event == "Meeting"

    def test_booked_slot_is_unavailable(self):
        schedule = schedule_with({"Evening": "Party"})
        result = check_availability(schedule, DAY, "Hall 1", Slot.EVENING)

        assert result == AvailabilityResult(False, SLOT_ALREADY_BOOKED, "Party")

    def test_free_slot_next_to_booked_one(self):
        schedule = schedule_with({"Morning": "Wedding"})
        assert check_availability(schedule, DAY, "Hall 1", Slot.AFTERNOON).available

    def test_accepts_date_objects_and_slot_names(self):
        schedule = schedule_with({"Morning": "Wedding"})
        result = check_availability(schedule, date(2025, 10, 10), "Hall 1", "Morning")
        assert result.reason == SLOT_ALREADY_BOOKED

    def test_does_not_mutate_schedule(self):
        schedule = schedule_with({"Morning": "Wedding"})
        before = schedule.model_dump()

        for slot in Slot:
            check_availability(schedule, DAY, "Hall 1", slot)
            check_availability(schedule, "2030-01-01", "Hall 2", slot)

        assert schedule.model_dump() == before
