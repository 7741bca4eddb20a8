"""
Тесты для уведомлений с автоматическим скрытием.
"""

from venue_booking.application.notifications import (
    Notification,
    NotificationCenter,
    NotificationKind,
)


class TestNotificationCenter:
    def test_show_schedules_dismiss(self, notifications: NotificationCenter, timer_factory):
        notifications.success("Booked!")

        assert notifications.current == Notification("Booked!", NotificationKind.SUCCESS)
        assert len(timer_factory.timers) == 1
        assert timer_factory.timers[0].delay == 3.0
        assert timer_factory.timers[0].started

    def test_timer_clears_notification(self, notifications: NotificationCenter, timer_factory):
        notifications.error("Please select a time slot")
        timer_factory.timers[0].fire()

        assert notifications.current is None

    def test_new_notification_cancels_previous_timer(
        self, notifications: NotificationCenter, timer_factory
    ):
        notifications.error("first")
        notifications.success("second")

        first, second = timer_factory.timers
        assert first.cancelled
        assert not second.cancelled

        first.fire()
        assert notifications.current.message == "second"

    def test_stale_timer_does_not_clear_newer_notification(
        self, notifications: NotificationCenter, timer_factory
    ):
        notifications.error("first")
        notifications.success("second")

        timer_factory.timers[0].fire_anyway()

        assert notifications.current == Notification("second", NotificationKind.SUCCESS)
        timer_factory.timers[1].fire()
        assert notifications.current is None

    def test_dismiss_clears_and_cancels(self, notifications: NotificationCenter, timer_factory):
        notifications.success("Booked!")
        notifications.dismiss()

        assert notifications.current is None
        assert timer_factory.timers[0].cancelled

    def test_kind_accepts_plain_string(self, notifications: NotificationCenter):
        notification = notifications.show("oops", "error")
        assert notification.kind is NotificationKind.ERROR
