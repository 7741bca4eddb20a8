"""Общие фикстуры для тестов календаря бронирования."""

from typing import Callable, List
from unittest.mock import MagicMock

import pytest

from venue_booking.application.commands import BookingCommandHandler
from venue_booking.application.interfaces import ILogger
from venue_booking.application.notifications import NotificationCenter
from venue_booking.application.store import BookingStore
from venue_booking.domain.schedule import BookingSchedule
from venue_booking.infrastructure.repositories import StorageBookingScheduleRepository
from venue_booking.infrastructure.storage import InMemoryStorage

VENUES = ["Hall 1", "Hall 2"]


class ManualTimer:
    """Таймер, который срабатывает только по команде теста."""

    def __init__(self, delay: float, callback: Callable[[], None]):
        self.delay = delay
        self.callback = callback
        self.started = False
        self.cancelled = False

    def start(self) -> None:
        self.started = True

    def cancel(self) -> None:
        self.cancelled = True

    def fire(self) -> None:
        # Как и threading.Timer, отмененный таймер не вызывает callback
        if self.started and not self.cancelled:
            self.callback()

    def fire_anyway(self) -> None:
        """Имитирует таймер, который сработал до отмены."""
        self.callback()


class ManualTimerFactory:
    def __init__(self) -> None:
        self.timers: List[ManualTimer] = []

    def __call__(self, delay: float, callback: Callable[[], None]) -> ManualTimer:
        timer = ManualTimer(delay, callback)
        self.timers.append(timer)
        return timer


@pytest.fixture
def logger() -> MagicMock:
    return MagicMock(spec=ILogger)


@pytest.fixture
def timer_factory() -> ManualTimerFactory:
    return ManualTimerFactory()


@pytest.fixture
def notifications(timer_factory: ManualTimerFactory) -> NotificationCenter:
    return NotificationCenter(timer_factory, delay=3.0)


@pytest.fixture
def storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture
def repository(
    storage: InMemoryStorage, logger: MagicMock
) -> StorageBookingScheduleRepository:
    """Репозиторий с пустым расписанием по умолчанию."""
    return StorageBookingScheduleRepository(
        storage, logger, default_factory=BookingSchedule.empty
    )


@pytest.fixture
def store(
    repository: StorageBookingScheduleRepository, logger: MagicMock
) -> BookingStore:
    return BookingStore(repository, logger)


@pytest.fixture
def handler(store: BookingStore, logger: MagicMock) -> BookingCommandHandler:
    return BookingCommandHandler(store, logger, venues=VENUES)
