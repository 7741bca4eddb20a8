from typing import Optional

from venue_booking.application.commands import BookingCommandHandler
from venue_booking.application.interfaces import IKeyValueStorage, ITimerFactory
from venue_booking.application.notifications import NotificationCenter
from venue_booking.application.session import BookingSession
from venue_booking.application.store import BookingStore
from venue_booking.config import VenueBookingSettings, get_settings
from venue_booking.domain.pricing import PricingPolicy
from venue_booking.infrastructure.logger import StdLogger, configure_logging
from venue_booking.infrastructure.repositories import StorageBookingScheduleRepository
from venue_booking.infrastructure.storage import JsonFileStorage
from venue_booking.infrastructure.timers import ThreadingTimerFactory


def bootstrap_app(
    settings: Optional[VenueBookingSettings] = None,
    storage: Optional[IKeyValueStorage] = None,
    timer_factory: Optional[ITimerFactory] = None,
) -> BookingSession:
    """Создает и настраивает все компоненты приложения."""
    settings = settings or get_settings()
    configure_logging(settings.LOG_LEVEL)
    logger = StdLogger()

    # 1. Хранилище и единственный экземпляр BookingStore
    if storage is None:
        storage = JsonFileStorage(settings.STORAGE_PATH, logger)
    repository = StorageBookingScheduleRepository(
        storage, logger, key=settings.STORAGE_KEY
    )
    store = BookingStore(repository, logger)

    # 2. Обработчик команд и уведомления
    handler = BookingCommandHandler(store, logger, venues=settings.VENUES)
    notifications = NotificationCenter(
        timer_factory or ThreadingTimerFactory(),
        delay=settings.NOTIFICATION_DELAY_SECONDS,
    )

    # 3. Сессия для слоя отображения
    return BookingSession(
        store,
        handler,
        notifications,
        venues=settings.VENUES,
        pricing=PricingPolicy(default_base_price=settings.DEFAULT_BASE_PRICE),
    )
