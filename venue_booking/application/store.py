from venue_booking.domain.schedule import BookingSchedule

from .interfaces import ILogger
from .repositories import BookingScheduleRepository, PersistenceResult


class BookingStore:
    """
    Единственный источник истины о бронированиях в рамках сессии.

    Загружает расписание один раз при создании и сохраняет его после
    каждого изменения. Ошибки сохранения только логируются: состояние в
    памяти остается актуальным, а пользователь не получает отказа.
    """

    def __init__(self, repository: BookingScheduleRepository, logger: ILogger):
        self._repository = repository
        self._logger = logger
        self._schedule = repository.load()
        self._logger.info(
            "BookingStore loaded", bookings=self._schedule.booking_count
        )

    @property
    def schedule(self) -> BookingSchedule:
        return self._schedule

    def commit(self, schedule: BookingSchedule) -> PersistenceResult:
        """Заменяет текущее расписание и сохраняет его."""
        self._schedule = schedule
        result = self._repository.save(schedule)
        if not result.ok:
            self._logger.error(
                "Failed to persist bookings, keeping in-memory state",
                error=result.error,
            )
        return result

    def reload(self) -> BookingSchedule:
        """Перечитывает расписание из хранилища."""
        self._schedule = self._repository.load()
        return self._schedule
