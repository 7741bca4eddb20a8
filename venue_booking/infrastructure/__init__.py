"""
Инфраструктурный слой: хранилища, логирование и таймеры.
"""

from .logger import StdLogger, configure_logging
from .repositories import (
    DEFAULT_STORAGE_KEY,
    StorageBookingScheduleRepository,
    deserialize_schedule,
    seed_schedule,
    serialize_schedule,
)
from .storage import InMemoryStorage, JsonFileStorage
from .timers import ThreadingTimerFactory

__all__ = [
    "StdLogger",
    "configure_logging",
    "DEFAULT_STORAGE_KEY",
    "StorageBookingScheduleRepository",
    "deserialize_schedule",
    "seed_schedule",
    "serialize_schedule",
    "InMemoryStorage",
    "JsonFileStorage",
    "ThreadingTimerFactory",
]
