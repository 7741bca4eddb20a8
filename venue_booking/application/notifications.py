"""
Всплывающие уведомления с автоматическим скрытием.

Каждый показ отменяет предыдущий таймер скрытия. Таймер, который все
же успел сработать, скрывает только то уведомление, для которого был
запланирован, и не трогает более новое.
"""

import threading
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .interfaces import ITimer, ITimerFactory

DEFAULT_DISMISS_DELAY = 3.0


class NotificationKind(str, Enum):
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class Notification:
    message: str
    kind: NotificationKind


class NotificationCenter:
    """Хранит текущее уведомление и скрывает его по таймеру."""

    def __init__(
        self, timer_factory: ITimerFactory, delay: float = DEFAULT_DISMISS_DELAY
    ):
        self._timer_factory = timer_factory
        self._delay = delay
        self._current: Optional[Notification] = None
        self._timer: Optional[ITimer] = None
        self._sequence = 0
        # Таймер срабатывает в отдельном потоке
        self._lock = threading.Lock()

    @property
    def current(self) -> Optional[Notification]:
        return self._current

    def show(self, message: str, kind: NotificationKind) -> Notification:
        notification = Notification(message, NotificationKind(kind))
        with self._lock:
            self._cancel_timer()
            self._sequence += 1
            sequence = self._sequence
            self._current = notification
            timer = self._timer_factory(self._delay, lambda: self._expire(sequence))
            self._timer = timer
        timer.start()
        return notification

    def success(self, message: str) -> Notification:
        return self.show(message, NotificationKind.SUCCESS)

    def error(self, message: str) -> Notification:
        return self.show(message, NotificationKind.ERROR)

    def dismiss(self) -> None:
        with self._lock:
            self._cancel_timer()
            self._current = None

    def _expire(self, sequence: int) -> None:
        with self._lock:
            if sequence != self._sequence:
                return
            self._current = None
            self._timer = None

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
