import threading
from typing import Callable

from venue_booking.application.interfaces import ITimer, ITimerFactory


class ThreadingTimerFactory(ITimerFactory):
    """Таймеры на threading.Timer; поток-демон не мешает завершению процесса."""

    def __call__(self, delay: float, callback: Callable[[], None]) -> ITimer:
        timer = threading.Timer(delay, callback)
        timer.daemon = True
        return timer
