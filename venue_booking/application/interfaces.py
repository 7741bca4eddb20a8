"""
Интерфейсы (порты) прикладного слоя.
"""

from __future__ import annotations

from typing import Any, Callable, Optional, Protocol


class ILogger(Protocol):
    """Интерфейс для логгера."""

    def info(self, message: str, **kwargs: Any) -> None: ...
    def error(self, message: str, **kwargs: Any) -> None: ...
    def warning(self, message: str, **kwargs: Any) -> None: ...
    def debug(self, message: str, **kwargs: Any) -> None: ...


class IKeyValueStorage(Protocol):
    """Локальное хранилище строк по ключу."""

    def get_item(self, key: str) -> Optional[str]: ...
    def set_item(self, key: str, value: str) -> None: ...


class ITimer(Protocol):
    """Отложенная задача, которую можно отменить."""

    def start(self) -> None: ...
    def cancel(self) -> None: ...


class ITimerFactory(Protocol):
    """Создает таймеры для отложенных действий."""

    def __call__(self, delay: float, callback: Callable[[], None]) -> ITimer: ...
