"""
Локальные хранилища строк по ключу.
"""

import json
import os
from pathlib import Path
from typing import Dict, Optional, Union

from venue_booking.application.interfaces import IKeyValueStorage, ILogger


class InMemoryStorage(IKeyValueStorage):
    """Хранилище в памяти, в основном для тестов."""

    def __init__(self, items: Optional[Dict[str, str]] = None):
        self._items: Dict[str, str] = dict(items or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value


class JsonFileStorage(IKeyValueStorage):
    """Хранилище в JSON-файле: объект вида {ключ: строка}."""

    def __init__(
        self, file_path: Union[str, Path], logger: Optional[ILogger] = None
    ):
        """
        Args:
            file_path: Путь к JSON-файлу с данными
            logger: Логгер для предупреждений о перезаписи поврежденного файла
        """
        self._file_path = Path(file_path).expanduser()
        self._logger = logger

    @property
    def file_path(self) -> Path:
        return self._file_path

    def get_item(self, key: str) -> Optional[str]:
        return self._load_data().get(key)

    def set_item(self, key: str, value: str) -> None:
        """Записывает значение; поврежденный файл перезаписывается с нуля."""
        try:
            data = self._load_data()
        except (ValueError, RecursionError) as e:
            if self._logger is not None:
                self._logger.warning(
                    "Storage file is corrupt, overwriting",
                    path=str(self._file_path),
                    error=str(e),
                )
            data = {}
        data[key] = value
        self._save_data(data)

    def _load_data(self) -> Dict[str, str]:
        """Загружает данные из JSON-файла."""
        if not self._file_path.exists():
            return {}

        with open(self._file_path, "r", encoding="utf-8") as f:
            raw_data = f.read()

        if not raw_data.strip():
            return {}

        data = json.loads(raw_data)
        if not isinstance(data, dict):
            raise ValueError(f"Ожидался JSON-объект в {self._file_path}")
        return data

    def _save_data(self, data: Dict[str, str]) -> None:
        """Сохраняет данные в JSON-файл."""
        # Создаем директорию, если она не существует
        self._file_path.parent.mkdir(parents=True, exist_ok=True)

        # Пишем во временный файл и подменяем, чтобы не оставить файл наполовину
        tmp_path = self._file_path.with_name(self._file_path.name + ".tmp")
        try:
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
            os.replace(tmp_path, self._file_path)
        finally:
            if tmp_path.exists():
                tmp_path.unlink()
