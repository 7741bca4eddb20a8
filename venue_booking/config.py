"""Настройки приложения."""

import json
from functools import lru_cache
from pathlib import Path
from typing import Annotated, List, Union

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class VenueBookingSettings(BaseSettings):
    """Настройки календаря бронирования."""

    model_config = SettingsConfigDict(
        env_prefix="VENUE_BOOKING_",
        env_file=".env",
        env_ignore_empty=True,
        extra="ignore",
    )

    VENUES: Annotated[List[str], NoDecode] = ["Hall 1", "Hall 2"]

    # Локальное хранилище
    STORAGE_PATH: Path = Path.home() / ".venue_booking" / "storage.json"
    STORAGE_KEY: str = "venueBookings"

    NOTIFICATION_DELAY_SECONDS: float = 3.0
    DEFAULT_BASE_PRICE: float = 1000.0

    LOG_LEVEL: str = "INFO"

    @field_validator("VENUES", mode="before")
    @classmethod
    def split_venues(cls, v: Union[str, List[str]]) -> List[str]:
        """Разрешает задавать площадки строкой через запятую."""
        if isinstance(v, str):
            if v.startswith("["):
                return json.loads(v)
            return [i.strip() for i in v.split(",") if i.strip()]
        return v

    @field_validator("VENUES")
    @classmethod
    def venues_not_empty(cls, v: List[str]) -> List[str]:
        if not v:
            raise ValueError("Нужна хотя бы одна площадка")
        if len(set(v)) != len(v):
            raise ValueError("Названия площадок должны быть уникальными")
        return v


@lru_cache
def get_settings() -> VenueBookingSettings:
    return VenueBookingSettings()
