"""
Оценка стоимости бронирования.

Цена = базовая цена типа мероприятия * коэффициент слота.
Это только оценка для отображения, платежи не выполняются.
"""

from typing import Dict, Optional, Union

from pydantic import BaseModel, Field

from .value_objects import EventType, Slot

DEFAULT_BASE_PRICE = 1000.0

BASE_PRICES: Dict[str, float] = {
    EventType.WEDDING.value: 5000.0,
    EventType.CEREMONY.value: 3000.0,
    EventType.BIRTHDAY.value: 1500.0,
    EventType.ANNIVERSARY.value: 2000.0,
    EventType.MEETING.value: 800.0,
    EventType.CONFERENCE.value: 2500.0,
    EventType.PARTY.value: 1800.0,
    EventType.EXHIBITION.value: 3500.0,
}

SLOT_MULTIPLIERS: Dict[str, float] = {
    Slot.MORNING.value: 1.0,
    Slot.AFTERNOON.value: 1.0,
    Slot.EVENING.value: 1.2,
    Slot.FULL_DAY.value: 3.0,
}


class PricingPolicy(BaseModel):
    """Таблицы цен и коэффициентов."""

    base_prices: Dict[str, float] = Field(default_factory=lambda: dict(BASE_PRICES))
    slot_multipliers: Dict[str, float] = Field(
        default_factory=lambda: dict(SLOT_MULTIPLIERS)
    )
    default_base_price: float = Field(DEFAULT_BASE_PRICE, ge=0)

    def base_price(self, event_type: str) -> float:
        return self.base_prices.get(event_type, self.default_base_price)

    def slot_multiplier(self, slot: str) -> float:
        return self.slot_multipliers.get(slot, 1.0)


DEFAULT_PRICING = PricingPolicy()


def calculate_price(
    event_type: Optional[Union[EventType, str]],
    slot: Optional[Union[Slot, str]],
    policy: PricingPolicy = DEFAULT_PRICING,
) -> float:
    """Возвращает оценку цены или 0, пока не выбраны тип мероприятия и слот."""
    if not event_type or not slot:
        return 0.0
    event_key = event_type.value if isinstance(event_type, EventType) else event_type
    slot_key = slot.value if isinstance(slot, Slot) else slot
    return round(policy.base_price(event_key) * policy.slot_multiplier(slot_key), 2)
