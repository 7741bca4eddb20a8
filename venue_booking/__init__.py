"""
Календарь бронирования площадок.

Пакет содержит движок правил бронирования (доступность слотов, расчет
стоимости, фиксация бронирований) и модели представления, из которых
слой отображения строит календарь.
"""

__version__ = "0.1.0"
