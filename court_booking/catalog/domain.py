"""
Каталог цен: фиксированная стоимость кортов и арендуемого инвентаря.
"""

from types import MappingProxyType
from typing import Any, Mapping

from court_booking.shared_kernel import CourtKind, RentalItemKind, UnknownKind

COURT_PRICES: Mapping[CourtKind, int] = MappingProxyType(
    {
        CourtKind.GRASS: 100,
        CourtKind.CLAY: 200,
        CourtKind.HARD: 300,
    }
)

RENTAL_ITEM_PRICES: Mapping[RentalItemKind, int] = MappingProxyType(
    {
        RentalItemKind.BALLPACK: 20,
        RentalItemKind.RACKET: 30,
        RentalItemKind.GRIPS: 40,
    }
)

_COURT_TAGS = frozenset(kind.value for kind in CourtKind)
_RENTAL_ITEM_TAGS = frozenset(kind.value for kind in RentalItemKind)


def court_price(kind: Any) -> int:
    """Цена корта по его типу."""
    return COURT_PRICES[CourtKind.parse(kind)]


def rental_item_price(kind: Any) -> int:
    """Цена единицы инвентаря по его типу."""
    return RENTAL_ITEM_PRICES[RentalItemKind.parse(kind)]


def price_of(kind: Any) -> int:
    """
    Возвращает цену корта или инвентаря.

    Принимает член перечисления либо его строковый тег.
    Для любого другого значения выбрасывает UnknownKind.
    """
    if isinstance(kind, CourtKind):
        return COURT_PRICES[kind]
    if isinstance(kind, RentalItemKind):
        return RENTAL_ITEM_PRICES[kind]
    if isinstance(kind, str):
        if kind in _COURT_TAGS:
            return court_price(kind)
        if kind in _RENTAL_ITEM_TAGS:
            return rental_item_price(kind)
    raise UnknownKind(f"Неизвестный тип для каталога: {kind!r}")
