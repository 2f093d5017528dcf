"""
Каталог (Catalog Context).

Статический справочник цен на корты и арендуемый инвентарь.
"""

from .domain import (
    COURT_PRICES,
    RENTAL_ITEM_PRICES,
    court_price,
    price_of,
    rental_item_price,
)

__all__ = [
    "COURT_PRICES",
    "RENTAL_ITEM_PRICES",
    "court_price",
    "rental_item_price",
    "price_of",
]
