"""
Ценообразование (Pricing Context).

Подсчет стоимости бронирования и применение скидок.
"""

from .domain import (
    DiscountPolicy,
    NoDiscount,
    PercentageDiscount,
    apply_discount,
    compute_total,
    discount_policy_for,
)

__all__ = [
    "DiscountPolicy",
    "NoDiscount",
    "PercentageDiscount",
    "apply_discount",
    "compute_total",
    "discount_policy_for",
]
