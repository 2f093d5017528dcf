"""
Доменная модель ценообразования.

Подсчет итоговой суммы бронирования и политики скидок.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Iterable

from court_booking.catalog import court_price, rental_item_price
from court_booking.shared_kernel import InvalidAmount, InvalidDiscount


def _check_amount(total: Any) -> int:
    if isinstance(total, bool) or not isinstance(total, int) or total < 0:
        raise InvalidAmount(f"Сумма должна быть неотрицательным целым, получено {total!r}")
    return total


def _check_percent(percent: Any) -> int:
    if isinstance(percent, bool) or not isinstance(percent, int):
        raise InvalidDiscount(f"Процент скидки должен быть целым числом: {percent!r}")
    if not 0 <= percent <= 100:
        raise InvalidDiscount(f"Процент скидки вне диапазона 0-100: {percent}")
    return percent


class DiscountPolicy(ABC):
    """Политика скидки: чистая функция от суммы до скидки к сумме после."""

    @abstractmethod
    def apply(self, total: int) -> int:
        raise NotImplementedError


@dataclass(frozen=True)
class NoDiscount(DiscountPolicy):
    """Без скидки."""

    def apply(self, total: int) -> int:
        return _check_amount(total)


@dataclass(frozen=True)
class PercentageDiscount(DiscountPolicy):
    """Скидка в процентах, дробная часть скидки отбрасывается."""

    percent: int

    def __post_init__(self):
        _check_percent(self.percent)

    def apply(self, total: int) -> int:
        total = _check_amount(total)
        percent = _check_percent(self.percent)
        return max(total - total * percent // 100, 0)


def compute_total(court_kind: Any, items: Iterable[Any]) -> int:
    """Цена корта плюс цены инвентаря, суммируются в порядке передачи."""
    total = court_price(court_kind)
    for item in items:
        total += rental_item_price(item)
    return total


def apply_discount(total: int, policy: DiscountPolicy) -> int:
    """Применяет политику скидки к сумме."""
    return policy.apply(total)


def discount_policy_for(percent: int) -> DiscountPolicy:
    """Строит политику по проценту из настроек: 0 означает отсутствие скидки."""
    if _check_percent(percent) == 0:
        return NoDiscount()
    return PercentageDiscount(percent)
