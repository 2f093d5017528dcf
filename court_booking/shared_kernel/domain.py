"""
Основные доменные типы и утилиты общего ядра.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field

# Общие типы идентификаторов
EntityId = UUID


def generate_id() -> UUID:
    """Генерирует новый UUID."""
    return uuid4()


# Общие исключения
class DomainException(Exception):
    """Базовое исключение для доменных ошибок."""

    pass


class InvalidArgument(DomainException, ValueError):
    """Недопустимое значение на входе (неизвестный тип корта, инвентаря, оплаты)."""

    pass


class UnknownKind(InvalidArgument):
    """Значение не входит в перечисление типов кортов или инвентаря."""

    pass


class UnknownPaymentMethod(InvalidArgument):
    """Неизвестный способ оплаты."""

    pass


class PaymentDetailsMissing(InvalidArgument):
    """Платежные данные не были собраны до списания."""

    pass


class InventoryExhausted(DomainException):
    """Свободных кортов выбранного типа не осталось."""

    def __init__(self, court_kind: "CourtKind", message: Optional[str] = None):
        super().__init__(
            message or f"Нет свободных кортов типа {court_kind.value}"
        )
        self.court_kind = court_kind


class InvalidDiscount(DomainException):
    """Процент скидки вне диапазона [0, 100]."""

    pass


class InvalidAmount(DomainException):
    """Недопустимая сумма (отрицательная или нецелая)."""

    pass


class PostPaymentReservationFailure(DomainException):
    """
    Оплата прошла, но корт зарезервировать не удалось.

    Отличается от обычных отказов: оператору нужно запустить
    возврат средств по чеку ``receipt``.
    """

    def __init__(self, court_kind: "CourtKind", amount: int, receipt: Any):
        super().__init__(
            f"Оплата {amount} проведена, но корт {court_kind.value} "
            f"не удалось зарезервировать"
        )
        self.court_kind = court_kind
        self.amount = amount
        self.receipt = receipt


class InvalidStateTransition(DomainException):
    """Недопустимый переход процесса бронирования."""

    pass


# Общие перечисления
class CourtKind(str, Enum):
    """Типы кортов."""

    GRASS = "Grass"
    CLAY = "Clay"
    HARD = "Hard"

    @classmethod
    def parse(cls, value: Any) -> "CourtKind":
        """Преобразует строковый тег в тип корта."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except (ValueError, TypeError):
            raise UnknownKind(f"Неизвестный тип корта: {value!r}") from None


class RentalItemKind(str, Enum):
    """Типы арендуемого инвентаря."""

    BALLPACK = "Ballpack"
    RACKET = "Racket"
    GRIPS = "Grips"

    @classmethod
    def parse(cls, value: Any) -> "RentalItemKind":
        """Преобразует строковый тег в тип инвентаря."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except (ValueError, TypeError):
            raise UnknownKind(f"Неизвестный тип инвентаря: {value!r}") from None


class PaymentMethodKind(str, Enum):
    """Способы оплаты."""

    CARD = "Card"
    UPI = "UPI"

    @classmethod
    def parse(cls, value: Any) -> "PaymentMethodKind":
        """Преобразует строковый тег в способ оплаты."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except (ValueError, TypeError):
            raise UnknownPaymentMethod(
                f"Неизвестный способ оплаты: {value!r}"
            ) from None


class DomainEvent(BaseModel):
    """Базовый класс для всех доменных событий."""

    model_config = ConfigDict(frozen=True)

    event_id: UUID = Field(default_factory=uuid4)
    occurred_on: datetime = Field(default_factory=lambda: now())

    @property
    def event_type(self) -> str:
        return type(self).__name__


# Общие утилиты
def now() -> datetime:
    """Возвращает текущую дату и время."""
    return datetime.now(timezone.utc)
