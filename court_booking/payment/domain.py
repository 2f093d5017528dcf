"""
Доменная модель контекста оплаты.

Содержит платежные данные, процессоры оплаты картой и через UPI
и фабрику выбора процессора по тегу способа оплаты.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, ClassVar, Dict, Optional, Type

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from court_booking.shared_kernel import (
    InvalidAmount,
    InvalidArgument,
    PaymentDetailsMissing,
    PaymentMethodKind,
    now,
)

from .interfaces import IPaymentDetailsProvider


class PaymentDetails(BaseModel):
    """Базовый класс платежных данных. Проверяется только наличие значений."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)


class CardDetails(PaymentDetails):
    """Данные банковской карты."""

    card_number: str = Field(..., min_length=1)
    expiry_date: str = Field(..., min_length=1)  # MM/YY, формат не проверяется
    card_holder_name: str = Field(..., min_length=1)
    cvv: str = Field(..., min_length=1)


class UPIDetails(PaymentDetails):
    """Данные для оплаты через UPI."""

    upi_id: str = Field(..., min_length=1)


class PaymentReceipt(BaseModel):
    """Результат успешного списания."""

    model_config = ConfigDict(frozen=True)

    method: PaymentMethodKind
    amount: int = Field(..., ge=0)
    reference: str
    message: str
    processed_at: datetime = Field(default_factory=now)


class PaymentProcessor(ABC):
    """Процессор оплаты: сбор платежных данных и списание суммы."""

    method: ClassVar[PaymentMethodKind]
    details_model: ClassVar[Type[PaymentDetails]]

    def __init__(self) -> None:
        self._details: Optional[PaymentDetails] = None

    @property
    def details(self) -> Optional[PaymentDetails]:
        return self._details

    def collect_details(self, provider: IPaymentDetailsProvider) -> None:
        """Запрашивает платежные данные у внешнего поставщика."""
        raw = provider.provide(self.method)
        try:
            self._details = self.details_model.model_validate(dict(raw or {}))
        except ValidationError as e:
            fields = ", ".join(str(err["loc"][0]) for err in e.errors() if err["loc"])
            raise InvalidArgument(
                f"Не заполнены платежные данные ({self.method.value}): {fields}"
            ) from e

    def charge(self, amount: int) -> PaymentReceipt:
        """Списывает сумму. Требует предварительного вызова collect_details."""
        if isinstance(amount, bool) or not isinstance(amount, int) or amount < 0:
            raise InvalidAmount(f"Недопустимая сумма списания: {amount!r}")
        if self._details is None:
            raise PaymentDetailsMissing(
                f"Платежные данные ({self.method.value}) не были собраны"
            )
        return self._charge(amount, self._details)

    @abstractmethod
    def _charge(self, amount: int, details: Any) -> PaymentReceipt:
        raise NotImplementedError


class CardPayment(PaymentProcessor):
    """Оплата банковской картой."""

    method = PaymentMethodKind.CARD
    details_model = CardDetails

    def _charge(self, amount: int, details: CardDetails) -> PaymentReceipt:
        last_digits = details.card_number[-4:]
        return PaymentReceipt(
            method=self.method,
            amount=amount,
            reference=f"****{last_digits}",
            message=(
                f"Платеж на сумму {amount} успешно проведен "
                f"по карте, оканчивающейся на {last_digits}"
            ),
        )


class UPIPayment(PaymentProcessor):
    """Оплата через UPI."""

    method = PaymentMethodKind.UPI
    details_model = UPIDetails

    def _charge(self, amount: int, details: UPIDetails) -> PaymentReceipt:
        return PaymentReceipt(
            method=self.method,
            amount=amount,
            reference=details.upi_id,
            message=(
                f"Платеж на сумму {amount} успешно проведен "
                f"для UPI ID {details.upi_id}"
            ),
        )


PAYMENT_PROCESSORS: Dict[PaymentMethodKind, Type[PaymentProcessor]] = {
    PaymentMethodKind.CARD: CardPayment,
    PaymentMethodKind.UPI: UPIPayment,
}


def create_payment_processor(method: Any) -> PaymentProcessor:
    """Создает процессор по тегу способа оплаты."""
    return PAYMENT_PROCESSORS[PaymentMethodKind.parse(method)]()
