"""
Прикладной слой контекста оплаты.
"""

from typing import Any

from court_booking.shared_kernel import ILogger

from .domain import PaymentReceipt, create_payment_processor
from .interfaces import IPaymentDetailsProvider


class PaymentService:
    """Сервис приложения для проведения оплаты."""

    def __init__(self, details_provider: IPaymentDetailsProvider, logger: ILogger):
        self._details_provider = details_provider
        self._logger = logger

    def process_payment(self, payment_method: Any, amount: int) -> PaymentReceipt:
        """Выбирает процессор, собирает платежные данные и списывает сумму."""
        processor = create_payment_processor(payment_method)
        processor.collect_details(self._details_provider)

        self._logger.info(
            f"Проведение оплаты ({processor.method.value}) на сумму {amount}"
        )
        receipt = processor.charge(amount)
        self._logger.info(receipt.message, reference=receipt.reference)
        return receipt
