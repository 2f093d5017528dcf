"""
Интерфейсы (порты) для контекста оплаты.
"""

from typing import Mapping, Protocol

from court_booking.shared_kernel import PaymentMethodKind


class IPaymentDetailsProvider(Protocol):
    """Источник платежных данных (консоль, форма, тестовые данные)."""

    def provide(self, method: PaymentMethodKind) -> Mapping[str, str]: ...
