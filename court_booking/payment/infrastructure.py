"""
Инфраструктурный слой контекста оплаты.

Поставщики платежных данных: статический (для тестов и демонстрации)
и консольный, запрашивающий данные у пользователя.
"""

from typing import Callable, Dict, List, Mapping, Optional, Tuple

from court_booking.shared_kernel import PaymentMethodKind


class StaticPaymentDetailsProvider:
    """Возвращает заранее заданные платежные данные для каждого способа оплаты."""

    def __init__(self, details: Optional[Mapping[PaymentMethodKind, Mapping[str, str]]] = None):
        self._details: Dict[PaymentMethodKind, Dict[str, str]] = {
            PaymentMethodKind.parse(method): dict(values)
            for method, values in (details or {}).items()
        }
        self.requests: List[PaymentMethodKind] = []

    def provide(self, method: PaymentMethodKind) -> Mapping[str, str]:
        self.requests.append(method)
        return dict(self._details.get(method, {}))


CONSOLE_PROMPTS: Dict[PaymentMethodKind, List[Tuple[str, str]]] = {
    PaymentMethodKind.CARD: [
        ("card_number", "Введите номер карты: "),
        ("expiry_date", "Введите срок действия (MM/YY): "),
        ("card_holder_name", "Введите имя держателя карты: "),
        ("cvv", "Введите CVV: "),
    ],
    PaymentMethodKind.UPI: [
        ("upi_id", "Введите UPI ID: "),
    ],
}


class ConsolePaymentDetailsProvider:
    """Запрашивает платежные данные в консоли."""

    def __init__(self, input_func: Callable[[str], str] = input):
        self._input = input_func

    def provide(self, method: PaymentMethodKind) -> Mapping[str, str]:
        return {
            field: self._input(prompt).strip()
            for field, prompt in CONSOLE_PROMPTS[method]
        }
