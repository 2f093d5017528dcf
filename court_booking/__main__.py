"""
Демонстрация бронирования кортов.

Запуск: ``python -m court_booking [--interactive]``.
"""

import argparse
import sys

from court_booking.bootstrap import bootstrap_app
from court_booking.payment.infrastructure import (
    ConsolePaymentDetailsProvider,
    StaticPaymentDetailsProvider,
)
from court_booking.shared_kernel import DomainException, PaymentMethodKind

DEMO_PAYMENT_DETAILS = {
    PaymentMethodKind.CARD: {
        "card_number": "4111111111111111",
        "expiry_date": "12/30",
        "card_holder_name": "Ivan Ivanov",
        "cvv": "123",
    },
    PaymentMethodKind.UPI: {"upi_id": "ivan@upi"},
}


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="court_booking")
    parser.add_argument(
        "--interactive",
        action="store_true",
        help="запрашивать платежные данные в консоли",
    )
    args = parser.parse_args(argv)

    if args.interactive:
        provider = ConsolePaymentDetailsProvider()
    else:
        provider = StaticPaymentDetailsProvider(DEMO_PAYMENT_DETAILS)

    app = bootstrap_app(provider)
    manager = app["booking_manager"]

    try:
        # Травяной корт с двумя ракетками
        manager.book_court("Grass", ["Racket", "Racket"], "UPI")
        # Грунтовый корт с мячами и намоткой
        manager.book_court("Clay", ["Ballpack", "Grips"], "Card")
    except DomainException as e:
        print(f"Ошибка: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
