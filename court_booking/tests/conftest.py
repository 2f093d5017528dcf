"""
Общие фикстуры для тестов системы бронирования.
"""

from unittest.mock import MagicMock

import pytest

from court_booking.booking.application import BookingManager
from court_booking.booking.infrastructure import (
    InMemoryBookingProcessRepository,
    InMemoryEventBus,
)
from court_booking.inventory import CourtInventory
from court_booking.payment.application import PaymentService
from court_booking.payment.infrastructure import StaticPaymentDetailsProvider
from court_booking.shared_kernel import ConsoleLogger, PaymentMethodKind

CARD_DETAILS = {
    "card_number": "4111111111111234",
    "expiry_date": "12/30",
    "card_holder_name": "Иван Иванов",
    "cvv": "123",
}
UPI_DETAILS = {"upi_id": "ivan@upi"}


@pytest.fixture
def logger() -> MagicMock:
    """Фикстура для мокированного логгера."""
    return MagicMock(spec=ConsoleLogger)


@pytest.fixture
def details_provider() -> StaticPaymentDetailsProvider:
    return StaticPaymentDetailsProvider(
        {
            PaymentMethodKind.CARD: CARD_DETAILS,
            PaymentMethodKind.UPI: UPI_DETAILS,
        }
    )


@pytest.fixture
def inventory() -> CourtInventory:
    return CourtInventory()


@pytest.fixture
def payment_service(details_provider, logger) -> PaymentService:
    return PaymentService(details_provider, logger)


@pytest.fixture
def event_bus(logger) -> InMemoryEventBus:
    return InMemoryEventBus(logger)


@pytest.fixture
def repository() -> InMemoryBookingProcessRepository:
    return InMemoryBookingProcessRepository()


@pytest.fixture
def booking_manager(
    inventory, payment_service, logger, event_bus, repository
) -> BookingManager:
    """Оркестратор с реальными зависимостями в памяти и скидкой по умолчанию."""
    return BookingManager(
        inventory=inventory,
        payment_service=payment_service,
        logger=logger,
        event_bus=event_bus,
        repository=repository,
    )
