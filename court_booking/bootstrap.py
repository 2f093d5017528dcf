from functools import partial
from typing import Any, Dict, Optional

from court_booking.booking.application import BookingManager
from court_booking.booking.domain import CompensationRequired
from court_booking.booking.event_handlers import on_compensation_required
from court_booking.booking.infrastructure import (
    InMemoryBookingProcessRepository,
    InMemoryEventBus,
)
from court_booking.config import BookingSettings, load_settings
from court_booking.inventory import CourtInventory
from court_booking.monitoring import logging_decorator, monitoring_decorator
from court_booking.payment.application import PaymentService
from court_booking.payment.interfaces import IPaymentDetailsProvider
from court_booking.pricing import discount_policy_for
from court_booking.shared_kernel import ConsoleLogger, ILogger


def bootstrap_app(
    details_provider: IPaymentDetailsProvider,
    settings: Optional[BookingSettings] = None,
    logger: Optional[ILogger] = None,
) -> Dict[str, Any]:
    """Создает и настраивает все компоненты приложения."""
    settings = settings or load_settings()
    logger = logger or ConsoleLogger(debug_enabled=settings.debug_logging)

    # 1. Единственный источник истины об остатках кортов
    inventory = CourtInventory(settings.initial_inventory)

    # 2. Шина событий и подписка обработчика компенсаций
    event_bus = InMemoryEventBus(logger)
    event_bus.subscribe(
        CompensationRequired, partial(on_compensation_required, logger=logger)
    )

    step_decorators = []
    if settings.monitoring_enabled:
        step_decorators = [
            partial(logging_decorator, logger),
            partial(monitoring_decorator, logger),
        ]

    # 3. Оркестратор
    repository = InMemoryBookingProcessRepository()
    booking_manager = BookingManager(
        inventory=inventory,
        payment_service=PaymentService(details_provider, logger),
        logger=logger,
        event_bus=event_bus,
        repository=repository,
        discount_policy=discount_policy_for(settings.discount_percent),
        step_decorators=step_decorators,
    )

    return {
        "settings": settings,
        "inventory": inventory,
        "event_bus": event_bus,
        "repository": repository,
        "booking_manager": booking_manager,
    }
