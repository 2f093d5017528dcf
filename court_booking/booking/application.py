"""
Прикладной слой контекста бронирования.

Содержит оркестратор бронирования корта, который последовательно
выполняет проверку запроса, проверку остатков, расчет стоимости,
оплату и резервирование корта.
"""

from enum import Enum
from typing import Any, Callable, Iterable, List, Optional, Sequence

from pydantic import BaseModel

from court_booking.inventory import ICourtInventory
from court_booking.payment.application import PaymentService
from court_booking.pricing import DiscountPolicy, PercentageDiscount
from court_booking.shared_kernel import (
    CourtKind,
    EntityId,
    ILogger,
    InventoryExhausted,
    PaymentMethodKind,
    PostPaymentReservationFailure,
    RentalItemKind,
)

from . import interfaces as ports
from .domain import (
    Booking,
    BookingCompleted,
    BookingFailed,
    BookingProcess,
    BookingState,
    BookingValidator,
    CompensationRequired,
)
from .infrastructure import InMemoryBookingProcessRepository, InMemoryEventBus

DEFAULT_DISCOUNT_PERCENT = 10

StepDecorator = Callable[[Callable[..., Any]], Callable[..., Any]]
StepDecoratorFactory = Callable[[str], StepDecorator]


# DTO для исходящих данных


class BookingResultDTO(BaseModel):
    """Результат успешного бронирования."""

    booking_id: EntityId
    court: CourtKind
    items: List[RentalItemKind]
    payment_method: PaymentMethodKind
    subtotal: int
    total_charged: int
    payment_reference: str
    state: BookingState


def _as_tag(value: Any) -> str:
    return value.value if isinstance(value, Enum) else str(value)


class BookingManager:
    """
    Оркестратор бронирования корта.

    Состояния процесса: STARTED -> VALIDATED -> PRICING_COMPUTED ->
    CHARGED -> RESERVED -> COMPLETED, либо FAILED на любом шаге.
    Оплата выполняется до резервирования, поэтому неудачный платеж
    не удерживает корт. Ошибки логируются и пробрасываются без изменений;
    исключение одно: сбой резервирования после оплаты превращается
    в PostPaymentReservationFailure.
    """

    def __init__(
        self,
        inventory: ICourtInventory,
        payment_service: PaymentService,
        logger: ILogger,
        event_bus: Optional[ports.IEventBus] = None,
        repository: Optional[ports.IBookingProcessRepository] = None,
        discount_policy: Optional[DiscountPolicy] = None,
        step_decorators: Sequence[StepDecoratorFactory] = (),
    ):
        self._inventory = inventory
        self._payment_service = payment_service
        self._logger = logger
        self._event_bus = event_bus or InMemoryEventBus(logger)
        self._repository = repository or InMemoryBookingProcessRepository()
        self._discount_policy = discount_policy or PercentageDiscount(
            DEFAULT_DISCOUNT_PERCENT
        )
        self._step_decorators = list(step_decorators)

    @property
    def repository(self) -> ports.IBookingProcessRepository:
        return self._repository

    @property
    def event_bus(self) -> ports.IEventBus:
        return self._event_bus

    def book_court(
        self,
        court_kind: Any,
        rental_item_kinds: Iterable[Any],
        payment_method: Any,
    ) -> BookingResultDTO:
        """Бронирует корт с инвентарем и возвращает списанную сумму."""
        rental_item_kinds = list(rental_item_kinds)
        process = BookingProcess(
            requested_court=_as_tag(court_kind),
            requested_items=[_as_tag(kind) for kind in rental_item_kinds],
            requested_payment_method=_as_tag(payment_method),
        )
        self._logger.info(
            "Начат процесс бронирования",
            booking_id=str(process.id),
            court_kind=process.requested_court,
            items=process.requested_items,
            payment_method=process.requested_payment_method,
        )

        try:
            court, items, method = self._step(
                "validate", BookingValidator.validate_request
            )(court_kind, rental_item_kinds, payment_method)
            process.transition_to(BookingState.VALIDATED)

            if not self._step("check_availability", self._inventory.is_available)(court):
                raise InventoryExhausted(
                    court, f"Выбранный тип корта недоступен: {court.value}"
                )

            booking = Booking.create(court, items, self._discount_policy)
            subtotal = booking.subtotal()
            total = self._step("compute_total", booking.calculate_total)()
            process.record_pricing(subtotal, total)
            self._logger.info(
                f"Итоговая стоимость со скидкой: {total}", subtotal=subtotal
            )

            receipt = self._step("charge", self._payment_service.process_payment)(
                method, total
            )
            process.record_charge(receipt.reference)

            try:
                self._step("reserve", self._inventory.reserve)(court)
            except Exception as e:
                raise PostPaymentReservationFailure(court, total, receipt) from e
            process.transition_to(BookingState.RESERVED)

        except Exception as e:
            self._fail(process, e)
            raise

        process.transition_to(BookingState.COMPLETED)
        self._repository.save(process)
        self._logger.info(
            "Бронирование успешно завершено",
            booking_id=str(process.id),
            total_charged=total,
        )
        self._event_bus.publish(
            BookingCompleted(
                booking_id=process.id,
                court_kind=court,
                total_charged=total,
                payment_reference=receipt.reference,
            )
        )

        return BookingResultDTO(
            booking_id=process.id,
            court=court,
            items=items,
            payment_method=method,
            subtotal=subtotal,
            total_charged=total,
            payment_reference=receipt.reference,
            state=process.state,
        )

    def _step(self, name: str, func: Callable[..., Any]) -> Callable[..., Any]:
        for factory in self._step_decorators:
            func = factory(name)(func)
        return func

    def _fail(self, process: BookingProcess, error: Exception) -> None:
        failed_in = process.fail(error)
        self._repository.save(process)
        self._logger.error(
            str(error),
            booking_id=str(process.id),
            failed_in=failed_in.value,
            error_type=type(error).__name__,
        )
        self._event_bus.publish(
            BookingFailed(
                booking_id=process.id,
                failed_in=failed_in,
                error_type=type(error).__name__,
                reason=str(error),
            )
        )
        if isinstance(error, PostPaymentReservationFailure):
            self._event_bus.publish(
                CompensationRequired(
                    booking_id=process.id,
                    court_kind=error.court_kind,
                    amount=error.amount,
                    payment_reference=error.receipt.reference,
                    reason=str(error.__cause__ or error),
                )
            )
