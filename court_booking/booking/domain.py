"""
Доменная модель контекста бронирования.

Содержит бронирование корта, проверку входящих данных,
запись процесса бронирования с его состояниями и доменные события.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Iterable, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from court_booking.pricing import DiscountPolicy, NoDiscount, compute_total
from court_booking.shared_kernel import (
    CourtKind,
    DomainEvent,
    EntityId,
    InvalidArgument,
    InvalidStateTransition,
    PaymentMethodKind,
    RentalItemKind,
    UnknownKind,
    UnknownPaymentMethod,
    generate_id,
    now,
)


class BookingState(str, Enum):
    """Состояния процесса бронирования."""

    STARTED = "started"
    VALIDATED = "validated"
    PRICING_COMPUTED = "pricing_computed"
    CHARGED = "charged"
    RESERVED = "reserved"
    COMPLETED = "completed"
    FAILED = "failed"


# Разрешенные переходы; в FAILED можно перейти из любого нетерминального состояния
_TRANSITIONS = {
    BookingState.STARTED: BookingState.VALIDATED,
    BookingState.VALIDATED: BookingState.PRICING_COMPUTED,
    BookingState.PRICING_COMPUTED: BookingState.CHARGED,
    BookingState.CHARGED: BookingState.RESERVED,
    BookingState.RESERVED: BookingState.COMPLETED,
}

TERMINAL_STATES = frozenset({BookingState.COMPLETED, BookingState.FAILED})


class BookingCompleted(DomainEvent):
    """Событие успешного завершения бронирования."""

    booking_id: EntityId
    court_kind: CourtKind
    total_charged: int
    payment_reference: str


class BookingFailed(DomainEvent):
    """Событие неудачного бронирования."""

    booking_id: EntityId
    failed_in: BookingState
    error_type: str
    reason: str


class CompensationRequired(DomainEvent):
    """Оплата списана, но корт не зарезервирован: требуется возврат средств."""

    booking_id: EntityId
    court_kind: CourtKind
    amount: int
    payment_reference: str
    reason: str


class Booking(BaseModel):
    """Бронирование корта с арендуемым инвентарем."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    id: EntityId = Field(default_factory=generate_id)
    court: CourtKind
    items: List[RentalItemKind] = Field(default_factory=list)
    discount_policy: DiscountPolicy = Field(default_factory=NoDiscount)

    @classmethod
    def create(
        cls,
        court_kind: Any,
        rental_item_kinds: Iterable[Any] = (),
        discount_policy: Optional[DiscountPolicy] = None,
    ) -> "Booking":
        """Создает бронирование из тегов корта и инвентаря."""
        booking = cls(court=CourtKind.parse(court_kind))
        for kind in rental_item_kinds:
            booking.add_rental_item(kind)
        if discount_policy is not None:
            booking.apply_discount_policy(discount_policy)
        return booking

    def add_rental_item(self, kind: Any) -> None:
        self.items.append(RentalItemKind.parse(kind))

    def apply_discount_policy(self, policy: DiscountPolicy) -> None:
        self.discount_policy = policy

    def subtotal(self) -> int:
        """Сумма без скидки."""
        return compute_total(self.court, self.items)

    def calculate_total(self) -> int:
        """Сумма с учетом политики скидки."""
        return self.discount_policy.apply(self.subtotal())


class BookingValidator:
    """Проверка входящих данных до любых операций с побочными эффектами."""

    @staticmethod
    def validate_court_kind(court_kind: Any) -> CourtKind:
        try:
            return CourtKind.parse(court_kind)
        except UnknownKind:
            raise InvalidArgument(f"Недопустимый тип корта: {court_kind!r}") from None

    @staticmethod
    def validate_payment_method(payment_method: Any) -> PaymentMethodKind:
        try:
            return PaymentMethodKind.parse(payment_method)
        except UnknownPaymentMethod:
            raise InvalidArgument(
                f"Недопустимый способ оплаты: {payment_method!r}"
            ) from None

    @staticmethod
    def validate_rental_items(rental_item_kinds: Iterable[Any]) -> List[RentalItemKind]:
        items = []
        for kind in rental_item_kinds:
            try:
                items.append(RentalItemKind.parse(kind))
            except UnknownKind:
                raise InvalidArgument(
                    f"Недопустимый тип инвентаря: {kind!r}"
                ) from None
        return items

    @classmethod
    def validate_request(
        cls, court_kind: Any, rental_item_kinds: Iterable[Any], payment_method: Any
    ) -> Tuple[CourtKind, List[RentalItemKind], PaymentMethodKind]:
        """Проверяет запрос целиком и возвращает разобранные значения."""
        court = cls.validate_court_kind(court_kind)
        method = cls.validate_payment_method(payment_method)
        items = cls.validate_rental_items(rental_item_kinds)
        return court, items, method


class BookingProcess(BaseModel):
    """Запись одного прохода процесса бронирования."""

    id: EntityId = Field(default_factory=generate_id)
    requested_court: str
    requested_items: List[str] = Field(default_factory=list)
    requested_payment_method: str
    state: BookingState = BookingState.STARTED
    history: List[BookingState] = Field(default_factory=lambda: [BookingState.STARTED])
    subtotal: Optional[int] = None
    total: Optional[int] = None
    payment_reference: Optional[str] = None
    error_type: Optional[str] = None
    failure_reason: Optional[str] = None
    created_at: datetime = Field(default_factory=now)
    updated_at: datetime = Field(default_factory=now)

    @property
    def is_finished(self) -> bool:
        return self.state in TERMINAL_STATES

    def transition_to(self, state: BookingState) -> None:
        """Переводит процесс в следующее состояние."""
        if _TRANSITIONS.get(self.state) != state:
            raise InvalidStateTransition(
                f"Недопустимый переход {self.state.value} -> {state.value}"
            )
        self._set_state(state)

    def record_pricing(self, subtotal: int, total: int) -> None:
        self.subtotal = subtotal
        self.total = total
        self.transition_to(BookingState.PRICING_COMPUTED)

    def record_charge(self, payment_reference: str) -> None:
        self.payment_reference = payment_reference
        self.transition_to(BookingState.CHARGED)

    def fail(self, error: BaseException) -> BookingState:
        """Переводит процесс в FAILED и возвращает состояние, в котором произошла ошибка."""
        if self.is_finished:
            raise InvalidStateTransition(
                f"Процесс уже завершен в состоянии {self.state.value}"
            )
        failed_in = self.state
        self.error_type = type(error).__name__
        self.failure_reason = str(error)
        self._set_state(BookingState.FAILED)
        return failed_in

    def _set_state(self, state: BookingState) -> None:
        self.state = state
        self.history.append(state)
        self.updated_at = now()
