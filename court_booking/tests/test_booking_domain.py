"""
Тесты доменной модели бронирования.
"""

import pytest

from court_booking.booking.domain import (
    Booking,
    BookingProcess,
    BookingState,
    BookingValidator,
)
from court_booking.pricing import NoDiscount, PercentageDiscount
from court_booking.shared_kernel import (
    CourtKind,
    InvalidArgument,
    InvalidStateTransition,
    PaymentMethodKind,
    RentalItemKind,
    UnknownKind,
)


class TestBooking:
    """Тесты для агрегата Booking."""

    def test_create_keeps_items_in_input_order(self):
        booking = Booking.create("Clay", ["Grips", "Ballpack", "Grips"])

        assert booking.court == CourtKind.CLAY
        assert booking.items == [
            RentalItemKind.GRIPS,
            RentalItemKind.BALLPACK,
            RentalItemKind.GRIPS,
        ]
        assert booking.discount_policy == NoDiscount()

    def test_total_without_discount(self):
        booking = Booking.create("Grass", ["Racket", "Racket"])

        assert booking.subtotal() == 160
        assert booking.calculate_total() == 160

    def test_total_with_discount(self):
        booking = Booking.create("Grass", ["Racket", "Racket"], PercentageDiscount(10))

        assert booking.subtotal() == 160
        assert booking.calculate_total() == 144

    def test_add_rental_item_and_change_policy(self):
        booking = Booking.create("Hard")
        booking.add_rental_item(RentalItemKind.BALLPACK)
        booking.apply_discount_policy(PercentageDiscount(100))

        assert booking.subtotal() == 320
        assert booking.calculate_total() == 0

    def test_unknown_item_is_rejected(self):
        booking = Booking.create("Hard")

        with pytest.raises(UnknownKind):
            booking.add_rental_item("Towel")


class TestBookingValidator:
    """Тесты для BookingValidator."""

    def test_valid_request(self):
        court, items, method = BookingValidator.validate_request(
            "Clay", ["Ballpack", "Grips"], "Card"
        )

        assert court == CourtKind.CLAY
        assert items == [RentalItemKind.BALLPACK, RentalItemKind.GRIPS]
        assert method == PaymentMethodKind.CARD

    def test_unknown_court_kind(self):
        with pytest.raises(InvalidArgument, match="Недопустимый тип корта: 'Sand'"):
            BookingValidator.validate_court_kind("Sand")

    def test_unknown_payment_method(self):
        with pytest.raises(InvalidArgument, match="Недопустимый способ оплаты"):
            BookingValidator.validate_payment_method("Bitcoin")

    def test_unknown_rental_item(self):
        with pytest.raises(InvalidArgument, match="Недопустимый тип инвентаря"):
            BookingValidator.validate_rental_items(["Racket", "Shoes"])

    def test_tags_are_case_sensitive(self):
        with pytest.raises(InvalidArgument):
            BookingValidator.validate_court_kind("grass")


class TestBookingProcess:
    """Тесты для состояний процесса бронирования."""

    @pytest.fixture
    def process(self) -> BookingProcess:
        return BookingProcess(
            requested_court="Grass",
            requested_items=["Racket"],
            requested_payment_method="UPI",
        )

    def test_happy_path_transitions(self, process):
        process.transition_to(BookingState.VALIDATED)
        process.record_pricing(130, 117)
        process.record_charge("ivan@upi")
        process.transition_to(BookingState.RESERVED)
        process.transition_to(BookingState.COMPLETED)

        assert process.history == [
            BookingState.STARTED,
            BookingState.VALIDATED,
            BookingState.PRICING_COMPUTED,
            BookingState.CHARGED,
            BookingState.RESERVED,
            BookingState.COMPLETED,
        ]
        assert process.total == 117
        assert process.is_finished

    def test_states_cannot_be_skipped(self, process):
        with pytest.raises(InvalidStateTransition):
            process.transition_to(BookingState.CHARGED)

    def test_fail_from_any_intermediate_state(self, process):
        process.transition_to(BookingState.VALIDATED)

        failed_in = process.fail(ValueError("ошибка"))

        assert failed_in == BookingState.VALIDATED
        assert process.state == BookingState.FAILED
        assert process.error_type == "ValueError"
        assert process.failure_reason == "ошибка"

    def test_finished_process_cannot_fail_again(self, process):
        process.fail(ValueError("первая"))

        with pytest.raises(InvalidStateTransition):
            process.fail(ValueError("вторая"))
