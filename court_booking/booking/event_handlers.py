from court_booking.shared_kernel import ILogger

from .domain import CompensationRequired


def on_compensation_required(event: CompensationRequired, logger: ILogger) -> None:
    """Сообщает оператору о необходимости вернуть средства."""
    logger.warning(
        f"Требуется возврат {event.amount} по платежу {event.payment_reference}",
        booking_id=str(event.booking_id),
        court_kind=event.court_kind.value,
        reason=event.reason,
    )
