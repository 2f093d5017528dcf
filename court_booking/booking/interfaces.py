"""
Интерфейсы (порты) для контекста бронирования.
"""

from __future__ import annotations

from typing import Callable, List, Optional, Protocol, Type, TypeVar

from court_booking.shared_kernel import DomainEvent, EntityId

from .domain import BookingProcess, BookingState

T_Event = TypeVar("T_Event", bound=DomainEvent)


class IEventBus(Protocol):
    """Интерфейс для шины событий."""

    def publish(self, event: DomainEvent) -> None: ...
    def subscribe(
        self, event_type: Type[T_Event], handler: Callable[[T_Event], None]
    ) -> None: ...


class IBookingProcessRepository(Protocol):
    """Интерфейс репозитория записей процесса бронирования."""

    def save(self, process: BookingProcess) -> None: ...
    def get_by_id(self, process_id: EntityId) -> Optional[BookingProcess]: ...
    def list_by_state(self, state: BookingState) -> List[BookingProcess]: ...
    def list_all(self) -> List[BookingProcess]: ...
