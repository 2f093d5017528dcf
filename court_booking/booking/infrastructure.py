"""
Инфраструктурный слой контекста бронирования.

Содержит реализации репозиториев и шины событий в памяти.
"""

from threading import Lock
from typing import Callable, Dict, List, Optional, Type

from court_booking.shared_kernel import ConsoleLogger, DomainEvent, EntityId, ILogger

from .domain import BookingProcess, BookingState


class InMemoryBookingProcessRepository:
    """Реализация репозитория процессов бронирования в памяти."""

    def __init__(self) -> None:
        self._processes: Dict[EntityId, BookingProcess] = {}
        self._lock = Lock()

    def save(self, process: BookingProcess) -> None:
        with self._lock:
            self._processes[process.id] = process

    def get_by_id(self, process_id: EntityId) -> Optional[BookingProcess]:
        return self._processes.get(process_id)

    def list_by_state(self, state: BookingState) -> List[BookingProcess]:
        return [
            process for process in self.list_all()
            if process.state == state
        ]

    def list_all(self) -> List[BookingProcess]:
        with self._lock:
            processes = list(self._processes.values())
        processes.sort(key=lambda p: p.created_at)
        return processes


class InMemoryEventBus:
    """Реализация шины событий в памяти."""

    def __init__(self, logger: Optional[ILogger] = None):
        self._subscribers: Dict[Type[DomainEvent], List[Callable[[DomainEvent], None]]] = {}
        self._logger = logger or ConsoleLogger()

    def publish(self, event: DomainEvent) -> None:
        """Публикует событие."""
        event_type = type(event)
        if event_type not in self._subscribers:
            self._logger.debug(f"No subscribers for event type {event_type.__name__}")
            return

        self._logger.debug(
            f"Publishing event: {event_type.__name__}", event=event.model_dump()
        )

        for handler in self._subscribers[event_type]:
            try:
                handler(event)
            except Exception as e:
                # Сбой подписчика не должен менять исход бронирования
                self._logger.error(
                    f"Error in event handler for {event_type.__name__}",
                    error=str(e),
                    event=event.model_dump(),
                )

    def subscribe(self, event_type: Type[DomainEvent], handler) -> None:
        """Подписывает обработчик на события указанного типа."""
        self._subscribers.setdefault(event_type, []).append(handler)
        self._logger.debug(f"Subscribed handler to {event_type.__name__} events")
