"""
Доменная модель контекста инвентаря кортов.

Хранит остатки свободных кортов по типам. Резервирование
является единственной операцией, изменяющей остатки.
"""

from threading import Lock
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

from court_booking.shared_kernel import CourtKind, InvalidArgument, InventoryExhausted

DEFAULT_COURT_AVAILABILITY: Mapping[CourtKind, int] = MappingProxyType(
    {
        CourtKind.GRASS: 10,
        CourtKind.CLAY: 5,
        CourtKind.HARD: 8,
    }
)


class CourtInventory:
    """
    Остатки кортов по типам.

    Каждый тип корта защищен собственной блокировкой: проверка
    остатка и его уменьшение в ``reserve`` выполняются в одной
    критической секции, поэтому при параллельных бронированиях
    успешных резервирований не больше начального количества.

    Args:
        initial_availability: Начальные остатки. Типы, не указанные
            в словаре, берутся из DEFAULT_COURT_AVAILABILITY.
    """

    def __init__(self, initial_availability: Optional[Mapping[Any, int]] = None):
        availability: Dict[CourtKind, int] = dict(DEFAULT_COURT_AVAILABILITY)
        for kind, count in (initial_availability or {}).items():
            court_kind = CourtKind.parse(kind)
            if isinstance(count, bool) or not isinstance(count, int) or count < 0:
                raise InvalidArgument(
                    f"Остаток кортов {court_kind.value} должен быть "
                    f"неотрицательным целым числом, получено {count!r}"
                )
            availability[court_kind] = count

        self._availability = availability
        self._locks: Dict[CourtKind, Lock] = {kind: Lock() for kind in availability}

    def is_available(self, court_kind: Any) -> bool:
        """Проверяет, остался ли хотя бы один свободный корт."""
        kind = CourtKind.parse(court_kind)
        with self._locks[kind]:
            return self._availability[kind] > 0

    def remaining(self, court_kind: Any) -> int:
        """Возвращает количество свободных кортов."""
        kind = CourtKind.parse(court_kind)
        with self._locks[kind]:
            return self._availability[kind]

    def reserve(self, court_kind: Any) -> int:
        """
        Резервирует один корт и возвращает оставшееся количество.

        Повторно проверяет остаток, даже если вызывающий код
        уже вызвал is_available.
        """
        kind = CourtKind.parse(court_kind)
        with self._locks[kind]:
            if self._availability[kind] <= 0:
                raise InventoryExhausted(kind)
            self._availability[kind] -= 1
            return self._availability[kind]

    def snapshot(self) -> Dict[CourtKind, int]:
        """Возвращает копию текущих остатков."""
        return {kind: self.remaining(kind) for kind in self._availability}
