"""
Интерфейсы (порты) для контекста инвентаря.
"""

from typing import Any, Dict, Protocol

from court_booking.shared_kernel import CourtKind


class ICourtInventory(Protocol):
    """Интерфейс хранилища остатков кортов."""

    def is_available(self, court_kind: Any) -> bool: ...
    def reserve(self, court_kind: Any) -> int: ...
    def remaining(self, court_kind: Any) -> int: ...
    def snapshot(self) -> Dict[CourtKind, int]: ...
