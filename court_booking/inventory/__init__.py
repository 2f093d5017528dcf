"""
Модуль контекста инвентаря (Inventory Context).

Отвечает за учет свободных кортов и их резервирование.
"""

from .domain import DEFAULT_COURT_AVAILABILITY, CourtInventory
from .interfaces import ICourtInventory

__all__ = [
    "DEFAULT_COURT_AVAILABILITY",
    "CourtInventory",
    "ICourtInventory",
]
