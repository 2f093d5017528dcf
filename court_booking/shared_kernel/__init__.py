"""
Общее ядро (Shared Kernel) системы бронирования кортов.

Содержит общие типы данных, перечисления и исключения,
используемые во всех ограниченных контекстах.
"""

from .domain import (
    # Перечисления
    CourtKind,
    DomainEvent,
    # Исключения
    DomainException,
    # Базовые типы
    EntityId,
    InvalidAmount,
    InvalidArgument,
    InvalidDiscount,
    InvalidStateTransition,
    InventoryExhausted,
    PaymentDetailsMissing,
    PaymentMethodKind,
    PostPaymentReservationFailure,
    RentalItemKind,
    UnknownKind,
    UnknownPaymentMethod,
    generate_id,
    # Утилиты
    now,
)
from .infrastructure import ConsoleLogger
from .interfaces import ILogger

__all__ = [
    # Базовые типы
    "EntityId",
    "generate_id",
    "DomainEvent",
    # Перечисления
    "CourtKind",
    "RentalItemKind",
    "PaymentMethodKind",
    # Исключения
    "DomainException",
    "InvalidArgument",
    "UnknownKind",
    "UnknownPaymentMethod",
    "PaymentDetailsMissing",
    "InventoryExhausted",
    "InvalidDiscount",
    "InvalidAmount",
    "PostPaymentReservationFailure",
    "InvalidStateTransition",
    # Логирование
    "ILogger",
    "ConsoleLogger",
    # Утилиты
    "now",
]
