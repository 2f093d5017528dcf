"""
Настройки приложения бронирования.

Значения по умолчанию соответствуют исходной конфигурации клуба;
переопределения читаются из переменных окружения.
"""

import json
import os
from typing import Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from court_booking.inventory import DEFAULT_COURT_AVAILABILITY
from court_booking.shared_kernel import CourtKind

ENV_PREFIX = "COURT_BOOKING_"


class BookingSettings(BaseModel):
    """Неизменяемый снимок настроек."""

    model_config = ConfigDict(frozen=True)

    initial_inventory: Dict[CourtKind, int] = Field(
        default_factory=lambda: dict(DEFAULT_COURT_AVAILABILITY)
    )
    discount_percent: int = Field(10, ge=0, le=100)
    monitoring_enabled: bool = False
    debug_logging: bool = False

    @field_validator("initial_inventory")
    @classmethod
    def counts_are_non_negative(cls, v: Dict[CourtKind, int]) -> Dict[CourtKind, int]:
        for kind, count in v.items():
            if count < 0:
                raise ValueError(f"Остаток кортов {kind.value} не может быть отрицательным")
        return v


def _to_bool(value: Optional[str], default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def load_settings(env: Optional[Mapping[str, str]] = None) -> BookingSettings:
    """Загружает настройки из окружения, подставляя значения по умолчанию."""
    if env is None:
        env = os.environ

    values = {
        "monitoring_enabled": _to_bool(env.get(f"{ENV_PREFIX}MONITORING")),
        "debug_logging": _to_bool(env.get(f"{ENV_PREFIX}DEBUG")),
    }

    discount = env.get(f"{ENV_PREFIX}DISCOUNT_PERCENT")
    if discount is not None and discount.strip():
        values["discount_percent"] = discount.strip()

    inventory = env.get(f"{ENV_PREFIX}INVENTORY")
    if inventory is not None and inventory.strip():
        overrides = json.loads(inventory)
        values["initial_inventory"] = {**DEFAULT_COURT_AVAILABILITY, **{
            CourtKind.parse(kind): count for kind, count in overrides.items()
        }}

    return BookingSettings(**values)
