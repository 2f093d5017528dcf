"""
Модуль контекста оплаты (Payment Context).

Отвечает за выбор способа оплаты, сбор платежных данных
и списание суммы бронирования.
"""

from . import application, domain, infrastructure, interfaces

__all__ = [
    "domain",
    "application",
    "infrastructure",
    "interfaces",
]
