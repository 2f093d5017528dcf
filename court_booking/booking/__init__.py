"""
Модуль контекста бронирования (Booking Context).

Отвечает за бронирование кортов, включая:
- Проверку входящих данных
- Расчет стоимости со скидкой
- Оплату и резервирование корта
- Учет состояний процесса бронирования
"""

from . import application, domain, event_handlers, infrastructure, interfaces

__all__ = [
    "domain",
    "application",
    "event_handlers",
    "infrastructure",
    "interfaces",
]
