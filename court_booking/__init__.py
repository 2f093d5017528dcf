"""
Система бронирования теннисных кортов.

Ограниченные контексты:
- shared_kernel: общие типы, перечисления и исключения
- catalog: цены на корты и инвентарь
- inventory: остатки кортов и резервирование
- pricing: расчет стоимости и скидки
- payment: способы оплаты и списание
- booking: оркестрация процесса бронирования
"""

__version__ = "0.1.0"
