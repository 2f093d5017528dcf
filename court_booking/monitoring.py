"""
Декораторы для наблюдения за операциями.

``around`` оборачивает вызов действиями до и после него. На его основе
построены декораторы логирования и замера времени выполнения, которые
можно накладывать друг на друга и на шаги оркестратора бронирования.
"""

import time
from functools import wraps
from typing import Any, Callable, Optional

from court_booking.shared_kernel import ILogger

Before = Callable[[], None]
After = Callable[[float, Optional[BaseException]], None]


def around(
    before: Optional[Before] = None,
    after: Optional[After] = None,
    clock: Callable[[], float] = time.perf_counter,
) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """
    Создает декоратор с действиями до и после вызова.

    Args:
        before: Вызывается перед операцией.
        after: Вызывается после операции, в том числе при ошибке.
            Получает длительность в миллисекундах и исключение (или None).
        clock: Источник времени в секундах.
    """

    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        @wraps(func)
        def wrapper(*args, **kwargs):
            if before is not None:
                before()
            started = clock()
            error = None
            try:
                return func(*args, **kwargs)
            except Exception as e:
                error = e
                raise
            finally:
                if after is not None:
                    after((clock() - started) * 1000, error)

        return wrapper

    return decorator


def logging_decorator(logger: ILogger, name: str):
    """Логирует начало операции."""
    return around(before=lambda: logger.info(f"Обработка запроса: {name}"))


def monitoring_decorator(
    logger: ILogger, name: str, clock: Callable[[], float] = time.perf_counter
):
    """Логирует время выполнения операции."""

    def report(elapsed_ms: float, error: Optional[BaseException]) -> None:
        logger.info(
            f"Время выполнения {name}: {elapsed_ms:.3f} мс",
            failed=error is not None,
        )

    return around(after=report, clock=clock)
