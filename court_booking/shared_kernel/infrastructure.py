"""
Инфраструктурные компоненты общего ядра.
"""

import json
import sys
from typing import Any, TextIO


class ConsoleLogger:
    """Простая реализация логгера, выводящая сообщения в консоль."""

    def __init__(self, debug_enabled: bool = False):
        self._debug_enabled = debug_enabled

    def _emit(self, level: str, message: str, stream: TextIO, **kwargs: Any) -> None:
        print(f"[{level}] {message}", file=stream, flush=True)
        if kwargs:
            print(
                "  Context:",
                json.dumps(kwargs, default=str, indent=2, ensure_ascii=False),
                file=stream,
                flush=True,
            )

    def info(self, message: str, **kwargs: Any) -> None:
        self._emit("INFO", message, sys.stdout, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._emit("ERROR", message, sys.stderr, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._emit("WARNING", message, sys.stderr, **kwargs)

    def debug(self, message: str, **kwargs: Any) -> None:
        if self._debug_enabled:
            self._emit("DEBUG", message, sys.stdout, **kwargs)
