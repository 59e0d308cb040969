"""
Контекст‑менеджер профайлинга – измеряет время выполнения блока кода
и пишет его в лог вызывающего компонента.
"""

import logging
import time
from typing import Optional

from raycore.utils.logger import get_logger

_log = get_logger("profiler")


class Profiler:
    """
    ``with Profiler("canvas_to_ppm", log=ppm_log):`` – после выхода из блока
    ``elapsed_ms`` хранит время в миллисекундах. Исключения из блока
    не перехватываются, время пишется и для них.
    """
    def __init__(self, name: str, log: Optional[logging.Logger] = None,
                 level: int = logging.DEBUG):
        self.name = name
        self.log = log or _log
        self.level = level
        self._start = 0.0
        self.elapsed_ms = 0.0

    def __enter__(self):
        self._start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.elapsed_ms = (time.perf_counter() - self._start) * 1000.0
        status = "failed" if exc_type is not None else "done"
        self.log.log(self.level,
                     f"[Profiler] {self.name}: {status} in {self.elapsed_ms:.2f} ms")
        return False
