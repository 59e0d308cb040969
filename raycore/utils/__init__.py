# raycore/utils/__init__.py
"""
Пакет утилит.

Экспортируем:
    * logger     – корневой logging.Logger "raycore" (с level INFO)
    * get_logger – дочерний логгер компонента
    * Config     – JSON‑конфигурация
    * Profiler   – замер времени блока кода
"""

from .logger import logger, get_logger
from .config import Config, DEFAULT_CONFIG
from .profiler import Profiler

__all__ = ["logger", "get_logger", "Config", "DEFAULT_CONFIG", "Profiler"]
