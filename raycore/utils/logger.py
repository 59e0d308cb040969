# raycore/utils/logger.py
# ---------------------------------------------------------------
# Логгер пакета: корневой "raycore" и дочерние логгеры компонентов
# ("raycore.image.ppm", "raycore.config", ...).
# ---------------------------------------------------------------

import logging

ROOT_LOGGER_NAME = "raycore"


def init_logger(level: int = logging.INFO) -> logging.Logger:
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    return logging.getLogger(ROOT_LOGGER_NAME)


logger = init_logger()


def get_logger(component: str) -> logging.Logger:
    """Дочерний логгер компонента; уровень наследуется от "raycore"."""
    return logger.getChild(component)
