# raycore/errors.py
"""
Исключения ядра.

Все ошибки – нарушения предусловий со стороны вызывающего кода:
бросаются сразу в точке вызова и никогда не подавляются.
Выход за границы матрицы/холста – обычный встроенный ``IndexError``.
"""


class RayCoreError(Exception):
    """Базовый класс для всех ошибок raycore."""


class ConstructionError(RayCoreError, ValueError):
    """Неверное число ячеек или размеры при создании объекта."""


class DimensionError(RayCoreError, ValueError):
    """Несовместимые размеры операндов при умножении."""


class PPMFormatError(RayCoreError, ValueError):
    """Текст не является корректным P3‑изображением."""
