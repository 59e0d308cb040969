# raycore/image/color.py
"""
RGB‑цвет (float64). Диапазон каналов не ограничен: промежуточные
значения могут быть > 1 или < 0. В целые 0‥255 переводит ``as_rgb``.
"""

import numbers
import numpy as np
from typing import Tuple

from raycore.math.tuple4 import EPSILON, check_real

MAX_COLOR_VALUE = 255


def quantize(values, max_value: int = MAX_COLOR_VALUE) -> np.ndarray:
    """
    channel * max_value, округление половин от нуля, затем зажим в
    [0, max_value]. Отрицательные каналы и NaN дают 0.
    Работает с массивом любой формы, возвращает int64.
    """
    scaled = np.asarray(values, dtype=np.float64) * max_value
    rounded = np.nan_to_num(np.floor(scaled + 0.5), nan=0.0)
    return np.clip(rounded, 0, max_value).astype(np.int64)


class Color:
    """Неизменяемый цвет (red, green, blue)."""

    __slots__ = ("_v",)

    def __init__(self, red: float, green: float, blue: float):
        check_real("Color", (red, green, blue))
        self._v = np.array([red, green, blue], dtype=np.float64)
        self._v.flags.writeable = False

    @property
    def red(self) -> float:
        return float(self._v[0])

    @property
    def green(self) -> float:
        return float(self._v[1])

    @property
    def blue(self) -> float:
        return float(self._v[2])

    # -----------------------------------------------------------------
    # арифметика
    # -----------------------------------------------------------------
    def __add__(self, other: "Color") -> "Color":
        if not isinstance(other, Color):
            return NotImplemented
        return Color(*(self._v + other._v))

    def __sub__(self, other: "Color") -> "Color":
        if not isinstance(other, Color):
            return NotImplemented
        return Color(*(self._v - other._v))

    def __mul__(self, other) -> "Color":
        # Color * Color – покомпонентное (Адамарово) произведение
        if isinstance(other, Color):
            return Color(*(self._v * other._v))
        if isinstance(other, numbers.Real):
            return Color(*(self._v * float(other)))
        return NotImplemented

    __rmul__ = __mul__

    # -----------------------------------------------------------------
    def __eq__(self, other) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return bool(np.array_equal(self._v, other._v))

    def __hash__(self) -> int:
        return hash(self.to_tuple())

    def approx_eq(self, other: "Color", eps: float = EPSILON) -> bool:
        return bool(np.all(np.abs(self._v - other._v) < eps))

    def as_rgb(self) -> Tuple[int, int, int]:
        r, g, b = quantize(self._v).tolist()
        return r, g, b

    def as_np(self) -> np.ndarray:
        return self._v.copy()

    def to_tuple(self) -> Tuple[float, float, float]:
        return tuple(self._v.tolist())

    def __repr__(self) -> str:
        return f"Color({self.red}, {self.green}, {self.blue})"


def hadamard(a: Color, b: Color) -> Color:
    return a * b


BLACK = Color(0.0, 0.0, 0.0)
WHITE = Color(1.0, 1.0, 1.0)
