# raycore/math/tuple4.py
"""
Однородный 4‑кортеж (float64): точка (w = 1) или свободный вектор (w = 0).

Операторы возвращают новый объект, операнды не меняются.
Геометрический смысл (точка + точка и т.п.) не проверяется –
за это отвечает вызывающий код.
"""

import numbers
import numpy as np
from typing import Iterator, Tuple

from raycore.errors import ConstructionError

EPSILON = 0.00001


def check_real(owner: str, values) -> None:
    """Компоненты – только вещественные числа (строки и т.п. не принимаем)."""
    for v in values:
        if not isinstance(v, numbers.Real):
            raise ConstructionError(
                f"[{owner}] Components must be real numbers, got {v!r}"
            )


class Tuple4:
    """Неизменяемый 4‑кортеж (x, y, z, w)."""

    __slots__ = ("_v",)

    def __init__(self, x: float, y: float, z: float, w: float):
        check_real("Tuple4", (x, y, z, w))
        self._v = np.array([x, y, z, w], dtype=np.float64)
        self._v.flags.writeable = False

    @classmethod
    def from_np(cls, array) -> "Tuple4":
        arr = np.asarray(array, dtype=np.float64)
        if arr.shape != (4,):
            raise ConstructionError(
                f"[Tuple4] Expected array of shape (4,), got {arr.shape}"
            )
        return cls(*arr)

    # -----------------------------------------------------------------
    # свойства (только чтение)
    # -----------------------------------------------------------------
    @property
    def x(self) -> float:
        return float(self._v[0])

    @property
    def y(self) -> float:
        return float(self._v[1])

    @property
    def z(self) -> float:
        return float(self._v[2])

    @property
    def w(self) -> float:
        return float(self._v[3])

    def is_point(self) -> bool:
        return bool(self._v[3] == 1.0)

    def is_vector(self) -> bool:
        return bool(self._v[3] == 0.0)

    # -----------------------------------------------------------------
    # арифметика (операторы возвращают новый объект)
    # -----------------------------------------------------------------
    def __add__(self, other: "Tuple4") -> "Tuple4":
        if not isinstance(other, Tuple4):
            return NotImplemented
        return Tuple4(*(self._v + other._v))

    def __sub__(self, other: "Tuple4") -> "Tuple4":
        if not isinstance(other, Tuple4):
            return NotImplemented
        return Tuple4(*(self._v - other._v))

    def __neg__(self) -> "Tuple4":
        return Tuple4(*(-self._v))

    def __mul__(self, scalar: float) -> "Tuple4":
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return Tuple4(*(self._v * float(scalar)))

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> "Tuple4":
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return Tuple4(*(self._v / float(scalar)))

    # -----------------------------------------------------------------
    # сравнение: оператор – точный, approx_eq – с допуском
    # -----------------------------------------------------------------
    def __eq__(self, other) -> bool:
        if not isinstance(other, Tuple4):
            return NotImplemented
        return bool(np.array_equal(self._v, other._v))

    def __hash__(self) -> int:
        return hash(self.to_tuple())

    def approx_eq(self, other: "Tuple4", eps: float = EPSILON) -> bool:
        return bool(np.all(np.abs(self._v - other._v) < eps))

    # -----------------------------------------------------------------
    # вспомогательные методы
    # -----------------------------------------------------------------
    def magnitude(self) -> float:
        """Длина с учётом w: sqrt(x² + y² + z² + w²)."""
        return float(np.sqrt(np.sum(self._v * self._v)))

    def normalize(self) -> "Tuple4":
        """
        Делит каждую компоненту на длину.
        Нулевая длина не проверяется – результат будет NaN.
        """
        m = self.magnitude()
        with np.errstate(divide="ignore", invalid="ignore"):
            return Tuple4(*(self._v / m))

    def dot(self, other: "Tuple4") -> float:
        """Скалярное произведение по всем четырём компонентам."""
        return float(np.dot(self._v, other._v))

    def cross(self, other: "Tuple4") -> "Tuple4":
        """Векторное произведение по x, y, z; результат всегда вектор."""
        a, b = self._v, other._v
        return vector(
            a[1] * b[2] - a[2] * b[1],
            a[2] * b[0] - a[0] * b[2],
            a[0] * b[1] - a[1] * b[0],
        )

    def as_np(self) -> np.ndarray:
        """Копия 4‑компонентного ndarray (float64)."""
        return self._v.copy()

    def to_tuple(self) -> Tuple[float, float, float, float]:
        return tuple(self._v.tolist())

    def __iter__(self) -> Iterator[float]:
        return iter(self._v.tolist())

    def __repr__(self) -> str:
        return f"Tuple4({self.x}, {self.y}, {self.z}, {self.w})"


# ---------------------------------------------------------------------
# фабрики и функции‑обёртки
# ---------------------------------------------------------------------
def point(x: float, y: float, z: float) -> Tuple4:
    return Tuple4(x, y, z, 1.0)


def vector(x: float, y: float, z: float) -> Tuple4:
    return Tuple4(x, y, z, 0.0)


def magnitude(t: Tuple4) -> float:
    return t.magnitude()


def normalize(t: Tuple4) -> Tuple4:
    return t.normalize()


def dot(a: Tuple4, b: Tuple4) -> float:
    return a.dot(b)


def cross(a: Tuple4, b: Tuple4) -> Tuple4:
    return a.cross(b)


def approx_equal(a: Tuple4, b: Tuple4, eps: float = EPSILON) -> bool:
    return a.approx_eq(b, eps)
