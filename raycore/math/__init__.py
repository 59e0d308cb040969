"""
Математический суб‑пакет: Tuple4 (точки/векторы) и Matrix.
"""

from raycore.math.tuple4 import (
    EPSILON, Tuple4, point, vector, magnitude, normalize, dot, cross,
    approx_equal,
)
from raycore.math.matrix import Matrix, value_at, set_val

__all__ = [
    "EPSILON", "Tuple4", "point", "vector", "magnitude", "normalize",
    "dot", "cross", "approx_equal", "Matrix", "value_at", "set_val",
]
