"""
raycore – числовое ядро программного трассировщика лучей:
однородные точки/векторы, матрицы, цвет и холст с экспортом в PPM (P3).
"""

from raycore.utils import logger
from raycore.errors import (
    RayCoreError, ConstructionError, DimensionError, PPMFormatError,
)
from raycore.math import (
    EPSILON, Tuple4, Matrix, point, vector, magnitude, normalize, dot, cross,
    approx_equal,
)
from raycore.image import Color, Canvas, canvas_to_ppm, parse_ppm

__version__ = "0.1.0"

__all__ = [
    "RayCoreError",
    "ConstructionError",
    "DimensionError",
    "PPMFormatError",
    "EPSILON",
    "Tuple4",
    "Matrix",
    "point",
    "vector",
    "magnitude",
    "normalize",
    "dot",
    "cross",
    "approx_equal",
    "Color",
    "Canvas",
    "canvas_to_ppm",
    "parse_ppm",
]
