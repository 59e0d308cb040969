"""
Пакет image – цвет, холст и экспорт в PPM.
"""

from raycore.image.color import (
    Color, BLACK, WHITE, MAX_COLOR_VALUE, hadamard, quantize,
)
from raycore.image.ppm import (
    PPMHeader, canvas_to_ppm, read_ppm_header, parse_ppm,
)
from raycore.image.canvas import Canvas, pixel_at, write_pixel

__all__ = [
    "Color", "BLACK", "WHITE", "MAX_COLOR_VALUE", "hadamard", "quantize",
    "PPMHeader", "canvas_to_ppm", "read_ppm_header", "parse_ppm",
    "Canvas", "pixel_at", "write_pixel",
]
