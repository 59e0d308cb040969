# raycore/image/canvas.py
"""
Холст – растр цветов до экспорта.

Пиксели хранятся в ndarray float64 формы (height, width, 3):
индексация [y, x], что совпадает с row‑major порядком y * width + x.
"""

import numpy as np
from PIL import Image

from raycore.errors import ConstructionError
from raycore.image.color import MAX_COLOR_VALUE, Color, quantize
from raycore.image.ppm import PPM_LINE_WIDTH, canvas_to_ppm
from raycore.utils.logger import get_logger

_log = get_logger("image.canvas")


class Canvas:
    __slots__ = ("width", "height", "pixels")

    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ConstructionError(
                f"[Canvas] Dimensions must be positive, got {width}x{height}"
            )
        self.width = width
        self.height = height
        self.pixels = np.zeros((height, width, 3), dtype=np.float64)
        _log.debug(f"[Canvas] Created {width}x{height}")

    def _check_xy(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"[Canvas] Pixel ({x}, {y}) out of bounds "
                f"for {self.width}x{self.height} canvas"
            )

    def pixel_at(self, x: int, y: int) -> Color:
        self._check_xy(x, y)
        return Color(*self.pixels[y, x])

    def write_pixel(self, x: int, y: int, color: Color) -> None:
        self._check_xy(x, y)
        self.pixels[y, x] = color.as_np()

    def fill(self, color: Color) -> None:
        self.pixels[:, :] = color.as_np()

    # -----------------------------------------------------------------
    # экспорт
    # -----------------------------------------------------------------
    def to_ppm(self, line_width: int = PPM_LINE_WIDTH,
               max_value: int = MAX_COLOR_VALUE) -> str:
        return canvas_to_ppm(self, line_width, max_value)

    def to_image(self) -> Image.Image:
        """Pillow‑изображение RGB (в памяти, на диск ничего не пишется)."""
        rgb = quantize(self.pixels).astype(np.uint8)
        return Image.fromarray(rgb)

    def __repr__(self):
        return f"Canvas({self.width}x{self.height})"


def pixel_at(canvas: Canvas, x: int, y: int) -> Color:
    return canvas.pixel_at(x, y)


def write_pixel(canvas: Canvas, x: int, y: int, color: Color) -> None:
    canvas.write_pixel(x, y, color)
