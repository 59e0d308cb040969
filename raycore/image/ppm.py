# raycore/image/ppm.py
"""
Текстовый PPM (P3).

Экспорт холста в строку и обратный разбор – только в памяти,
запись на диск остаётся за вызывающим кодом.
"""

import re
from collections import namedtuple

import numpy as np

from raycore.errors import PPMFormatError
from raycore.image.color import MAX_COLOR_VALUE, quantize
from raycore.utils.logger import get_logger
from raycore.utils.profiler import Profiler

PPM_MAGIC = "P3"
PPM_LINE_WIDTH = 60
PPM_MAX_VALUE_LIMIT = 65535

_log = get_logger("image.ppm")

PPMHeader = namedtuple("PPMHeader", ["width", "height", "max_value"])

_COMMENT_RE = re.compile(r"#[^\n]*")


def ppm_header(width: int, height: int,
               max_value: int = MAX_COLOR_VALUE) -> str:
    return f"{PPM_MAGIC}\n{width} {height}\n{max_value}\n"


def canvas_to_ppm(canvas, line_width: int = PPM_LINE_WIDTH,
                  max_value: int = MAX_COLOR_VALUE) -> str:
    """
    Каналы квантуются в 0..max_value, то же значение пишется в заголовок.
    Строки сверху вниз, пиксели слева направо, по одной записи "R G B\\n".
    Буфер строки сбрасывается в вывод, как только его длина превысит
    ``line_width``; сброс возможен только между целыми записями.
    Результат всегда заканчивается ровно одним '\\n'.
    """
    if not 0 < max_value <= PPM_MAX_VALUE_LIMIT:
        raise PPMFormatError(
            f"[PPM] max_value must be in 1..{PPM_MAX_VALUE_LIMIT}, got {max_value}"
        )
    with Profiler(f"canvas_to_ppm {canvas.width}x{canvas.height}", log=_log):
        rgb = quantize(canvas.pixels, max_value)
        parts = [ppm_header(canvas.width, canvas.height, max_value)]
        line = []
        line_len = 0

        for y in range(canvas.height):
            for x in range(canvas.width):
                r, g, b = rgb[y, x]
                entry = f"{r} {g} {b}\n"
                line.append(entry)
                line_len += len(entry)
                if line_len > line_width:
                    parts.append("".join(line))
                    line = []
                    line_len = 0
        parts.append("".join(line))

        out = "".join(parts)
        if not out.endswith("\n"):
            out += "\n"
    return out


# ---------------------------------------------------------------------
# разбор
# ---------------------------------------------------------------------
def _tokens(text: str):
    return _COMMENT_RE.sub(" ", text).split()


def _to_int(token: str, what: str) -> int:
    try:
        return int(token)
    except ValueError:
        raise PPMFormatError(f"[PPM] Invalid {what}: {token!r}") from None


def read_ppm_header(text: str) -> PPMHeader:
    tokens = _tokens(text)
    if not tokens or tokens[0] != PPM_MAGIC:
        raise PPMFormatError(f"[PPM] Expected magic {PPM_MAGIC!r}")
    if len(tokens) < 4:
        raise PPMFormatError("[PPM] Truncated header")
    width = _to_int(tokens[1], "width")
    height = _to_int(tokens[2], "height")
    max_value = _to_int(tokens[3], "max value")
    if width <= 0 or height <= 0 or max_value <= 0:
        raise PPMFormatError(
            f"[PPM] Non-positive header values: {width} {height} {max_value}"
        )
    return PPMHeader(width, height, max_value)


def parse_ppm(text: str) -> np.ndarray:
    """Разобрать P3‑текст в массив int64 формы (height, width, 3)."""
    header = read_ppm_header(text)
    samples = [_to_int(t, "sample") for t in _tokens(text)[4:]]
    expected = header.width * header.height * 3
    if len(samples) != expected:
        raise PPMFormatError(
            f"[PPM] Expected {expected} samples, got {len(samples)}"
        )
    data = np.array(samples, dtype=np.int64)
    if data.size and (data.min() < 0 or data.max() > header.max_value):
        raise PPMFormatError(
            f"[PPM] Sample out of range 0..{header.max_value}"
        )
    _log.debug(f"[PPM] Parsed {header.width}x{header.height} image")
    return data.reshape((header.height, header.width, 3))
