#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Снаряд под действием гравитации и ветра: каждая позиция рисуется
на холсте, результат сохраняется в projectile.ppm.
"""

import sys
from pathlib import Path

from raycore import Canvas, Color, normalize, point, vector
from raycore.utils import Config, logger


def tick(position, velocity, gravity, wind):
    """Один шаг симуляции: (позиция, скорость) → следующие."""
    return position + velocity, velocity + gravity + wind


def plot_trajectory(canvas: Canvas, color: Color) -> int:
    position = point(0, 1, 0)
    velocity = normalize(vector(1, 1.8, 0)) * 11.25
    gravity = vector(0, -0.1, 0)
    wind = vector(-0.01, 0, 0)

    plotted = 0
    while position.y > 0:
        x = int(round(position.x))
        y = canvas.height - int(round(position.y))
        # Холст не обрезает координаты – отбрасываем точки за краем сами
        if 0 <= x < canvas.width and 0 <= y < canvas.height:
            canvas.write_pixel(x, y, color)
            plotted += 1
        position, velocity = tick(position, velocity, gravity, wind)
    return plotted


if __name__ == "__main__":
    cfg = Config()
    size = cfg["canvas"]
    out_path = Path(sys.argv[1] if len(sys.argv) > 1 else "projectile.ppm")

    canvas = Canvas(size["width"], size["height"])
    n = plot_trajectory(canvas, Color(1.0, 0.8, 0.6))
    logger.info(f"Plotted {n} points")

    ppm_cfg = cfg["ppm"]
    out_path.write_text(
        canvas.to_ppm(ppm_cfg["line_width"], ppm_cfg["max_value"]),
        encoding="ascii",
    )
    logger.info(f"Wrote {out_path}")
