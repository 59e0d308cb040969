# -*- coding: utf-8 -*-
"""
conftest.py – общие фикстуры для тестов raycore.
"""

import pytest

from raycore.image import Canvas, Color
from raycore.math import Matrix
from raycore.utils import Config


# ----------------------------------------------------------------------
# Матрицы из классического примера умножения 4×4
# ----------------------------------------------------------------------
@pytest.fixture
def matrix_a() -> Matrix:
    return Matrix.from_cells(4, 4, [
        1, 2, 3, 4,
        5, 6, 7, 8,
        9, 8, 7, 6,
        5, 4, 3, 2,
    ])


@pytest.fixture
def matrix_b() -> Matrix:
    return Matrix.from_cells(4, 4, [
        -2, 1, 2, 3,
        3, 2, 1, -1,
        4, 3, 6, 5,
        1, 2, 7, 8,
    ])


@pytest.fixture
def matrix_c() -> Matrix:
    return Matrix.from_cells(4, 4, [
        0, 1, 0, 2,
        3, 0, -1, 0,
        1, 1, 1, 1,
        -2, 0, 4, 5,
    ])


# ----------------------------------------------------------------------
# Холст 5×3 с тремя окрашенными пикселями
# ----------------------------------------------------------------------
@pytest.fixture
def painted_canvas() -> Canvas:
    c = Canvas(5, 3)
    c.write_pixel(0, 0, Color(1.5, 0, 0))
    c.write_pixel(2, 1, Color(0, 0.5, 0))
    c.write_pixel(4, 2, Color(-0.5, 0, 1))
    return c


# ----------------------------------------------------------------------
# Config – singleton, поэтому сбрасываем его до и после каждого теста
# ----------------------------------------------------------------------
@pytest.fixture
def fresh_config():
    Config.reset()
    yield Config
    Config.reset()
