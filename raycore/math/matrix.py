# raycore/math/matrix.py
"""
Квадратная (в общем случае – прямоугольная) матрица float64, row‑major.

Размеры везде передаются в порядке (rows, cols).
Умножение определено только для квадратных матриц одного размера
и для 4×4 × Tuple4; остальное – DimensionError.
"""

import numpy as np
from typing import List, Sequence

from raycore.errors import ConstructionError, DimensionError
from raycore.math.tuple4 import EPSILON, Tuple4


class Matrix:
    __slots__ = ("rows", "cols", "m")

    def __init__(self, rows: int, cols: int):
        _check_dims(rows, cols)
        self.rows = rows
        self.cols = cols
        self.m = np.zeros((rows, cols), dtype=np.float64)

    @classmethod
    def from_cells(cls, rows: int, cols: int,
                   cells: Sequence[float]) -> "Matrix":
        """Создать из плоского row‑major списка ровно rows*cols чисел."""
        _check_dims(rows, cols)
        flat = np.asarray(cells, dtype=np.float64).ravel()
        if flat.size != rows * cols:
            raise ConstructionError(
                f"[Matrix] Wrong number of cells: expected {rows * cols} "
                f"for {rows}x{cols}, got {flat.size}"
            )
        mat = cls(rows, cols)
        mat.m[:, :] = flat.reshape((rows, cols))
        return mat

    @staticmethod
    def identity(size: int = 4) -> "Matrix":
        mat = Matrix(size, size)
        mat.m[:, :] = np.identity(size, dtype=np.float64)
        return mat

    # -----------------------------------------------------------------
    # доступ к ячейкам (с проверкой границ)
    # -----------------------------------------------------------------
    def _check_index(self, row: int, col: int) -> None:
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError(
                f"[Matrix] Cell ({row}, {col}) out of bounds "
                f"for {self.rows}x{self.cols} matrix"
            )

    def value_at(self, row: int, col: int) -> float:
        self._check_index(row, col)
        return float(self.m[row, col])

    def set_val(self, row: int, col: int, value: float) -> None:
        self._check_index(row, col)
        self.m[row, col] = value

    def __getitem__(self, key) -> float:
        row, col = key
        return self.value_at(row, col)

    def __setitem__(self, key, value: float) -> None:
        row, col = key
        self.set_val(row, col, value)

    @property
    def is_square(self) -> bool:
        return self.rows == self.cols

    # -----------------------------------------------------------------
    # умножение
    # -----------------------------------------------------------------
    def __matmul__(self, other):
        if isinstance(other, Matrix):
            return self._mul_matrix(other)
        if isinstance(other, Tuple4):
            return self._mul_tuple(other)
        return NotImplemented

    def _mul_matrix(self, other: "Matrix") -> "Matrix":
        if not (self.is_square and other.is_square
                and self.rows == other.rows):
            raise DimensionError(
                f"[Matrix] Multiplication needs square matrices of equal "
                f"size, got {self.rows}x{self.cols} and "
                f"{other.rows}x{other.cols}"
            )
        res = Matrix(self.rows, other.cols)
        res.m[:, :] = np.dot(self.m, other.m)
        return res

    def _mul_tuple(self, t: Tuple4) -> Tuple4:
        if self.rows != 4 or self.cols != 4:
            raise DimensionError(
                f"[Matrix] Tuple transform needs a 4x4 matrix, "
                f"got {self.rows}x{self.cols}"
            )
        return Tuple4.from_np(np.dot(self.m, t.as_np()))

    # -----------------------------------------------------------------
    # сравнение / представление
    # -----------------------------------------------------------------
    def __eq__(self, other) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return (self.rows == other.rows and self.cols == other.cols
                and bool(np.array_equal(self.m, other.m)))

    __hash__ = None

    def approx_eq(self, other: "Matrix", eps: float = EPSILON) -> bool:
        if self.rows != other.rows or self.cols != other.cols:
            return False
        return bool(np.all(np.abs(self.m - other.m) < eps))

    def cells(self) -> List[float]:
        return self.m.ravel().tolist()

    def as_np(self) -> np.ndarray:
        return self.m.copy()

    def __repr__(self):
        return f"Matrix({self.rows}x{self.cols}, {self.cells()})"


def _check_dims(rows: int, cols: int) -> None:
    if rows <= 0 or cols <= 0:
        raise ConstructionError(
            f"[Matrix] Dimensions must be positive, got {rows}x{cols}"
        )


def value_at(matrix: Matrix, row: int, col: int) -> float:
    return matrix.value_at(row, col)


def set_val(matrix: Matrix, row: int, col: int, value: float) -> None:
    matrix.set_val(row, col, value)
