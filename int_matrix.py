"""
Dense, mutable integer matrices backed by numpy object arrays (exact Python ints).

Implements:
- Matrix: row insertion/deletion, element access, addition, scalar and matrix products,
  transposition, determinant (cofactor expansion or Bareiss) and inverse, each optionally
  reduced modulo a positive integer.
- ModularMatrix: a Matrix with a fixed modulus; every cell stays in [0, modulus) after
  every operation.
"""

import operator
from typing import Callable, Iterator, List, Optional, Sequence, Tuple

import numpy as np

from algebra import check_modulus, gcd, mod
from linear_algebra import determinant_bareiss
from logging_utils import get_logger
from matrix_errors import (
    DimensionError,
    InvalidModulus,
    NotInvertibleError,
    NotSquareError,
    ShapeError,
)
from minors import adjugate, cofactor_determinant
from row_col import RowCol

DETERMINANT_METHODS = ("cofactor", "bareiss")

Transformer = Callable[[int, int, int], int]


def _to_object_array(rows: Sequence[Sequence[int]], width: int, modulus: Optional[int] = None) -> np.ndarray:
    value = np.empty((len(rows), width), dtype=object)
    for i, row in enumerate(rows):
        for j, v in enumerate(row):
            value[i, j] = mod(operator.index(v), modulus)
    return value


class Matrix:
    def __init__(self, grid: Sequence[Sequence[int]], modulus: Optional[int] = None):
        rows = list(grid)
        if not Matrix.check(rows):
            raise ShapeError("Matrix rows must all have the same length")
        check_modulus(modulus)
        width = len(rows[0]) if rows else 0
        self.value = _to_object_array(rows, width, modulus)

    @staticmethod
    def check(grid: Sequence[Sequence[int]]) -> bool:
        rows = list(grid)
        if not rows:
            return True
        width = len(rows[0])
        return all(len(row) == width for row in rows)

    @classmethod
    def identity(cls, size: int, *args, **kwargs) -> "Matrix":
        grid = [[1 if i == j else 0 for j in range(size)] for i in range(size)]
        return cls(grid, *args, **kwargs)

    @classmethod
    def ones(cls, rows: int, columns: Optional[int] = None, *args, **kwargs) -> "Matrix":
        if columns is None:
            columns = rows
        return cls([[1] * columns for _ in range(rows)], *args, **kwargs)

    def clone(self) -> "Matrix":
        return Matrix(self.value)

    def to_array(self) -> List[List[int]]:
        return self.value.tolist()

    @property
    def size(self) -> Tuple[int, int]:
        return self.value.shape[0], self.value.shape[1]

    @property
    def height(self) -> int:
        return self.value.shape[0]

    @property
    def width(self) -> int:
        return self.value.shape[1]

    @property
    def is_square(self) -> bool:
        return self.height == self.width

    def get(self, i: int, j: int) -> int:
        return self.value[i, j]

    def get_row(self, i: int) -> List[int]:
        return self.value[i].tolist()

    def set(self, i: int, j: int, v: int, modulus: Optional[int] = None) -> "Matrix":
        self.value[i, j] = mod(operator.index(v), modulus)
        return self

    def insert_row(self, row: Sequence[int], position: Optional[int] = None, modulus: Optional[int] = None) -> "Matrix":
        """
        Insert row before index position (append when position is None).
        An empty matrix takes the width of its first row.
        """
        row = list(row)
        if self.height and len(row) != self.width:
            raise ShapeError(f"Row length {len(row)} does not match matrix width {self.width}")
        check_modulus(modulus)
        new_row = _to_object_array([row], len(row), modulus)
        if self.height == 0:
            self.value = new_row
            return self
        if position is None:
            position = self.height
        self.value = np.concatenate([self.value[:position], new_row, self.value[position:]], axis=0)
        return self

    def delete_row(self, i: int) -> "Matrix":
        self.value = np.delete(self.value, i, axis=0)
        return self

    def delete_column(self, j: int) -> "Matrix":
        self.value = np.delete(self.value, j, axis=1)
        return self

    def transform(self, transformer: Transformer) -> "Matrix":
        """
        Replace every cell with transformer(value, i, j), visiting cells in row-major order.
        Results must be integers. The grid is swapped in only once every cell is computed.
        """
        height, width = self.size
        result = np.empty((height, width), dtype=object)
        for i in range(height):
            for j in range(width):
                result[i, j] = operator.index(transformer(self.value[i, j], i, j))
        self.value = result
        return self

    def add(self, m2: "Matrix", modulus: Optional[int] = None) -> "Matrix":
        if self.size != m2.size:
            raise ShapeError(f"Matrix sizes don't match: {self.size} vs {m2.size}")
        check_modulus(modulus)
        return self.transform(lambda v, i, j: mod(v + m2.get(i, j), modulus))

    def scalar(self, n: int, modulus: Optional[int] = None) -> "Matrix":
        n = operator.index(n)
        check_modulus(modulus)
        return self.transform(lambda v, i, j: mod(v * n, modulus))

    def product(self, m2: "Matrix", modulus: Optional[int] = None) -> "Matrix":
        if self.width != m2.height:
            raise DimensionError(f"Matrix dimensions do not match for product: {self.size} x {m2.size}")
        check_modulus(modulus)
        n_rows, inner = self.size
        n_cols = m2.width
        result = np.empty((n_rows, n_cols), dtype=object)
        for i in range(n_rows):
            for j in range(n_cols):
                value = 0
                for k in range(inner):
                    value += self.value[i, k] * m2.value[k, j]
                result[i, j] = mod(value, modulus)
        self.value = result
        return self

    def transpose(self) -> "Matrix":
        self.value = self.value.T.copy()
        return self

    def determinant(self, modulus: Optional[int] = None, method: str = "cofactor") -> int:
        """
        Determinant of a square matrix, reduced once at the end when modulus is given.

        method="cofactor" expands along the first row recursively (exponential time,
        recursion depth equal to the matrix size); method="bareiss" runs fraction-free
        elimination and returns the same integer in polynomial time.
        """
        if not self.is_square:
            raise NotSquareError(f"Determinant can only be calculated for square matrices, got {self.size}")
        check_modulus(modulus)
        if method not in DETERMINANT_METHODS:
            raise ValueError(f"Unknown determinant method {method!r}, expected one of {DETERMINANT_METHODS}")
        logger = get_logger("intmatrix.matrix")
        logger.debug(f"determinant method={method} size={self.height} modulus={modulus}")
        if method == "bareiss":
            det = determinant_bareiss(self.value)
        else:
            det = cofactor_determinant(self.value, RowCol(self.height).init())
        return mod(det, modulus)

    def inverse(self, modulus: Optional[int] = None) -> "Matrix":
        """
        Replace the matrix with its inverse, det^-1 * adj(A).

        Without a modulus the inverse is integral only when det is 1 or -1. With a
        modulus it exists when det is coprime to the modulus.
        """
        if not self.is_square:
            raise NotSquareError(f"Only square matrices can be inverted, got {self.size}")
        check_modulus(modulus)
        logger = get_logger("intmatrix.matrix")
        det = cofactor_determinant(self.value, RowCol(self.height).init())
        if modulus is None:
            if det not in (1, -1):
                raise NotInvertibleError(f"Determinant {det} is not a unit, matrix has no integer inverse")
            factor = det
        else:
            if gcd(det, modulus) != 1:
                raise NotInvertibleError(f"Determinant {det} is not invertible modulo {modulus}")
            factor = pow(mod(det, modulus), -1, modulus)
        logger.debug(f"inverse size={self.height} det={det} modulus={modulus}")
        self.value = adjugate(self.value)
        return self.transform(lambda v, i, j: mod(v * factor, modulus))

    def __iter__(self) -> Iterator[List[int]]:
        for row in self.value:
            yield row.tolist()

    def __eq__(self, other) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.size == other.size and self.to_array() == other.to_array()

    def __str__(self) -> str:
        return "\n".join(" ".join(str(v) for v in row) for row in self.value)

    def __repr__(self) -> str:
        return f"Matrix({self.to_array()!r})"


class ModularMatrix(Matrix):
    def __init__(self, grid: Sequence[Sequence[int]], modulus: int):
        if modulus is None:
            raise InvalidModulus("ModularMatrix requires a modulus")
        check_modulus(modulus)
        self._modulus = modulus
        super().__init__(grid, modulus)

    @property
    def modulus(self) -> int:
        return self._modulus

    def clone(self) -> "ModularMatrix":
        return ModularMatrix(self.value, self.modulus)

    def set(self, i: int, j: int, v: int) -> "ModularMatrix":
        return super().set(i, j, v, self.modulus)

    def insert_row(self, row: Sequence[int], position: Optional[int] = None) -> "ModularMatrix":
        return super().insert_row(row, position, self.modulus)

    def transform(self, transformer: Transformer) -> "ModularMatrix":
        return super().transform(lambda v, i, j: mod(operator.index(transformer(v, i, j)), self.modulus))

    def add(self, m2: Matrix) -> "ModularMatrix":
        return super().add(m2, self.modulus)

    def scalar(self, n: int) -> "ModularMatrix":
        return super().scalar(n, self.modulus)

    def product(self, m2: Matrix) -> "ModularMatrix":
        return super().product(m2, self.modulus)

    def determinant(self, method: str = "cofactor") -> int:
        return super().determinant(self.modulus, method)

    def inverse(self) -> "ModularMatrix":
        return super().inverse(self.modulus)

    def __repr__(self) -> str:
        return f"ModularMatrix({self.to_array()!r}, {self.modulus})"
