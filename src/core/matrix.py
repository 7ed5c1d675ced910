# core/matrix.py
from typing import NamedTuple, Optional, Sequence
import numpy as np
from core.utils import EPSILON
from core.vector import Vector4
from core.ray import Ray


class Invertibility(NamedTuple):
    is_invertible: bool
    determinant: float


class Matrix:
    """
    A square matrix stored in a 4x4 float32 grid.

    The dimension tag lets the same storage hold the 2x2 and 3x3 matrices
    that show up while expanding cofactors; only the upper-left
    dimension x dimension block is meaningful. A matrix built without data is
    the identity.
    """
    __slots__ = ('m', 'dimension')

    def __init__(self, data: Optional[Sequence[Sequence[float]]] = None, dimension: int = 4):
        if dimension not in (2, 3, 4):
            raise ValueError(f"Unsupported matrix dimension: {dimension}")
        self.dimension = dimension
        self.m = np.zeros((4, 4), dtype=np.float32)
        if data is None:
            self.m[:dimension, :dimension] = np.identity(dimension, dtype=np.float32)
        else:
            block = np.asarray([list(row)[:dimension] for row in data], dtype=np.float32)
            if block.shape != (dimension, dimension):
                raise ValueError(f"Expected {dimension}x{dimension} values, got {block.shape}")
            self.m[:dimension, :dimension] = block

    @classmethod
    def zeros(cls, dimension: int = 4) -> "Matrix":
        return cls([[0.0] * dimension] * dimension, dimension)

    def get(self, row: int, col: int) -> float:
        return float(self.m[row, col])

    def set(self, row: int, col: int, value: float) -> None:
        self.m[row, col] = value

    def rows(self):
        """Returns the meaningful block as nested lists of floats."""
        d = self.dimension
        return self.m[:d, :d].tolist()

    def __eq__(self, other) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.dimension != other.dimension:
            return False
        d = self.dimension
        return bool(np.all(np.abs(self.m[:d, :d] - other.m[:d, :d]) < EPSILON))

    __hash__ = None

    def __mul__(self, other):
        if isinstance(other, Matrix):
            out = Matrix(dimension=self.dimension)
            d = self.dimension
            out.m[:d, :d] = self.m[:d, :d] @ other.m[:d, :d]
            return out
        if isinstance(other, Vector4):
            x, y, z, w = (self.m @ np.array((other.x, other.y, other.z, other.w), dtype=np.float32)).tolist()
            return Vector4(x, y, z, w)
        if isinstance(other, Ray):
            return Ray(self * other.origin, self * other.direction)
        return NotImplemented

    def transpose(self) -> "Matrix":
        out = Matrix(dimension=self.dimension)
        d = self.dimension
        out.m[:d, :d] = self.m[:d, :d].T
        return out

    def submatrix(self, remove_row: int, remove_col: int) -> "Matrix":
        """
        Removes one row and one column, producing a matrix one dimension smaller.
        """
        if self.dimension == 2:
            raise ValueError("A 2x2 matrix has no submatrix")
        d = self.dimension
        block = np.delete(np.delete(self.m[:d, :d], remove_row, axis=0), remove_col, axis=1)
        return Matrix(block.tolist(), d - 1)

    def minor(self, remove_row: int, remove_col: int) -> float:
        return self.submatrix(remove_row, remove_col).determinant()

    def cofactor(self, remove_row: int, remove_col: int) -> float:
        minor = self.minor(remove_row, remove_col)
        return -minor if (remove_row + remove_col) % 2 else minor

    def determinant(self) -> float:
        """
        2x2 directly, larger matrices by cofactor expansion along the first row.
        """
        if self.dimension == 2:
            a, b = self.get(0, 0), self.get(0, 1)
            c, d = self.get(1, 0), self.get(1, 1)
            return a * d - b * c
        return sum(self.get(0, col) * self.cofactor(0, col) for col in range(self.dimension))

    def is_invertible(self) -> Invertibility:
        det = self.determinant()
        return Invertibility(abs(det) > EPSILON, det)

    def inverse(self) -> "Matrix":
        """
        Calculates the inverse from the cofactors. When the matrix is not
        invertible the zero matrix is returned instead.
        """
        invertible, det = self.is_invertible()
        if not invertible:
            return Matrix.zeros(self.dimension)
        d = self.dimension
        out = Matrix.zeros(d)
        for row in range(d):
            for col in range(d):
                # Swapped indices give the transposed cofactor matrix directly.
                out.m[row, col] = self.cofactor(col, row) / det
        return out

    def __repr__(self) -> str:
        body = ", ".join(str([round(v, 5) for v in row]) for row in self.rows())
        return f"Matrix{self.dimension}([{body}])"


def identity() -> Matrix:
    return Matrix()


def matrix22(r0, r1) -> Matrix:
    return Matrix([r0, r1], 2)


def matrix33(r0, r1, r2) -> Matrix:
    return Matrix([r0, r1, r2], 3)


def matrix44(r0, r1, r2, r3) -> Matrix:
    return Matrix([r0, r1, r2, r3], 4)
