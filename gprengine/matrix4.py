"""Four-by-four matrices."""

from __future__ import annotations

from numbers import Real
from typing import Iterator

from .vec2 import _divide

_SIZE = 4

_IDENTITY = ((1, 0, 0, 0), (0, 1, 0, 0), (0, 0, 1, 0), (0, 0, 0, 1))


def _det3(m) -> object:
    return (
        m[0][0] * (m[1][1] * m[2][2] - m[1][2] * m[2][1])
        - m[0][1] * (m[1][0] * m[2][2] - m[1][2] * m[2][0])
        + m[0][2] * (m[1][0] * m[2][1] - m[1][1] * m[2][0])
    )


def _sign(i: int) -> int:
    return 1 if i % 2 == 0 else -1


class Matrix4:
    """A 4x4 matrix; with no values it is the identity."""

    __slots__ = ("_m",)

    def __init__(self, values=None) -> None:
        if values is None:
            values = _IDENTITY
        rows = [tuple(row) for row in values]
        if len(rows) != _SIZE or any(len(row) != _SIZE for row in rows):
            raise ValueError("Matrix4 needs 4 rows of 4 values")
        self._m = tuple(rows)

    @classmethod
    def identity(cls) -> Matrix4:
        return cls(_IDENTITY)

    def _is_integral(self) -> bool:
        return all(isinstance(v, int) for row in self._m for v in row)

    def rows(self) -> tuple[tuple, ...]:
        """The matrix as a tuple of row tuples."""
        return self._m

    def __iter__(self) -> Iterator[tuple]:
        return iter(self._m)

    def __repr__(self) -> str:
        return f"Matrix4({[list(row) for row in self._m]!r})"

    def __eq__(self, other):
        if not isinstance(other, Matrix4):
            return NotImplemented
        return self._m == other._m

    __hash__ = None

    def __getitem__(self, index):
        try:
            i, j = index
        except (TypeError, ValueError):
            raise TypeError("Matrix4 indices must be a (row, column) pair") from None
        if not (0 <= i < _SIZE and 0 <= j < _SIZE):
            raise IndexError("Matrix4 index out of range")
        return self._m[i][j]

    def _minor(self, i: int, j: int) -> list:
        return [
            [v for c, v in enumerate(row) if c != j]
            for r, row in enumerate(self._m)
            if r != i
        ]

    def determinant(self):
        """Determinant by cofactor expansion along the first row."""
        return sum(
            _sign(col) * value * _det3(self._minor(0, col))
            for col, value in enumerate(self._m[0])
        )

    def transpose(self) -> Matrix4:
        return Matrix4(zip(*self._m))

    def inverse(self) -> Matrix4:
        """Inverse matrix; raises ValueError when the determinant is zero."""
        det = self.determinant()
        if det == 0:
            raise ValueError("Matrix not invertible (determinant = 0)")
        integral = self._is_integral()
        # Element (j, i) of the result is the cofactor (i, j) over det.
        return Matrix4(
            [
                _divide(_sign(i + j) * _det3(self._minor(i, j)), det, integral)
                for i in range(_SIZE)
            ]
            for j in range(_SIZE)
        )

    def __add__(self, other):
        if not isinstance(other, Matrix4):
            return NotImplemented
        return Matrix4(
            [a + b for a, b in zip(mine, theirs)]
            for mine, theirs in zip(self._m, other._m)
        )

    def __sub__(self, other):
        if not isinstance(other, Matrix4):
            return NotImplemented
        return Matrix4(
            [a - b for a, b in zip(mine, theirs)]
            for mine, theirs in zip(self._m, other._m)
        )

    def __mul__(self, other):
        if isinstance(other, Matrix4):
            columns = list(zip(*other._m))
            return Matrix4(
                [sum(a * b for a, b in zip(row, column)) for column in columns]
                for row in self._m
            )
        if isinstance(other, Real):
            return Matrix4([v * other for v in row] for row in self._m)
        return NotImplemented

    def __truediv__(self, scalar):
        if not isinstance(scalar, Real):
            return NotImplemented
        if scalar == 0:
            raise ZeroDivisionError("Division by zero in Matrix4 division")
        integral = self._is_integral() and isinstance(scalar, int)
        return Matrix4([_divide(v, scalar, integral) for v in row] for row in self._m)