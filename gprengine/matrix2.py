"""Two-by-two matrices, plus the row-based machinery shared by square matrices."""

from __future__ import annotations

from typing import Iterable, Iterator

from .vec2 import _divide


class _SquareMatrix:
    """Row-stored square matrix; subclasses fix the size and determinant."""

    __slots__ = ("_rows",)
    _size = 0

    def _set_rows(self, rows: Iterable) -> None:
        self._rows = [self._row(values) for values in rows]

    @classmethod
    def _row(cls, values: Iterable | None) -> list:
        if values is None:
            return [0] * cls._size
        row = list(values)
        if len(row) != cls._size:
            raise ValueError(
                f"a {cls.__name__} row needs {cls._size} components, got {len(row)}"
            )
        return row

    def _check_index(self, index) -> tuple[int, int]:
        name = type(self).__name__
        try:
            i, j = index
        except (TypeError, ValueError):
            raise TypeError(f"{name} indices must be a (row, column) pair") from None
        if not (isinstance(i, int) and isinstance(j, int)):
            raise TypeError(f"{name} indices must be integers")
        if not (0 <= i < self._size and 0 <= j < self._size):
            raise IndexError(f"{name} index out of range")
        return i, j

    @classmethod
    def _identity(cls):
        return cls(
            *((1 if i == j else 0 for j in range(cls._size)) for i in range(cls._size))
        )

    def _is_integral(self) -> bool:
        return all(isinstance(v, int) for row in self._rows for v in row)

    def _divided(self, rows: Iterable, det):
        """A matrix of the given rows with every element divided by det."""
        integral = self._is_integral()
        return type(self)(*([_divide(v, det, integral) for v in row] for row in rows))

    def _require_invertible(self):
        det = self.determinant()
        if det == 0:
            raise ValueError("Matrix not invertible (determinant = 0)")
        return det

    def __iter__(self) -> Iterator[tuple]:
        return (tuple(row) for row in self._rows)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(map(repr, self._rows))})"

    def __eq__(self, other):
        if not isinstance(other, type(self)):
            return NotImplemented
        return self._rows == other._rows

    __hash__ = None

    def _transposed(self):
        return type(self)(*zip(*self._rows))

    def _get(self, index):
        i, j = self._check_index(index)
        return self._rows[i][j]

    def _set(self, index, value) -> None:
        i, j = self._check_index(index)
        self._rows[i][j] = value

    def _elementwise(self, other, operation):
        if not isinstance(other, type(self)):
            return NotImplemented
        return type(self)(
            *(
                [operation(a, b) for a, b in zip(mine, theirs)]
                for mine, theirs in zip(self._rows, other._rows)
            )
        )

    def _product(self, other):
        if not isinstance(other, type(self)):
            return NotImplemented
        columns = list(zip(*other._rows))
        return type(self)(
            *(
                [sum(a * b for a, b in zip(row, column)) for column in columns]
                for row in self._rows
            )
        )


class Matrix2(_SquareMatrix):
    """A 2x2 matrix; rows may be given as Vec2 or any pair of numbers."""

    __slots__ = ()
    _size = 2

    def __init__(self, row0=None, row1=None) -> None:
        self._set_rows((row0, row1))

    @classmethod
    def identity(cls) -> Matrix2:
        return cls._identity()

    def determinant(self):
        (a, b), (c, d) = self._rows
        return a * d - b * c

    def transpose(self) -> Matrix2:
        return self._transposed()

    def inverse(self) -> Matrix2:
        """Inverse matrix; raises ValueError when the determinant is zero."""
        det = self._require_invertible()
        (a, b), (c, d) = self._rows
        return self._divided(((d, -b), (-c, a)), det)

    def __getitem__(self, index):
        return self._get(index)

    def __setitem__(self, index, value) -> None:
        self._set(index, value)

    def __add__(self, other):
        return self._elementwise(other, lambda a, b: a + b)

    def __sub__(self, other):
        return self._elementwise(other, lambda a, b: a - b)

    def __mul__(self, other):
        return self._product(other)