"""Three-by-three matrices stored as three rows."""

from __future__ import annotations

from .matrix2 import Matrix2, _SquareMatrix


def _cross(u, v) -> tuple:
    return (
        u[1] * v[2] - u[2] * v[1],
        u[2] * v[0] - u[0] * v[2],
        u[0] * v[1] - u[1] * v[0],
    )


class Matrix3(_SquareMatrix):
    """A 3x3 matrix; rows may be given as Vec3 or any triple of numbers."""

    __slots__ = ()
    _size = 3

    def __init__(self, row0=None, row1=None, row2=None) -> None:
        self._set_rows((row0, row1, row2))

    @classmethod
    def from_array(cls, values) -> Matrix3:
        """Build a matrix from three rows of three numbers."""
        rows = list(values)
        if len(rows) != cls._size:
            raise ValueError(f"Matrix3 needs {cls._size} rows, got {len(rows)}")
        return cls(*rows)

    @classmethod
    def identity(cls) -> Matrix3:
        return cls._identity()

    def determinant(self):
        row0, row1, row2 = self._rows
        return sum(a * b for a, b in zip(row0, _cross(row1, row2)))

    def transpose(self) -> Matrix3:
        return self._transposed()

    def _minor(self, i: int, j: int) -> Matrix2:
        return Matrix2(
            *(
                [v for c, v in enumerate(row) if c != j]
                for r, row in enumerate(self._rows)
                if r != i
            )
        )

    def inverse(self) -> Matrix3:
        """Inverse matrix; raises ValueError when the determinant is zero."""
        det = self._require_invertible()
        cofactors = Matrix3(
            *(
                [
                    (1 if (i + j) % 2 == 0 else -1) * self._minor(i, j).determinant()
                    for j in range(self._size)
                ]
                for i in range(self._size)
            )
        )
        return self._divided(cofactors.transpose(), det)

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