"""Four-component vectors with float, signed and unsigned component types."""

from __future__ import annotations

from .vec2 import _Float32, _Int32, _UInt32, _Vector


class Vec4(_Vector):
    """A four-component vector; subclasses fix the component type."""

    __slots__ = ("x", "y", "z", "w")
    _fields = ("x", "y", "z", "w")

    def __init__(self, x=0, y=0, z=0, w=0) -> None:
        self._assign((x, y, z, w))

    @classmethod
    def from_vector(cls, other):
        """Build a vector from any object with x, y, z and w attributes."""
        return cls._from_vector(other)

    def __add__(self, other):
        return self._plus(other)

    def __sub__(self, other):
        return self._minus(other)

    def __mul__(self, other):
        return self._times(other)

    def __rmul__(self, other):
        return self._rtimes(other)

    def __truediv__(self, other):
        return self._divided_by(other)

    def __eq__(self, other):
        return self._equals(other)

    __hash__ = None

    def dot(self, other):
        """Scalar product with another vector."""
        return self._dot(other)

    def magnitude_sqr(self):
        return self._magnitude_sqr()

    def magnitude(self):
        return self._magnitude()

    def normalize(self):
        """Unit vector in the same direction, or zero for the zero vector."""
        return self._normalized()

    @classmethod
    def lerp(cls, v0, v1, t):
        return cls._lerp(v0, v1, t)

    @classmethod
    def projection(cls, v, onto):
        return cls._projection(v, onto)

    @classmethod
    def reflection(cls, v, normal):
        return cls._reflection(v, normal)


class Vec4F(_Float32, Vec4):
    """Vector of single-precision floats."""

    __slots__ = ()


class Vec4I(_Int32, Vec4):
    """Vector of signed 32-bit integers."""

    __slots__ = ()


class Vec4U(_UInt32, Vec4):
    """Vector of unsigned 32-bit integers."""

    __slots__ = ()