"""Three-component vectors with float, signed and unsigned component types."""

from __future__ import annotations

from .angle import Radian
from .vec2 import _Float32, _Int32, _SphericalInterpolation, _UInt32, _Vector


class Vec3(_SphericalInterpolation, _Vector):
    """A three-component vector; subclasses fix the component type."""

    __slots__ = ("x", "y", "z")
    _fields = ("x", "y", "z")

    def __init__(self, x=0, y=0, z=0) -> None:
        self._assign((x, y, z))

    @classmethod
    def from_vector(cls, other):
        """Build a vector from any object with x, y and z attributes."""
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

    def cross(self, other: Vec3) -> Vec3:
        """Vector product with another vector."""
        return type(self)(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def magnitude_sqr(self):
        return self._magnitude_sqr()

    def magnitude(self):
        return self._magnitude()

    def normalize(self):
        """Unit vector in the same direction, or zero for the zero vector."""
        return self._normalized()

    def pitch(self, angle: Radian) -> Vec3:
        """Rotate about the x axis."""
        c, s = self._cos_sin(angle, "pitch")
        return type(self)(self.x, self.y * c - self.z * s, self.y * s + self.z * c)

    def yaw(self, angle: Radian) -> Vec3:
        """Rotate about the y axis."""
        c, s = self._cos_sin(angle, "yaw")
        return type(self)(self.x * c + s * self.z, self.y, -self.x * s + self.z * c)

    def roll(self, angle: Radian) -> Vec3:
        """Rotate about the z axis."""
        c, s = self._cos_sin(angle, "roll")
        return type(self)(self.x * c - self.y * s, self.x * s + self.y * c, self.z)

    @classmethod
    def lerp(cls, v0, v1, t):
        return cls._lerp(v0, v1, t)

    @classmethod
    def slerp(cls, v0, v1, t):
        """Spherical interpolation; falls back to lerp for parallel vectors."""
        return cls._slerp(v0, v1, t)

    @classmethod
    def projection(cls, v, onto):
        return cls._projection(v, onto)

    @classmethod
    def reflection(cls, v, normal):
        return cls._reflection(v, normal)


class Vec3F(_Float32, Vec3):
    """Vector of single-precision floats."""

    __slots__ = ()


class Vec3I(_Int32, Vec3):
    """Vector of signed 32-bit integers."""

    __slots__ = ()


class Vec3U(_UInt32, Vec3):
    """Vector of unsigned 32-bit integers."""

    __slots__ = ()