"""Two-component vectors, plus the shared machinery for all vector sizes."""

from __future__ import annotations

import math
import struct
from numbers import Real
from typing import Iterable, Iterator

from .angle import EPSILON, Radian

_UINT32_SPAN = 1 << 32
_INT32_OFFSET = 1 << 31


def _as_number(value):
    """Check that a component is a real number and return it unchanged."""
    if not isinstance(value, Real):
        raise TypeError(
            f"vector components must be real numbers, not {type(value).__name__}"
        )
    return value


def _to_float32(value) -> float:
    """Round a number to the nearest single-precision value."""
    value = float(value)
    if math.isnan(value) or math.isinf(value):
        return value
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def _to_int32(value) -> int:
    """Truncate towards zero and wrap into the signed 32-bit range."""
    return (int(value) + _INT32_OFFSET) % _UINT32_SPAN - _INT32_OFFSET


def _to_uint32(value) -> int:
    """Truncate towards zero and wrap into the unsigned 32-bit range."""
    return int(value) % _UINT32_SPAN


def _divide(a, b, integral: bool):
    """Divide with truncation for integers and IEEE rules for floats."""
    if integral:
        if b == 0:
            raise ZeroDivisionError("integer division by zero")
        quotient = abs(a) // abs(b)
        return quotient if (a < 0) == (b < 0) else -quotient
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


class _Vector:
    """Component-wise behaviour shared by vectors of every size."""

    __slots__ = ()
    _fields: tuple[str, ...] = ()
    _family: type
    _convert = staticmethod(_as_number)
    _integral = False

    def __init_subclass__(cls, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        if "_fields" in cls.__dict__:
            cls._family = cls

    def _assign(self, values: Iterable) -> None:
        for name, value in zip(self._fields, values, strict=True):
            setattr(self, name, self._convert(value))

    @classmethod
    def _from_vector(cls, other):
        return cls(*(getattr(other, name) for name in cls._fields))

    @classmethod
    def _zero(cls):
        return cls(*(0 for _ in cls._fields))

    @classmethod
    def _require_floating(cls, operation: str) -> None:
        if cls._integral:
            raise TypeError(f"{operation} requires a floating-point vector")

    @classmethod
    def _cos_sin(cls, angle: Radian, operation: str) -> tuple[float, float]:
        cls._require_floating(operation)
        radians = float(angle)
        return math.cos(radians), math.sin(radians)

    def __iter__(self) -> Iterator:
        return (getattr(self, name) for name in self._fields)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(map(repr, self))})"

    __hash__ = None

    def _operands(self, other):
        """Pair each component with its counterpart, or None if unsupported."""
        if isinstance(other, self._family):
            return zip(self, other)
        if isinstance(other, Real):
            t = self._convert(other)
            return ((a, t) for a in self)
        return None

    def _plus(self, other):
        if not isinstance(other, self._family):
            return NotImplemented
        return type(self)(*(a + b for a, b in zip(self, other)))

    def _minus(self, other):
        if not isinstance(other, self._family):
            return NotImplemented
        return type(self)(*(a - b for a, b in zip(self, other)))

    def _times(self, other):
        pairs = self._operands(other)
        if pairs is None:
            return NotImplemented
        return type(self)(*(a * b for a, b in pairs))

    def _rtimes(self, other):
        if isinstance(other, Real):
            return self._times(other)
        return NotImplemented

    def _divided_by(self, other):
        pairs = self._operands(other)
        if pairs is None:
            return NotImplemented
        return type(self)(*(_divide(a, b, self._integral) for a, b in pairs))

    def _equals(self, other):
        if not isinstance(other, self._family):
            return NotImplemented
        return tuple(self) == tuple(other)

    def _dot(self, other):
        return self._convert(sum(a * b for a, b in zip(self, other)))

    def _magnitude_sqr(self):
        self._require_floating("magnitude_sqr")
        return self._dot(self)

    def _magnitude(self):
        self._require_floating("magnitude")
        return self._convert(math.sqrt(self._magnitude_sqr()))

    def _normalized(self):
        length = self._magnitude()
        if length == 0:
            return self._zero()
        return self._divided_by(length)

    @classmethod
    def _lerp(cls, v0, v1, t: float):
        cls._require_floating("lerp")
        return cls(*(a * (1 - t) + b * t for a, b in zip(v0, v1)))

    @classmethod
    def _projection(cls, v, onto):
        dot_vv = onto._dot(onto)
        if dot_vv == 0:
            return cls._zero()
        factor = cls._convert(_divide(v._dot(onto), dot_vv, cls._integral))
        return cls(*(component * factor for component in onto))

    @classmethod
    def _reflection(cls, v, normal):
        factor = cls._convert(2 * v._dot(normal))
        return cls(*(a - n * factor for a, n in zip(v, normal)))


class _SphericalInterpolation:
    """Spherical interpolation for vector families that support it."""

    __slots__ = ()

    @classmethod
    def _slerp(cls, v0, v1, t: float):
        cls._require_floating("slerp")
        dot = min(1.0, max(-1.0, v0._dot(v1)))
        theta = math.acos(dot)
        sin_theta = math.sin(theta)
        if sin_theta < EPSILON:
            return cls._lerp(v0, v1, t)
        w0 = math.sin((1 - t) * theta) / sin_theta
        w1 = math.sin(t * theta) / sin_theta
        return cls(*(a * w0 + b * w1 for a, b in zip(v0, v1)))


class _Float32:
    __slots__ = ()
    _convert = staticmethod(_to_float32)
    _integral = False


class _Int32:
    __slots__ = ()
    _convert = staticmethod(_to_int32)
    _integral = True


class _UInt32:
    __slots__ = ()
    _convert = staticmethod(_to_uint32)
    _integral = True


class Vec2(_SphericalInterpolation, _Vector):
    """A two-component vector; subclasses fix the component type."""

    __slots__ = ("x", "y")
    _fields = ("x", "y")

    def __init__(self, x=0, y=0) -> None:
        self._assign((x, y))

    @classmethod
    def from_vector(cls, other):
        """Build a vector from any object with x and y attributes."""
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

    def __iadd__(self, other):
        if not isinstance(other, Vec2):
            return NotImplemented
        self._assign(a + b for a, b in zip(self, other))
        return self

    def __isub__(self, other):
        if not isinstance(other, Vec2):
            return NotImplemented
        self._assign(a - b for a, b in zip(self, other))
        return self

    def __imul__(self, other):
        if not isinstance(other, Real):
            return NotImplemented
        t = self._convert(other)
        self._assign(a * t for a in self)
        return self

    def dot(self, other):
        """Scalar product with another vector."""
        return self._dot(other)

    def cross(self, other: Vec2) -> Vec2:
        """Component-wise two-dimensional cross term."""
        return type(self)(
            self.y * other.x - self.x * other.y,
            self.x * other.y - self.y * other.x,
        )

    def magnitude_sqr(self):
        return self._magnitude_sqr()

    def magnitude(self):
        return self._magnitude()

    def normalize(self):
        """Unit vector in the same direction, or zero for the zero vector."""
        return self._normalized()

    def rotate(self, angle: Radian) -> Vec2:
        """Rotate counter-clockwise by the given angle."""
        c, s = self._cos_sin(angle, "rotate")
        return type(self)(self.x * c - self.y * s, self.x * s + self.y * c)

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

    def perpendicular_clockwise(self) -> Vec2:
        return type(self)(self.y, -self.x)

    def perpendicular_counter_clockwise(self) -> Vec2:
        return type(self)(-self.y, self.x)


class Vec2F(_Float32, Vec2):
    """Vector of single-precision floats."""

    __slots__ = ()


class Vec2I(_Int32, Vec2):
    """Vector of signed 32-bit integers."""

    __slots__ = ()


class Vec2U(_UInt32, Vec2):
    """Vector of unsigned 32-bit integers."""

    __slots__ = ()