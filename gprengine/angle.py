"""Angle units and shared numeric constants."""

from __future__ import annotations

import math

EPSILON = 1e-6
PI = math.pi


class Radian:
    """An angle measured in radians."""

    __slots__ = ("_value",)

    def __init__(self, value: float) -> None:
        self._value = float(value)

    @classmethod
    def from_degree(cls, degree: Degree) -> Radian:
        """Convert an angle in degrees to radians."""
        return cls(degree.value * PI / 180.0)

    def __float__(self) -> float:
        return self._value

    @property
    def value(self) -> float:
        return self._value

    def __repr__(self) -> str:
        return f"Radian({self._value!r})"


class Degree:
    """An angle measured in degrees."""

    __slots__ = ("_value",)

    def __init__(self, value: float) -> None:
        self._value = float(value)

    @classmethod
    def from_radian(cls, radian: Radian) -> Degree:
        """Convert an angle in radians to degrees."""
        return cls(radian.value * 180.0 / PI)

    def __float__(self) -> float:
        return self._value

    @property
    def value(self) -> float:
        return self._value

    def __repr__(self) -> str:
        return f"Degree({self._value!r})"