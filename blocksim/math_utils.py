"""Centralized math utilities for the simulation.

This module provides pure Python mathematical utilities for the simulation,
including a Vector3 implementation for 3D vector operations and the
rounding helpers that map continuous positions onto tile coordinates.
"""

from __future__ import annotations

import math
from typing import Iterator, Tuple

Coord = Tuple[int, int, int]


class Vector3:
    """A 3D vector class for mathematical operations."""

    __slots__ = ("x", "y", "z")

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0) -> None:
        self.x: float = float(x)
        self.y: float = float(y)
        self.z: float = float(z)

    def __add__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> "Vector3":
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    def __rmul__(self, scalar: float) -> "Vector3":
        return self.__mul__(scalar)

    def __neg__(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def normalize(self) -> "Vector3":
        length = self.length()
        if length == 0:
            return Vector3(0, 0, 0)
        return Vector3(self.x / length, self.y / length, self.z / length)

    def dot(self, other: "Vector3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vector3") -> "Vector3":
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def distance_to(self, other: "Vector3") -> float:
        return (self - other).length()

    def is_zero(self) -> bool:
        """Exact zero test (no tolerance)."""
        return self.x == 0.0 and self.y == 0.0 and self.z == 0.0

    def clamped(self, low: float, high: float) -> "Vector3":
        """Return a copy with every component clamped to [low, high]."""
        return Vector3(
            min(max(self.x, low), high),
            min(max(self.y, low), high),
            min(max(self.z, low), high),
        )

    def copy(self) -> "Vector3":
        """Return a copy of this vector."""
        return Vector3(self.x, self.y, self.z)

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def __eq__(self, other: object) -> bool:
        """Check if two vectors are equal."""
        if other.__class__ is not Vector3:
            return False
        return (
            abs(self.x - other.x) < 1e-9
            and abs(self.y - other.y) < 1e-9
            and abs(self.z - other.z) < 1e-9
        )

    def __ne__(self, other: object) -> bool:
        """Check if two vectors are not equal."""
        return not self.__eq__(other)

    def __repr__(self) -> str:
        return f"Vector3({self.x}, {self.y}, {self.z})"


def round_half_away(value: float) -> int:
    """Round to the nearest integer, ties away from zero.

    Python's built-in ``round`` uses banker's rounding (``round(0.5) == 0``),
    which would put an entity at +0.5 on a different tile than one at -0.5.

    Example:
        >>> round_half_away(0.5), round_half_away(-0.5), round_half_away(1.49)
        (1, -1, 1)
    """
    magnitude = abs(value)
    whole = math.floor(magnitude)
    # Compare the fraction instead of adding 0.5; the sum can round up in floating point
    if magnitude - whole >= 0.5:
        whole += 1
    return int(math.copysign(whole, value))


def to_tile_coord(point: Vector3) -> Coord:
    """Map a continuous position to the coordinate of the tile containing it."""
    return (round_half_away(point.x), round_half_away(point.y), round_half_away(point.z))


__all__ = ["Coord", "Vector3", "round_half_away", "to_tile_coord"]
