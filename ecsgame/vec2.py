"""Two-dimensional float vector used for positions, velocities and sizes."""

from __future__ import annotations

import math
from typing import Iterator


class Vec2:
    """A mutable 2D vector supporting arithmetic and in-place updates."""

    __slots__ = ("x", "y")

    def __init__(self, x: float = 0.0, y: float = 0.0) -> None:
        self.x = float(x)
        self.y = float(y)

    def __repr__(self) -> str:
        return f"Vec2({self.x!r}, {self.y!r})"

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vec2):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    __hash__ = None  # mutable, so not hashable

    def __add__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, value: float) -> Vec2:
        if not isinstance(value, (int, float)):
            return NotImplemented
        return Vec2(self.x * value, self.y * value)

    __rmul__ = __mul__

    def __truediv__(self, value: float) -> Vec2:
        if not isinstance(value, (int, float)):
            return NotImplemented
        return Vec2(self.x / value, self.y / value)

    def __iadd__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        self.x += other.x
        self.y += other.y
        return self

    def __isub__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        self.x -= other.x
        self.y -= other.y
        return self

    def __imul__(self, value: float) -> Vec2:
        if not isinstance(value, (int, float)):
            return NotImplemented
        self.x *= value
        self.y *= value
        return self

    def __itruediv__(self, value: float) -> Vec2:
        if not isinstance(value, (int, float)):
            return NotImplemented
        self.x /= value
        self.y /= value
        return self

    def copy(self) -> Vec2:
        """Return an independent copy of this vector."""
        return Vec2(self.x, self.y)

    def dist(self, other: Vec2) -> float:
        """Euclidean distance between this vector and ``other``."""
        return math.hypot(self.x - other.x, self.y - other.y)

    def length(self) -> float:
        """Length of the vector."""
        return math.hypot(self.x, self.y)

    def normalize(self) -> Vec2:
        """Return a unit vector in the same direction; the zero vector stays zero."""
        length = self.length()
        if length == 0:
            return Vec2()
        return Vec2(self.x / length, self.y / length)