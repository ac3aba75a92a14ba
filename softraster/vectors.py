"""Small immutable 2D and 3D vectors plus random helpers."""

from __future__ import annotations

import random
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Float2:
    """A two-component vector."""

    x: float
    y: float

    def __add__(self, other: Float2) -> Float2:
        return Float2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Float2) -> Float2:
        return Float2(self.x - other.x, self.y - other.y)

    def dot(self, other: Float2) -> float:
        """Dot product with another vector."""
        return self.x * other.x + self.y * other.y

    def scale(self, factor: float) -> Float2:
        """Multiply every component by ``factor``."""
        return Float2(self.x * factor, self.y * factor)


@dataclass(frozen=True, slots=True)
class Float3:
    """A three-component vector, also used for RGB colours."""

    x: float
    y: float
    z: float

    def __add__(self, other: Float3) -> Float3:
        return Float3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Float3) -> Float3:
        return Float3(self.x - other.x, self.y - other.y, self.z - other.z)

    def dot(self, other: Float3) -> float:
        """Dot product with another vector."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def scale(self, factor: float) -> Float3:
        """Multiply every component by ``factor``."""
        return Float3(self.x * factor, self.y * factor, self.z * factor)

    def truncate(self) -> Float2:
        """Drop the z component."""
        return Float2(self.x, self.y)


def rand_range(low: float, high: float) -> float:
    """Return a random float between ``low`` and ``high`` inclusive."""
    return low + random.random() * (high - low)


def random2(low: float, high: float) -> Float2:
    """Return a vector whose components are each drawn from ``rand_range``."""
    return Float2(rand_range(low, high), rand_range(low, high))


def random3(low: float, high: float) -> Float3:
    """Return a vector whose components are each drawn from ``rand_range``."""
    return Float3(rand_range(low, high), rand_range(low, high), rand_range(low, high))