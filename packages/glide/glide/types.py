"""Value types shared by the interpolation and smoothing helpers."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

Vec = tuple[float, ...]
EasingFunction = Callable[[float], float]


@dataclass
class Vector2:
    """Mutable 2D vector used as caller-owned output and velocity storage."""

    x: float = 0.0
    y: float = 0.0

    def set(self, x: float, y: float) -> Vector2:
        self.x = x
        self.y = y
        return self

    def set_vector(self, other: Vector2) -> Vector2:
        return self.set(other.x, other.y)

    def copy(self) -> Vector2:
        return Vector2(self.x, self.y)

    def as_tuple(self) -> Vec:
        return (self.x, self.y)


@dataclass
class Color:
    """RGBA color with independent float channels."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 1.0

    def set(self, r: float, g: float, b: float, a: float) -> Color:
        self.r = r
        self.g = g
        self.b = b
        self.a = a
        return self

    def copy(self) -> Color:
        return Color(self.r, self.g, self.b, self.a)

    def as_tuple(self) -> Vec:
        return (self.r, self.g, self.b, self.a)


@dataclass
class Ref:
    """Mutable scalar cell. Holds smoothing velocity between frames."""

    value: float = 0.0
