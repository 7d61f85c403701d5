"""Tuple vector arithmetic backing the allocating smoothing form."""
from __future__ import annotations

import math

from glide.types import Vec


def add(a: Vec, b: Vec) -> Vec:
    return tuple(ai + bi for ai, bi in zip(a, b, strict=True))


def sub(a: Vec, b: Vec) -> Vec:
    return tuple(ai - bi for ai, bi in zip(a, b, strict=True))


def scale(v: Vec, s: float) -> Vec:
    return tuple(vi * s for vi in v)


def dot(a: Vec, b: Vec) -> float:
    return sum(ai * bi for ai, bi in zip(a, b, strict=True))


def magnitude_sq(v: Vec) -> float:
    return sum(vi * vi for vi in v)


def zero(dimensions: int) -> Vec:
    return (0.0,) * dimensions


def clamp_magnitude(v: Vec, max_mag: float) -> Vec:
    """Shorten ``v`` to ``max_mag`` if longer, keeping its direction."""
    sq = magnitude_sq(v)
    if sq <= max_mag * max_mag:
        return v
    mag = math.sqrt(sq)
    return tuple(vi / mag * max_mag for vi in v)
