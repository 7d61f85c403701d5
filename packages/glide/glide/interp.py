"""Linear interpolation and clamping for scalars, vectors and colors."""
from __future__ import annotations

from glide.types import Color, Vector2


def lerp(start: float, end: float, alpha: float) -> float:
    """Interpolate from ``start`` to ``end``. ``alpha`` is not clamped."""
    return start + (end - start) * alpha


def inverse_lerp(start: float, end: float, value: float) -> float:
    """Return the alpha at which ``lerp(start, end, alpha) == value``.

    A degenerate range (``start == end``) maps every value to 0.0.
    """
    if start == end:
        return 0.0
    return (value - start) / (end - start)


def clamp(value: float, min_value: float, max_value: float) -> float:
    return max(min_value, min(max_value, value))


def lerp_vector2(output: Vector2, from_: Vector2, to: Vector2, alpha: float) -> Vector2:
    """Write the interpolation of ``from_`` and ``to`` into ``output``.

    ``output`` may be the same object as ``from_`` or ``to``.
    """
    fx, fy = from_.x, from_.y
    tx, ty = to.x, to.y
    return output.set(fx + (tx - fx) * alpha, fy + (ty - fy) * alpha)


def lerp_color(output: Color, from_: Color, to: Color, alpha: float) -> Color:
    r = lerp(from_.r, to.r, alpha)
    g = lerp(from_.g, to.g, alpha)
    b = lerp(from_.b, to.b, alpha)
    a = lerp(from_.a, to.a, alpha)
    return output.set(r, g, b, a)


def lerped_vector2(from_: Vector2, to: Vector2, alpha: float) -> Vector2:
    return lerp_vector2(Vector2(), from_, to, alpha)


def lerped_color(from_: Color, to: Color, alpha: float) -> Color:
    return lerp_color(Color(), from_, to, alpha)
