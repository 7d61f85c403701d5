"""Easing functions for tween interpolation.

Each function maps normalized progress in [0, 1] to eased progress. Elastic
and Back curves leave the unit range on purpose. Inputs outside [0, 1] are
evaluated with the same formulas and never raise: a negative base under a
fractional power, a negative square root or the sine of an infinite
angle gives ``nan``, overflow gives ``inf``.
"""
from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from glide.types import EasingFunction

POW_MIN = sys.float_info.epsilon
POW_MAX = 10000.0

BACK_OVERSHOOT = 1.70158
BACK_IN_OUT_OVERSHOOT = BACK_OVERSHOOT * 1.525


def _pow(base: float, exponent: float) -> float:
    if base < 0 and not float(exponent).is_integer():
        return math.nan
    try:
        return float(base**exponent)
    except OverflowError:
        return math.inf


def _sqrt(value: float) -> float:
    if value < 0:
        return math.nan
    return math.sqrt(value)


def _sin(value: float) -> float:
    if math.isinf(value):
        return math.nan
    return math.sin(value)


@dataclass(frozen=True)
class EasingFamily:
    """The In / Out / InOut variants of one curve."""

    ease_in: EasingFunction
    ease_out: EasingFunction
    ease_in_out: EasingFunction


def linear(t: float) -> float:
    return t


# Quadratic


def quadratic_in(t: float) -> float:
    return t * t


def quadratic_out(t: float) -> float:
    return t * (2 - t)


def quadratic_in_out(t: float) -> float:
    t *= 2
    if t < 1:
        return 0.5 * t * t
    t -= 1
    return -0.5 * (t * (t - 2) - 1)


# Cubic


def cubic_in(t: float) -> float:
    return t * t * t


def cubic_out(t: float) -> float:
    t -= 1
    return t * t * t + 1


def cubic_in_out(t: float) -> float:
    t *= 2
    if t < 1:
        return 0.5 * t * t * t
    t -= 2
    return 0.5 * (t * t * t + 2)


# Quartic


def quartic_in(t: float) -> float:
    return t * t * t * t


def quartic_out(t: float) -> float:
    t -= 1
    return 1 - t * t * t * t


def quartic_in_out(t: float) -> float:
    t *= 2
    if t < 1:
        return 0.5 * t * t * t * t
    t -= 2
    return -0.5 * (t * t * t * t - 2)


# Quintic


def quintic_in(t: float) -> float:
    return t * t * t * t * t


def quintic_out(t: float) -> float:
    t -= 1
    return t * t * t * t * t + 1


def quintic_in_out(t: float) -> float:
    t *= 2
    if t < 1:
        return 0.5 * t * t * t * t * t
    t -= 2
    return 0.5 * (t * t * t * t * t + 2)


# Sinusoidal


def sinusoidal_in(t: float) -> float:
    return 1 - _sin(((1.0 - t) * math.pi) / 2)


def sinusoidal_out(t: float) -> float:
    return _sin((t * math.pi) / 2)


def sinusoidal_in_out(t: float) -> float:
    return 0.5 * (1 - _sin(math.pi * (0.5 - t)))


# Exponential


def exponential_in(t: float) -> float:
    if t == 0:
        return 0.0
    return _pow(1024, t - 1)


def exponential_out(t: float) -> float:
    if t == 1:
        return 1.0
    return 1 - _pow(2, -10 * t)


def exponential_in_out(t: float) -> float:
    if t == 0:
        return 0.0
    if t == 1:
        return 1.0
    t *= 2
    if t < 1:
        return 0.5 * _pow(1024, t - 1)
    return 0.5 * (-_pow(2, -10 * (t - 1)) + 2)


# Circular


def circular_in(t: float) -> float:
    return 1 - _sqrt(1 - t * t)


def circular_out(t: float) -> float:
    t -= 1
    return _sqrt(1 - t * t)


def circular_in_out(t: float) -> float:
    t *= 2
    if t < 1:
        return -0.5 * (_sqrt(1 - t * t) - 1)
    t -= 2
    return 0.5 * (_sqrt(1 - t * t) + 1)


# Elastic


def elastic_in(t: float) -> float:
    if t == 0:
        return 0.0
    if t == 1:
        return 1.0
    return -_pow(2, 10 * (t - 1)) * _sin((t - 1.1) * 5 * math.pi)


def elastic_out(t: float) -> float:
    if t == 0:
        return 0.0
    if t == 1:
        return 1.0
    return _pow(2, -10 * t) * _sin((t - 0.1) * 5 * math.pi) + 1


def elastic_in_out(t: float) -> float:
    if t == 0:
        return 0.0
    if t == 1:
        return 1.0
    t *= 2
    if t < 1:
        return -0.5 * _pow(2, 10 * (t - 1)) * _sin((t - 1.1) * 5 * math.pi)
    return 0.5 * _pow(2, -10 * (t - 1)) * _sin((t - 1.1) * 5 * math.pi) + 1


# Back


def back_in(t: float) -> float:
    s = BACK_OVERSHOOT
    if t == 1:
        return 1.0
    return t * t * ((s + 1) * t - s)


def back_out(t: float) -> float:
    s = BACK_OVERSHOOT
    if t == 0:
        return 0.0
    t -= 1
    return t * t * ((s + 1) * t + s) + 1


def back_in_out(t: float) -> float:
    s = BACK_IN_OUT_OVERSHOOT
    t *= 2
    if t < 1:
        return 0.5 * (t * t * ((s + 1) * t - s))
    t -= 2
    return 0.5 * (t * t * ((s + 1) * t + s) + 2)


# Bounce


def bounce_out(t: float) -> float:
    if t < 1 / 2.75:
        return 7.5625 * t * t
    if t < 2 / 2.75:
        t -= 1.5 / 2.75
        return 7.5625 * t * t + 0.75
    if t < 2.5 / 2.75:
        t -= 2.25 / 2.75
        return 7.5625 * t * t + 0.9375
    t -= 2.625 / 2.75
    return 7.5625 * t * t + 0.984375


def bounce_in(t: float) -> float:
    return 1 - bounce_out(1 - t)


def bounce_in_out(t: float) -> float:
    if t < 0.5:
        return bounce_in(t * 2) * 0.5
    return bounce_out(t * 2 - 1) * 0.5 + 0.5


QUADRATIC = EasingFamily(quadratic_in, quadratic_out, quadratic_in_out)
CUBIC = EasingFamily(cubic_in, cubic_out, cubic_in_out)
QUARTIC = EasingFamily(quartic_in, quartic_out, quartic_in_out)
QUINTIC = EasingFamily(quintic_in, quintic_out, quintic_in_out)
SINUSOIDAL = EasingFamily(sinusoidal_in, sinusoidal_out, sinusoidal_in_out)
EXPONENTIAL = EasingFamily(exponential_in, exponential_out, exponential_in_out)
CIRCULAR = EasingFamily(circular_in, circular_out, circular_in_out)
ELASTIC = EasingFamily(elastic_in, elastic_out, elastic_in_out)
BACK = EasingFamily(back_in, back_out, back_in_out)
BOUNCE = EasingFamily(bounce_in, bounce_out, bounce_in_out)

_FAMILIES: dict[str, EasingFamily] = {
    "quadratic": QUADRATIC,
    "cubic": CUBIC,
    "quartic": QUARTIC,
    "quintic": QUINTIC,
    "sinusoidal": SINUSOIDAL,
    "exponential": EXPONENTIAL,
    "circular": CIRCULAR,
    "elastic": ELASTIC,
    "back": BACK,
    "bounce": BOUNCE,
}


def _build_registry() -> dict[str, EasingFunction]:
    registry: dict[str, EasingFunction] = {"linear": linear}
    for name, family in _FAMILIES.items():
        registry[f"{name}_in"] = family.ease_in
        registry[f"{name}_out"] = family.ease_out
        registry[f"{name}_in_out"] = family.ease_in_out
    return registry


EASINGS: Mapping[str, EasingFunction] = MappingProxyType(_build_registry())


def get_easing(name: str) -> EasingFunction:
    """Look up an easing function by registry name, e.g. ``"cubic_out"``."""
    try:
        return EASINGS[name]
    except KeyError:
        known = ", ".join(sorted(EASINGS))
        raise KeyError(f"unknown easing {name!r}; expected one of: {known}") from None


def generate_pow(power: float = 4) -> EasingFamily:
    """Build a power-curve family ``t ** power``.

    ``power`` is clamped to [machine epsilon, 10000]. Each call returns new
    closures; families never share state.
    """
    power = POW_MIN if power < POW_MIN else power
    power = POW_MAX if power > POW_MAX else power

    def ease_in(t: float) -> float:
        return _pow(t, power)

    def ease_out(t: float) -> float:
        return 1 - _pow(1 - t, power)

    def ease_in_out(t: float) -> float:
        if t < 0.5:
            return _pow(t * 2, power) / 2
        return (1 - _pow(2 - t * 2, power)) / 2 + 0.5

    return EasingFamily(ease_in, ease_out, ease_in_out)
