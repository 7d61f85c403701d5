"""Critically damped smoothing toward a moving target.

Based on the SmoothDamp approximation from Game Programming Gems 4, chapter
1.10: a damped spring whose decay term ``e^(-omega*dt)`` is replaced by a
rational approximation, stepped once per frame with a variable ``dt``.

The functions are pure apart from the velocity argument, which the caller
owns and passes back in on every frame. A ``delta_time`` of zero or less
leaves both the value and the velocity unchanged.
"""
from __future__ import annotations

import logging
import math

from glide import vec
from glide.interp import clamp
from glide.types import Ref, Vec, Vector2

logger = logging.getLogger(__name__)

MIN_SMOOTH_TIME = 0.0001


def _coefficients(smooth_time: float, delta_time: float) -> tuple[float, float, float]:
    smooth_time = max(MIN_SMOOTH_TIME, smooth_time)
    omega = 2 / smooth_time
    x = omega * delta_time
    exp = 1 / (1 + x + 0.48 * x * x + 0.235 * x * x * x)
    return smooth_time, omega, exp


def smooth_damp(
    current: float,
    target: float,
    velocity: Ref,
    smooth_time: float,
    delta_time: float,
    max_speed: float = math.inf,
) -> float:
    """Move ``current`` toward ``target`` without overshooting it.

    Args:
        current: Value at the start of the frame.
        target: Value to approach.
        velocity: Velocity carried between calls; overwritten in place.
        smooth_time: Approximate time to reach the target, floored at 0.0001.
        delta_time: Frame duration in seconds.
        max_speed: Optional cap on the approach speed.

    Returns:
        The value at the end of the frame.
    """
    if delta_time <= 0:
        logger.debug("smooth_damp skipped for delta_time=%r", delta_time)
        return current

    smooth_time, omega, exp = _coefficients(smooth_time, delta_time)

    change = current - target
    original_target = target

    max_change = max_speed * smooth_time
    change = clamp(change, -max_change, max_change)
    target = current - change

    temp = (velocity.value + omega * change) * delta_time
    velocity.value = (velocity.value - omega * temp) * exp
    output = target + (change + temp) * exp

    # Crossed the target this step
    if (original_target - current > 0.0) == (output > original_target):
        output = original_target
        velocity.value = (output - original_target) / delta_time

    return output


def smooth_damp_vec2(
    current: Vector2,
    target: Vector2,
    velocity: Vector2,
    smooth_time: float,
    delta_time: float,
    max_speed: float = math.inf,
    out: Vector2 | None = None,
) -> Vector2:
    """2D :func:`smooth_damp` writing into ``out``.

    The speed cap applies to the length of the offset, keeping its direction,
    and the overshoot check uses the dot product of the offsets before and
    after the step. ``velocity`` is updated in place.

    ``out`` may be ``current`` or ``target`` since both are read before
    anything is written. It must not be ``velocity``. When omitted a new
    ``Vector2`` is returned.
    """
    if out is None:
        out = Vector2()

    current_x, current_y = current.x, current.y
    if delta_time <= 0:
        logger.debug("smooth_damp_vec2 skipped for delta_time=%r", delta_time)
        return out.set(current_x, current_y)

    smooth_time, omega, exp = _coefficients(smooth_time, delta_time)

    original_x, original_y = target.x, target.y
    change_x = current_x - original_x
    change_y = current_y - original_y

    max_change = max_speed * smooth_time
    magnitude_sq = change_x * change_x + change_y * change_y
    if magnitude_sq > max_change * max_change:
        magnitude = math.sqrt(magnitude_sq)
        change_x = (change_x / magnitude) * max_change
        change_y = (change_y / magnitude) * max_change

    target_x = current_x - change_x
    target_y = current_y - change_y

    temp_x = (velocity.x + omega * change_x) * delta_time
    temp_y = (velocity.y + omega * change_y) * delta_time
    velocity.set((velocity.x - omega * temp_x) * exp, (velocity.y - omega * temp_y) * exp)

    out_x = target_x + (change_x + temp_x) * exp
    out_y = target_y + (change_y + temp_y) * exp

    crossed = (original_x - current_x) * (out_x - original_x) + (original_y - current_y) * (
        out_y - original_y
    )
    if crossed > 0:
        out_x, out_y = original_x, original_y
        velocity.set((out_x - original_x) / delta_time, (out_y - original_y) / delta_time)

    return out.set(out_x, out_y)


def smooth_damp_vec(
    current: Vec,
    target: Vec,
    velocity: Vec,
    smooth_time: float,
    delta_time: float,
    max_speed: float = math.inf,
) -> tuple[Vec, Vec]:
    """Allocating N-dimensional form of :func:`smooth_damp_vec2`.

    Returns ``(value, velocity)`` as new tuples; nothing is mutated.
    """
    if delta_time <= 0:
        logger.debug("smooth_damp_vec skipped for delta_time=%r", delta_time)
        return current, velocity

    smooth_time, omega, exp = _coefficients(smooth_time, delta_time)

    change = vec.clamp_magnitude(vec.sub(current, target), max_speed * smooth_time)
    clamped_target = vec.sub(current, change)

    temp = vec.scale(vec.add(velocity, vec.scale(change, omega)), delta_time)
    new_velocity = vec.scale(vec.sub(velocity, vec.scale(temp, omega)), exp)
    output = vec.add(clamped_target, vec.scale(vec.add(change, temp), exp))

    if vec.dot(vec.sub(target, current), vec.sub(output, target)) > 0:
        return tuple(target), vec.zero(len(target))

    return output, new_velocity
