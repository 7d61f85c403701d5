"""Smoothing configuration dataclass."""
from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class DampConfig:
    """Immutable tuning for a damped follower.

    Attributes:
        smooth_time: Approximate seconds to settle on the target. Values
            below 0.0001 are floored when stepping, never rejected.
        max_speed: Cap on approach speed in units per second.
    """

    smooth_time: float = 0.3
    max_speed: float = math.inf

    def __post_init__(self) -> None:
        if self.max_speed < 0:
            raise ValueError("max_speed must not be negative")
