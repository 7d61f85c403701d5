"""Stateful wrappers that own their smoothing velocity."""
from __future__ import annotations

from glide.config import DampConfig
from glide.damp import smooth_damp, smooth_damp_vec2
from glide.types import Ref, Vector2


class Follower:
    """A scalar that chases a target each frame."""

    def __init__(self, value: float = 0.0, config: DampConfig | None = None) -> None:
        self.value = value
        self.config = config or DampConfig()
        self.velocity = Ref()

    def update(self, target: float, dt: float) -> float:
        self.value = smooth_damp(
            self.value,
            target,
            self.velocity,
            self.config.smooth_time,
            dt,
            self.config.max_speed,
        )
        return self.value

    def reset(self, value: float) -> None:
        self.value = value
        self.velocity.value = 0.0


class Follower2D:
    """A point that chases a target each frame, updated in place."""

    def __init__(self, value: Vector2 | None = None, config: DampConfig | None = None) -> None:
        self.value = value if value is not None else Vector2()
        self.config = config or DampConfig()
        self.velocity = Vector2()

    def update(self, target: Vector2, dt: float) -> Vector2:
        return smooth_damp_vec2(
            self.value,
            target,
            self.velocity,
            self.config.smooth_time,
            dt,
            self.config.max_speed,
            out=self.value,
        )

    def reset(self, value: Vector2) -> None:
        self.value.set_vector(value)
        self.velocity.set(0.0, 0.0)
