"""Delta-time driven tweens."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Sequence

from glide.easing import EASINGS
from glide.interp import lerp
from glide.types import EasingFunction

logger = logging.getLogger(__name__)


@dataclass
class Tween:
    """Eased interpolation from ``start_val`` to ``end_val`` over ``duration`` seconds."""

    start_val: float
    end_val: float
    duration: float
    easing: str = "linear"
    elapsed: float = 0.0
    _easing_fn: EasingFunction = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.duration <= 0:
            raise ValueError("duration must be positive")
        easing_fn = EASINGS.get(self.easing)
        if easing_fn is None:
            raise ValueError(f"unknown easing {self.easing!r}")
        self._easing_fn = easing_fn

    @property
    def progress(self) -> float:
        return min(self.elapsed / self.duration, 1.0)

    @property
    def is_complete(self) -> bool:
        return self.elapsed >= self.duration

    @property
    def value(self) -> float:
        if self.is_complete:
            return self.end_val
        return lerp(self.start_val, self.end_val, self._easing_fn(self.progress))

    def advance(self, dt: float) -> float:
        """Step forward by ``dt`` seconds and return the new value.

        Negative steps are ignored. Time past the end is kept in ``elapsed``
        so sequences can carry it into the next tween.
        """
        if dt > 0:
            self.elapsed += dt
        return self.value

    def overflow(self) -> float:
        """Seconds advanced beyond ``duration``."""
        return max(0.0, self.elapsed - self.duration)

    def reset(self) -> None:
        self.elapsed = 0.0


class TweenSequence:
    """Plays tweens one after another.

    ``on_step_complete`` is called with the index and tween of every step as
    it finishes. Time left over when a step ends is carried into the next.
    """

    def __init__(
        self,
        tweens: Sequence[Tween],
        on_step_complete: Callable[[int, Tween], None] | None = None,
    ) -> None:
        if not tweens:
            raise ValueError("sequence needs at least one tween")
        self._tweens = list(tweens)
        self._index = 0
        self._finished = 0
        self._on_step_complete = on_step_complete

    @property
    def index(self) -> int:
        return self._index

    @property
    def current(self) -> Tween:
        return self._tweens[self._index]

    @property
    def is_complete(self) -> bool:
        return self._finished == len(self._tweens)

    @property
    def value(self) -> float:
        return self.current.value

    def advance(self, dt: float) -> float:
        tween = self.current
        tween.advance(dt)
        while tween.is_complete and self._finished <= self._index:
            self._finish_step(tween)
            if self._index == len(self._tweens) - 1:
                break
            carry = tween.overflow()
            self._index += 1
            tween = self.current
            tween.advance(carry)
        return tween.value

    def _finish_step(self, tween: Tween) -> None:
        self._finished += 1
        logger.debug("tween step %d complete (%s)", self._index, tween.easing)
        if self._on_step_complete is not None:
            self._on_step_complete(self._index, tween)

    def reset(self) -> None:
        for tween in self._tweens:
            tween.reset()
        self._index = 0
        self._finished = 0
