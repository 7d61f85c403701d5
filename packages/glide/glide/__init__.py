"""glide - Easing curves, interpolation and critically damped smoothing."""
from __future__ import annotations

import logging

from glide import vec
from glide.config import DampConfig
from glide.damp import smooth_damp, smooth_damp_vec, smooth_damp_vec2
from glide.easing import (
    BACK,
    BOUNCE,
    CIRCULAR,
    CUBIC,
    EASINGS,
    ELASTIC,
    EXPONENTIAL,
    QUADRATIC,
    QUARTIC,
    QUINTIC,
    SINUSOIDAL,
    EasingFamily,
    generate_pow,
    get_easing,
    linear,
)
from glide.follower import Follower, Follower2D
from glide.interp import (
    clamp,
    inverse_lerp,
    lerp,
    lerp_color,
    lerp_vector2,
    lerped_color,
    lerped_vector2,
)
from glide.tween import Tween, TweenSequence
from glide.types import Color, EasingFunction, Ref, Vec, Vector2

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "BACK",
    "BOUNCE",
    "CIRCULAR",
    "CUBIC",
    "EASINGS",
    "ELASTIC",
    "EXPONENTIAL",
    "QUADRATIC",
    "QUARTIC",
    "QUINTIC",
    "SINUSOIDAL",
    "Color",
    "DampConfig",
    "EasingFamily",
    "EasingFunction",
    "Follower",
    "Follower2D",
    "Ref",
    "Tween",
    "TweenSequence",
    "Vec",
    "Vector2",
    "clamp",
    "generate_pow",
    "get_easing",
    "inverse_lerp",
    "lerp",
    "lerp_color",
    "lerp_vector2",
    "lerped_color",
    "lerped_vector2",
    "linear",
    "smooth_damp",
    "smooth_damp_vec",
    "smooth_damp_vec2",
    "vec",
]
