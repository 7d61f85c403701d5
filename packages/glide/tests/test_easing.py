"""Tests for easing functions."""
from __future__ import annotations

import math

import pytest

from glide import easing
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
    generate_pow,
    get_easing,
)

FAMILY_NAMES = [
    "quadratic",
    "cubic",
    "quartic",
    "quintic",
    "sinusoidal",
    "exponential",
    "circular",
    "elastic",
    "back",
    "bounce",
]


class TestBoundaries:
    """Every curve should start at 0 and end at 1."""

    @pytest.mark.parametrize("name", sorted(EASINGS))
    def test_maps_zero_to_zero(self, name):
        assert EASINGS[name](0.0) == pytest.approx(0.0, abs=1e-9)

    @pytest.mark.parametrize("name", sorted(EASINGS))
    def test_maps_one_to_one(self, name):
        assert EASINGS[name](1.0) == pytest.approx(1.0, abs=1e-9)

    def test_special_cased_boundaries_are_exact(self):
        """Curves with explicit boundary branches return exact values."""
        assert easing.exponential_in(0) == 0.0
        assert easing.exponential_out(1) == 1.0
        assert easing.exponential_in_out(0) == 0.0
        assert easing.exponential_in_out(1) == 1.0
        for fn in (easing.elastic_in, easing.elastic_out, easing.elastic_in_out):
            assert fn(0) == 0.0
            assert fn(1) == 1.0
        assert easing.back_in(1) == 1.0
        assert easing.back_out(0) == 0.0

    @pytest.mark.parametrize(
        "family", [QUADRATIC, CUBIC, QUARTIC, QUINTIC, SINUSOIDAL, EXPONENTIAL, CIRCULAR, BOUNCE]
    )
    def test_non_overshooting_families_stay_in_unit_range(self, family):
        for i in range(101):
            t = i / 100
            for fn in (family.ease_in, family.ease_out, family.ease_in_out):
                result = fn(t)
                assert -1e-9 <= result <= 1.0 + 1e-9, f"{fn.__name__}({t}) = {result}"


class TestPolynomials:
    def test_quadratic(self):
        assert QUADRATIC.ease_in(0.5) == 0.25
        assert QUADRATIC.ease_out(0.5) == 0.75
        assert QUADRATIC.ease_in_out(0.25) == 0.125
        assert QUADRATIC.ease_in_out(0.75) == 0.875

    def test_cubic(self):
        assert CUBIC.ease_in(0.5) == 0.125
        assert CUBIC.ease_out(0.5) == 0.875
        assert CUBIC.ease_in_out(0.25) == 0.0625
        assert CUBIC.ease_in_out(0.75) == 0.9375

    def test_quartic(self):
        assert QUARTIC.ease_in(0.5) == 0.0625
        assert QUARTIC.ease_out(0.5) == 0.9375
        assert QUARTIC.ease_in_out(0.25) == 0.03125
        assert QUARTIC.ease_in_out(0.75) == 0.96875

    def test_quintic(self):
        assert QUINTIC.ease_in(0.5) == 0.03125
        assert QUINTIC.ease_out(0.5) == 0.96875
        assert QUINTIC.ease_in_out(0.25) == 0.015625
        assert QUINTIC.ease_in_out(0.75) == 0.984375

    @pytest.mark.parametrize("family", [QUADRATIC, CUBIC, QUARTIC, QUINTIC])
    def test_in_out_midpoint(self, family):
        assert family.ease_in_out(0.5) == pytest.approx(0.5)


class TestSinusoidal:
    def test_out_quarter_turn(self):
        assert SINUSOIDAL.ease_out(0.5) == pytest.approx(math.sqrt(0.5))

    def test_in_mirrors_out(self):
        assert SINUSOIDAL.ease_in(0.5) == pytest.approx(1 - math.sqrt(0.5))

    def test_in_out_midpoint(self):
        assert SINUSOIDAL.ease_in_out(0.5) == 0.5

    def test_infinite_input_is_nan(self):
        assert math.isnan(SINUSOIDAL.ease_in(math.inf))
        assert math.isnan(SINUSOIDAL.ease_out(-math.inf))
        assert math.isnan(SINUSOIDAL.ease_in_out(math.inf))


class TestExponential:
    def test_in(self):
        assert EXPONENTIAL.ease_in(0.5) == pytest.approx(1 / 32)

    def test_out(self):
        assert EXPONENTIAL.ease_out(0.5) == 0.96875

    def test_in_out_halves(self):
        assert EXPONENTIAL.ease_in_out(0.25) == pytest.approx(1 / 64)
        assert EXPONENTIAL.ease_in_out(0.75) == pytest.approx(1 - 1 / 64)

    def test_overflow_gives_infinity(self):
        assert EXPONENTIAL.ease_in(200.0) == math.inf


class TestCircular:
    def test_in(self):
        assert CIRCULAR.ease_in(0.6) == pytest.approx(0.2)

    def test_out(self):
        assert CIRCULAR.ease_out(0.4) == pytest.approx(0.8)

    def test_in_out_midpoint(self):
        assert CIRCULAR.ease_in_out(0.5) == 0.5

    def test_outside_domain_is_nan(self):
        assert math.isnan(CIRCULAR.ease_in(2.0))


class TestElastic:
    def test_in_undershoots(self):
        assert ELASTIC.ease_in(0.85) == pytest.approx(-0.25)

    def test_out_overshoots(self):
        assert ELASTIC.ease_out(0.15) == pytest.approx(1.25)

    def test_out_crosses_one_at_tenth(self):
        assert ELASTIC.ease_out(0.1) == 1.0

    def test_in_out_midpoint(self):
        assert ELASTIC.ease_in_out(0.5) == pytest.approx(0.5)

    def test_infinite_input_is_nan(self):
        assert math.isnan(ELASTIC.ease_in(math.inf))
        assert math.isnan(ELASTIC.ease_out(math.inf))
        assert math.isnan(ELASTIC.ease_in_out(-math.inf))


class TestBack:
    def test_in_pulls_back(self):
        assert BACK.ease_in(0.5) == pytest.approx(-0.0876975)

    def test_out_overshoots(self):
        assert BACK.ease_out(0.5) == pytest.approx(1.0876975)

    def test_in_out_midpoint(self):
        assert BACK.ease_in_out(0.5) == pytest.approx(0.5)

    def test_in_out_uses_larger_overshoot(self):
        s = 1.70158 * 1.525
        expected = 0.5 * (0.5 * 0.5 * ((s + 1) * 0.5 - s))
        assert BACK.ease_in_out(0.25) == pytest.approx(expected)


class TestBounce:
    def test_out_first_arc(self):
        assert BOUNCE.ease_out(0.2) == pytest.approx(0.3025)

    def test_out_second_arc(self):
        assert BOUNCE.ease_out(0.5) == pytest.approx(0.765625)

    def test_out_arcs_meet_at_one(self):
        assert BOUNCE.ease_out(1 / 2.75) == pytest.approx(1.0)
        assert BOUNCE.ease_out(2 / 2.75) == pytest.approx(1.0)
        assert BOUNCE.ease_out(2.5 / 2.75) == pytest.approx(1.0)

    def test_out_arc_floors(self):
        assert BOUNCE.ease_out(1.5 / 2.75) == pytest.approx(0.75)
        assert BOUNCE.ease_out(2.25 / 2.75) == pytest.approx(0.9375)
        assert BOUNCE.ease_out(2.625 / 2.75) == pytest.approx(0.984375)

    def test_in_is_reflected_out(self):
        assert BOUNCE.ease_in(0.3) == pytest.approx(1 - BOUNCE.ease_out(0.7))

    def test_in_out_first_half(self):
        assert BOUNCE.ease_in_out(0.25) == BOUNCE.ease_in(0.5) * 0.5

    def test_in_out_second_half(self):
        assert BOUNCE.ease_in_out(0.75) == BOUNCE.ease_out(0.5) * 0.5 + 0.5


class TestGeneratePow:
    def test_default_power_is_four(self):
        family = generate_pow()
        assert family.ease_in(0.5) == 0.0625
        assert family.ease_out(0.5) == 0.9375

    def test_power_two(self):
        family = generate_pow(2)
        assert family.ease_in(0.5) == 0.25
        assert family.ease_out(0.5) == 0.75
        assert family.ease_in_out(0.25) == 0.125
        assert family.ease_in_out(0.75) == 0.875

    def test_power_one_is_linear(self):
        family = generate_pow(1)
        for i in range(11):
            t = i / 10
            assert family.ease_in(t) == t
            assert family.ease_out(t) == pytest.approx(t)
            assert family.ease_in_out(t) == pytest.approx(t)

    def test_boundaries(self):
        for power in (0.5, 2, 3.7, 50):
            family = generate_pow(power)
            for fn in (family.ease_in, family.ease_out, family.ease_in_out):
                assert fn(0.0) == pytest.approx(0.0)
                assert fn(1.0) == pytest.approx(1.0)

    def test_non_positive_power_clamped_to_epsilon(self):
        clamped = generate_pow(0)
        negative = generate_pow(-3)
        assert clamped.ease_in(0.5) == negative.ease_in(0.5)
        assert clamped.ease_in(0.5) == 0.5**easing.POW_MIN

    def test_huge_power_clamped(self):
        assert generate_pow(1e9).ease_in(0.999) == generate_pow(10000).ease_in(0.999)

    def test_families_are_independent(self):
        square = generate_pow(2)
        cube = generate_pow(3)
        assert square.ease_in(0.5) == 0.25
        assert cube.ease_in(0.5) == 0.125
        assert square is not cube

    def test_fractional_power_of_negative_is_nan(self):
        assert math.isnan(generate_pow(2.5).ease_in(-0.5))


class TestRegistry:
    def test_contains_every_variant(self):
        expected = {"linear"}
        for name in FAMILY_NAMES:
            expected |= {f"{name}_in", f"{name}_out", f"{name}_in_out"}
        assert set(EASINGS) == expected

    def test_is_read_only(self):
        with pytest.raises(TypeError):
            EASINGS["custom"] = lambda t: t  # type: ignore[index]

    def test_get_easing(self):
        assert get_easing("cubic_out") is CUBIC.ease_out

    def test_get_easing_unknown_lists_names(self):
        with pytest.raises(KeyError, match="cubic_out"):
            get_easing("wobbly")

    def test_linear(self):
        assert EASINGS["linear"](0.37) == 0.37
