from __future__ import annotations

import math

import pytest

from gaussconf.modeling.exponential import E, exp, int_pow


def test_int_pow_matches_builtin_power():
    for base in (0.5, 1.5, 2.0, E):
        for n in (0, 1, 2, 3, 7, 10, 31):
            assert int_pow(base, n) == pytest.approx(base**n, rel=1e-12)


def test_int_pow_non_positive_exponent_is_one():
    assert int_pow(3.0, 0) == 1.0
    assert int_pow(3.0, -2) == 1.0


def test_exp_zero_is_one():
    assert exp(0.0) == 1.0


def test_exp_one_is_e():
    assert abs(exp(1.0) - math.e) < 1e-5


@pytest.mark.parametrize("x", [0.25, 0.5, 0.999, 1.5, 2.75, 5.3, 12.0])
def test_exp_close_to_math_exp(x: float):
    assert exp(x) == pytest.approx(math.exp(x), rel=1e-5)
    assert exp(-x) == pytest.approx(math.exp(-x), rel=1e-5)


@pytest.mark.parametrize("x", [0.1, 0.7, 1.0, 3.4, 18.0])
def test_exp_negative_is_reciprocal(x: float):
    assert exp(-x) == pytest.approx(1.0 / exp(x), rel=1e-9)


def test_exp_large_magnitudes_follow_float_arithmetic():
    assert exp(-1000.0) == 0.0
    assert math.isinf(exp(1000.0))


def test_exp_non_finite_inputs():
    assert math.isnan(exp(float("nan")))
    assert exp(float("inf")) == float("inf")
    assert exp(float("-inf")) == 0.0
