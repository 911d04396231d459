import math

import pytest
from flowkit.functional import number as N


def test_arithmetic_is_data_last():
    assert N.add(5)(2) == 7
    assert N.subtract(5)(2) == -3
    assert N.subtract_from(5)(2) == 3
    assert N.multiply(5)(2) == 10
    assert N.divide(2)(10) == 5
    assert N.divide_into(2)(10) == 0.2
    assert N.pow(3)(4) == 64


def test_division_by_zero_follows_ieee():
    assert N.divide(0)(1) == math.inf
    assert N.divide(0)(-1) == -math.inf
    assert math.isnan(N.divide(0)(0))
    assert N.divide_into(1)(0) == math.inf


def test_clamp_and_is_between():
    clamp = N.clamp(0, 100)
    assert clamp(-2) == 0
    assert clamp(42) == 42
    assert clamp(math.inf) == 100
    between = N.is_between(3, 7)
    assert [between(x) for x in (1, 3, 4, 7, 10)] == [False, True, True, True, False]


def test_is_close_to():
    default = N.is_close_to(5)
    loose = N.is_close_to(5, 1e-13)
    assert default(5 + 1e-16) is True
    assert default(5 - 1e-16) is True
    assert default(5 + 1e-14) is False
    assert default(5 - 1e-14) is False
    assert loose(5 + 1e-14) is True
    assert loose(5 - 1e-14) is True


def test_is_close_to_reads_default_tolerance(monkeypatch):
    from flowkit.core.config import settings

    monkeypatch.setattr(settings, "CLOSE_TOLERANCE", 0.5)
    assert N.is_close_to(5)(5.4) is True


def test_is_divisible_by():
    assert N.is_divisible_by(3)(9) is True
    assert N.is_divisible_by(3)(10) is False
    assert N.is_divisible_by(3)(-9) is True
    assert N.is_divisible_by(0.1, 1e-9)(0.3) is True
    assert N.is_divisible_by(0.1, 1e-9)(0.35) is False
    assert N.is_divisible_by(0)(5) is False


@pytest.mark.parametrize("x, expected", [(4, True), (-4, True), (0, True), (3.99, False), (math.nan, False)])
def test_is_even(x, expected):
    assert N.is_even(x) is expected


@pytest.mark.parametrize("x, expected", [(3, True), (-3, True), (4, False), (3.01, False), (math.nan, False)])
def test_is_odd(x, expected):
    assert N.is_odd(x) is expected


def test_comparisons():
    assert [N.is_gt(4)(x) for x in (6, 4, 2)] == [True, False, False]
    assert [N.is_gte(4)(x) for x in (6, 4, 2)] == [True, True, False]
    assert [N.is_lt(4)(x) for x in (2, 4, 6)] == [True, False, False]
    assert [N.is_lte(4)(x) for x in (2, 4, 6)] == [True, True, False]


def test_sign_predicates():
    assert [N.is_negative(x) for x in (3, -3, 0, math.nan)] == [False, True, False, False]
    assert [N.is_non_negative(x) for x in (3, -3, 0, math.nan)] == [True, False, True, False]
    assert [N.is_positive(x) for x in (3, -3, 0, math.nan)] == [True, False, False, False]


def test_math_modulo_takes_sign_of_divisor():
    assert N.math_modulo(6)(7) == 1
    assert N.math_modulo(6)(-7) == 5
    assert N.math_modulo(-6)(7) == -5
    assert N.math_modulo(-6)(-7) == -1
    assert math.isnan(N.math_modulo(0)(7))


def test_modulo_takes_sign_of_dividend():
    assert N.modulo(6)(7) == 1
    assert N.modulo(-6)(7) == 1
    assert N.modulo(6)(-7.1) == pytest.approx(-1.1)
    assert N.modulo(-6)(-7) == -1
    assert math.isnan(N.modulo(0)(7))
    assert math.isnan(N.modulo(6)(math.inf))


def test_nth_root():
    assert N.nth_root(3)(8) == pytest.approx(2)
    assert N.nth_root(3)(-8) == pytest.approx(-2)
    assert N.nth_root(2)(0) == 0


def test_pow_without_real_result_is_nan():
    assert math.isnan(N.pow(0.5)(-4))
    assert N.pow(0.5)(4) == 2


def test_pow_of_zero_to_negative_power_is_infinite():
    assert N.pow(-1)(0) == math.inf
    assert N.pow(-2)(0.0) == math.inf
    assert N.pow(-1)(-0.0) == -math.inf
    assert N.pow(-2)(-0.0) == math.inf


def test_pow_overflow_is_infinite():
    assert N.pow(400)(10.0) == math.inf
    assert N.pow(401)(-10.0) == -math.inf
    assert N.pow(400)(-10.0) == math.inf
    assert N.pow(-400)(0.1) == math.inf


def test_nth_root_of_zero_degree():
    assert N.nth_root(0)(8) == math.inf
    assert N.nth_root(0)(-8) == -math.inf
    assert N.nth_root(0)(0.5) == 0
    assert N.nth_root(0.001)(10) == math.inf


@pytest.mark.parametrize("places", [-1, 0, 2])
@pytest.mark.parametrize("value", [math.inf, -math.inf])
def test_round_passes_infinities_through(places, value):
    assert N.round(places)(value) == value


@pytest.mark.parametrize("places", [-1, 0, 2])
def test_round_passes_nan_through(places):
    assert math.isnan(N.round(places)(math.nan))


def test_round_scales_up_before_rounding():
    assert N.round(1)(0.35) == 0.4
    assert N.round(1)(-0.35) == -0.3


def test_round():
    assert N.round(2)(12345.6789) == 12345.68
    assert N.round()(12345.6789) == 12346
    assert N.round(-2)(12345.6789) == 12300
    assert N.round()(2.5) == 3
    assert N.round()(-2.5) == -2
