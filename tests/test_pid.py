"""PidMath 단위 테스트 (시계 없이 delta_time 직접 지정)."""

from __future__ import annotations

import pytest

from pidcore.control.pid import PidMath


@pytest.fixture
def math() -> PidMath:
    return PidMath(1.0, 1.0, 1.0)


def test_new_math_starts_with_zero_memory():
    pid = PidMath(0.5, -2.0, 0.0)
    assert pid.p_coefficient == 0.5
    assert pid.i_coefficient == -2.0
    assert pid.d_coefficient == 0.0
    assert pid.last_integral == 0.0
    assert pid.last_error == 0.0


@pytest.mark.parametrize("value", [0.0, 24.7, -13.25, 1e9])
def test_error_of_equal_values_is_zero(value):
    assert PidMath.error(value, value) == 0.0


def test_error_is_setpoint_minus_measurement():
    assert PidMath.error(10.0, 4.0) == 6.0
    assert PidMath.error(4.0, 10.0) == -6.0


@pytest.mark.parametrize("error", [0.0, 234.34, -17.5])
def test_proportional_term_is_identity(math, error):
    assert math.proportional_term(error) == error
    assert math.p_term(error) == error


def test_integral_accumulates_error_times_dt(math):
    error, dt = 55.6, 0.5
    for n in range(1, 6):
        assert math.integral_term(error, dt) == pytest.approx(error * dt * n)
    assert math.last_integral == pytest.approx(error * dt * 5)


def test_integral_grows_without_clamp():
    pid = PidMath(0.0, 1.0, 0.0)
    values = [pid.i_term(-3.0, 1.0) for _ in range(1000)]
    assert values[-1] == -3000.0
    assert all(b < a for a, b in zip(values, values[1:]))


def test_integral_with_zero_dt_keeps_sum(math):
    math.integral_term(2.0, 1.0)
    assert math.integral_term(50.0, 0.0) == 2.0


def test_derivative_with_zero_dt_returns_zero_and_keeps_last_error(math):
    assert math.derivative_term(32.4, 0.0) == 0.0
    assert math.derivative_term(-8.0, 0.0) == 0.0
    assert math.last_error == 0.0


def test_derivative_over_error_sequence(math):
    e1, e2, dt = 32.4, 20.0, 0.25
    assert math.derivative_term(e1, dt) == pytest.approx(e1 / dt)
    assert math.d_term(e2, dt) == pytest.approx((e2 - e1) / dt)
    assert math.last_error == e2


def test_derivative_after_zero_dt_sees_previous_error(math):
    math.derivative_term(5.0, 1.0)
    math.derivative_term(9.0, 0.0)
    assert math.derivative_term(8.0, 1.0) == 3.0


def test_update_applies_each_gain_once():
    pid = PidMath(2.0, 3.0, 4.0)
    # error=5, dt=0.5 → P=5, I=2.5, D=(5-0)/0.5=10
    assert pid.update(7.0, 2.0, 0.5) == pytest.approx(2.0 * 5 + 3.0 * 2.5 + 4.0 * 10)


def test_integral_gain_not_applied_twice():
    pid = PidMath(0.0, 2.0, 0.0)
    assert pid.update(3.0, 0.0, 1.0) == 6.0
    assert pid.last_integral == 3.0


def test_update_with_zero_dt_is_proportional_only():
    pid = PidMath(1.5, 10.0, 10.0)
    assert pid.update(4.0, 0.0, 0.0) == 6.0
    assert pid.last_integral == 0.0
    assert pid.last_error == 0.0


def test_negative_gains_invert_term():
    pid = PidMath(-1.0, 0.0, 0.0)
    assert pid.update(3.0, 1.0, 0.1) == -2.0


def test_prime_sets_derivative_reference():
    pid = PidMath(0.0, 0.0, 1.0)
    pid.prime(6.0)
    assert pid.update(6.0, 0.0, 1.0) == 0.0


@pytest.mark.parametrize("method", ["integral_term", "derivative_term"])
def test_negative_dt_in_terms_is_rejected(math, method):
    with pytest.raises(ValueError):
        getattr(math, method)(1.0, -0.1)


def test_negative_dt_in_update_leaves_memory_untouched(math):
    with pytest.raises(ValueError):
        math.update(1.0, 0.0, -1.0)
    assert math.last_integral == 0.0
    assert math.last_error == 0.0


def test_gains_are_read_only(math):
    with pytest.raises(AttributeError):
        math.p_coefficient = 3.0
