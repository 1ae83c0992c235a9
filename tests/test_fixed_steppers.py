"""Tests for the fixed-formula steppers: Euler, Midpoint, Ralston, RK4."""

import math

import numpy as np
import pytest

from jaxstep import ParticleState, DeltaState, stage_evaluator
from jaxstep.integrators import (
    euler_step,
    midpoint_step,
    ralston_step,
    rk4_step,
    get_integrator,
    available_integrators,
)

FIXED_STEPPERS = [euler_step, midpoint_step, ralston_step, rk4_step]


def _integrate(stepper, deriv, y0, t_end, h):
    state = ParticleState(pos=y0, vel=y0)
    evaluate = stage_evaluator(deriv)
    n_steps = int(round(t_end / h))
    t = 0.0
    for _ in range(n_steps):
        stepper(state, t, h, evaluate)
        t += h
    return state


def test_euler_exponential_sequence(exponential_deriv):
    expected = [1.5, 2.25, 3.375, 5.0625, 7.5938, 11.3906, 17.0859, 25.6289]
    state = ParticleState(pos=1.0, vel=1.0)
    evaluate = stage_evaluator(exponential_deriv)

    t = 0.0
    for y_expected in expected:
        euler_step(state, t, 0.5, evaluate)
        t += 0.5
        assert state.pos == pytest.approx(y_expected, abs=1e-3)
        assert state.vel == pytest.approx(y_expected, abs=1e-3)


def test_euler_exact_for_constant_derivative():
    evaluate = stage_evaluator(lambda s, t: DeltaState(vel=2.0, accel=-1.0))
    state = ParticleState(pos=np.array([1.0, 2.0]), vel=np.array([0.0, 0.0]))

    euler_step(state, 0.0, 0.25, evaluate)

    np.testing.assert_allclose(state.pos, [1.5, 2.5])
    np.testing.assert_allclose(state.vel, [-0.25, -0.25])


def test_midpoint_single_evaluation_formula(exponential_deriv):
    calls = []

    def deriv(state, t):
        calls.append(t)
        return exponential_deriv(state, t)

    state = ParticleState(pos=1.0, vel=1.0)
    midpoint_step(state, 0.0, 0.5, stage_evaluator(deriv))

    # One sample at dt/2, taken at the unperturbed state
    assert calls == [0.25]
    assert state.pos == pytest.approx(1.0 + 0.5 * (1.0 + 0.25 * 1.0))
    assert state.vel == pytest.approx(1.0 + 0.5 * 1.5)


def test_midpoint_position_sequence(exponential_deriv):
    state = ParticleState(pos=1.0, vel=1.0)
    evaluate = stage_evaluator(exponential_deriv)

    midpoint_step(state, 0.0, 0.5, evaluate)
    assert state.pos == pytest.approx(1.625)

    midpoint_step(state, 0.5, 0.5, evaluate)
    # pos picks up k1.vel = previous pos, vel grows by 1.5x per unit step
    assert state.pos == pytest.approx(1.625 + 0.5 * 1.625 * 1.25)
    assert state.vel == pytest.approx(1.75 * 1.75)


def test_ralston_stage_offsets_and_weights():
    seen = []

    def evaluate(state, time, offset, prior):
        seen.append((offset, prior))
        return DeltaState(vel=1.0 + offset, accel=10.0 * (1.0 + offset))

    state = ParticleState(pos=0.0, vel=0.0)
    ralston_step(state, 3.0, 0.3, evaluate)

    assert [offset for offset, _ in seen] == pytest.approx([0.0, 0.2])
    assert seen[0][1] == DeltaState()
    assert seen[1][1] == DeltaState(vel=1.0, accel=10.0)
    assert state.pos == pytest.approx(0.3 * (0.25 * 1.0 + 0.75 * 1.2))
    assert state.vel == pytest.approx(0.3 * (0.25 * 10.0 + 0.75 * 12.0))


def test_rk4_stage_chain():
    seen = []

    def evaluate(state, time, offset, prior):
        k = DeltaState(vel=float(len(seen) + 1), accel=-float(len(seen) + 1))
        seen.append((time, offset, prior))
        return k

    state = ParticleState(pos=0.0, vel=0.0)
    rk4_step(state, 1.0, 0.6, evaluate)

    assert [offset for _, offset, _ in seen] == pytest.approx([0.0, 0.3, 0.3, 0.6])
    assert all(time == 1.0 for time, _, _ in seen)
    # Each stage is built from the one before it
    assert seen[0][2] == DeltaState()
    assert [prior.vel for _, _, prior in seen[1:]] == [1.0, 2.0, 3.0]
    assert state.pos == pytest.approx(0.6 / 6.0 * (1.0 + 2 * (2.0 + 3.0) + 4.0))
    assert state.vel == pytest.approx(-0.6 / 6.0 * (1.0 + 2 * (2.0 + 3.0) + 4.0))


def test_rk4_one_step_matches_taylor_polynomial(exponential_deriv):
    h = 0.1
    state = _integrate(rk4_step, exponential_deriv, 1.0, h, h)
    assert state.pos == pytest.approx(1 + h + h**2 / 2 + h**3 / 6 + h**4 / 24, abs=1e-14)


@pytest.mark.parametrize(
    "stepper, h, expected_ratio, tol",
    [
        (euler_step, 0.01, 2.0, 0.1),
        (rk4_step, 0.05, 16.0, 1.0),
    ],
)
def test_global_error_ratio_on_halving(exponential_deriv, stepper, h, expected_ratio, tol):
    exact = math.e
    err_h = abs(_integrate(stepper, exponential_deriv, 1.0, 1.0, h).pos - exact)
    err_h2 = abs(_integrate(stepper, exponential_deriv, 1.0, 1.0, h / 2).pos - exact)
    assert err_h / err_h2 == pytest.approx(expected_ratio, abs=tol)


def test_ralston_is_second_order(exponential_deriv):
    exact = math.e
    err_h = abs(_integrate(ralston_step, exponential_deriv, 1.0, 1.0, 0.02).pos - exact)
    err_h2 = abs(_integrate(ralston_step, exponential_deriv, 1.0, 1.0, 0.01).pos - exact)
    assert err_h / err_h2 == pytest.approx(4.0, abs=0.2)


@pytest.mark.parametrize("stepper", FIXED_STEPPERS)
def test_zero_step_leaves_state_unchanged(stepper, damped_oscillator_deriv):
    pos0 = np.array([0.3, -1.2, 2.0])
    vel0 = np.array([1.0, 0.5, -0.25])
    state = ParticleState(pos=pos0.copy(), vel=vel0.copy())

    stepper(state, 2.5, 0.0, stage_evaluator(damped_oscillator_deriv))

    np.testing.assert_array_equal(state.pos, pos0)
    np.testing.assert_array_equal(state.vel, vel0)


@pytest.mark.parametrize("stepper", FIXED_STEPPERS)
def test_state_only_updated_after_all_stages(stepper, damped_oscillator_deriv):
    pos0 = np.array([0.3, -1.2, 2.0])
    vel0 = np.array([1.0, 0.5, -0.25])
    state = ParticleState(pos=pos0.copy(), vel=vel0.copy())
    observed = []

    def evaluate(s, time, offset, prior):
        observed.append((s.pos.copy(), s.vel.copy()))
        return stage_evaluator(damped_oscillator_deriv)(s, time, offset, prior)

    time = 1.25
    stepper(state, time, 0.1, evaluate)

    assert time == 1.25
    for pos, vel in observed:
        np.testing.assert_array_equal(pos, pos0)
        np.testing.assert_array_equal(vel, vel0)
    assert not np.array_equal(state.pos, pos0)


@pytest.mark.parametrize("stepper", FIXED_STEPPERS)
def test_input_arrays_are_not_written_in_place(stepper, damped_oscillator_deriv):
    pos0 = np.array([0.3, -1.2, 2.0])
    vel0 = np.array([1.0, 0.5, -0.25])
    state = ParticleState(pos=pos0, vel=vel0)

    stepper(state, 0.0, 0.1, stage_evaluator(damped_oscillator_deriv))

    np.testing.assert_array_equal(pos0, [0.3, -1.2, 2.0])
    np.testing.assert_array_equal(vel0, [1.0, 0.5, -0.25])
    assert state.pos is not pos0


def test_evaluator_errors_propagate():
    def evaluate(state, time, offset, prior):
        raise RuntimeError("force model failed")

    state = ParticleState(pos=1.0, vel=1.0)
    with pytest.raises(RuntimeError, match="force model failed"):
        rk4_step(state, 0.0, 0.1, evaluate)
    assert state.pos == 1.0 and state.vel == 1.0


def test_registry_lookup():
    assert available_integrators() == ["euler", "midpoint", "ralston", "rk4"]
    assert get_integrator("euler") is euler_step
    assert get_integrator("RK4") is rk4_step
    assert get_integrator() is rk4_step
    with pytest.raises(ValueError, match="Unknown integrator"):
        get_integrator("leapfrog")
