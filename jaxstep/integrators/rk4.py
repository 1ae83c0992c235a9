# jaxstep/integrators/rk4.py

from __future__ import annotations

from ..state import DeltaState, ParticleState
from .base import StageEvaluator


def rk4_step(
    state: ParticleState,
    time: float,
    dt: float,
    evaluate: StageEvaluator,
) -> None:
    """
    Classical Runge-Kutta 4 integrator.

    Parameters
    ----------
    state : ParticleState, advanced in place
    time : scalar time at the start of the step
    dt : scalar step size
    evaluate : callable(state, time, offset, prior) -> DeltaState

    Notes
    -----
    Weights (1, 2, 2, 1)/6; fourth-order accurate for smooth derivatives.
    """
    dt_half = 0.5 * dt

    # k1 at the start, then each stage built from the previous one
    k1 = evaluate(state, time, 0.0, DeltaState())
    k2 = evaluate(state, time, dt_half, k1)
    k3 = evaluate(state, time, dt_half, k2)
    k4 = evaluate(state, time, dt, k3)

    state.pos = state.pos + dt / 6.0 * (k1.vel + 2 * (k2.vel + k3.vel) + k4.vel)
    state.vel = state.vel + dt / 6.0 * (k1.accel + 2 * (k2.accel + k3.accel) + k4.accel)
