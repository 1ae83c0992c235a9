# jaxstep/integrators/euler.py
"""
Forward Euler integration.

Given dy/dt = f(t, y) and y(t0) = y0 with step h:

    y_{n+1} = y_n + h * f(t_n, y_n)

For dy/dt = y, y(0) = 1, h = 0.5 the sequence is 1.5, 2.25, 3.375,
5.0625, 7.5938, 11.3906, 17.0859, 25.6289 (exact y(4) = 54.59815).
"""

from __future__ import annotations

from ..state import DeltaState, ParticleState
from .base import StageEvaluator


def euler_step(
    state: ParticleState,
    time: float,
    dt: float,
    evaluate: StageEvaluator,
) -> None:
    """
    Forward Euler step: one evaluation at the start of the step.

    Parameters
    ----------
    state : ParticleState
        State to advance in place
    time : float
        Time at the start of the step
    dt : float
        Time step size
    evaluate : StageEvaluator
        Derivative evaluation ``(state, time, offset, prior) -> DeltaState``

    Notes
    -----
    First-order accurate; exact only for a constant derivative.
    """
    k1 = evaluate(state, time, 0.0, DeltaState())

    state.pos = state.pos + dt * k1.vel
    state.vel = state.vel + dt * k1.accel
