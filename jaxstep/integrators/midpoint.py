# jaxstep/integrators/midpoint.py
"""
Single-evaluation midpoint integration.

This is NOT the textbook two-stage midpoint method. It samples the
derivative once, at offset dt/2 with no prior stage, and applies

    pos += dt * (k1.vel + dt/2 * k1.vel)
    vel += dt * (1.5 * k1.accel)

For dy/dt = y the position update equals the textbook result
(y * (1 + h + h^2/2)); the velocity update does not. The formula is kept
as-is because existing trajectories depend on it. Use
``explicit_rk_step`` with ``MIDPOINT`` for the two-stage method.
"""

from __future__ import annotations

from ..state import DeltaState, ParticleState
from .base import StageEvaluator


def midpoint_step(
    state: ParticleState,
    time: float,
    dt: float,
    evaluate: StageEvaluator,
) -> None:
    """
    Approximate midpoint step with a single evaluation at dt/2.

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
    """
    k1 = evaluate(state, time, 0.5 * dt, DeltaState())

    state.pos = state.pos + dt * (k1.vel + (dt / 2) * k1.vel)
    state.vel = state.vel + dt * (k1.accel * 1.5)
