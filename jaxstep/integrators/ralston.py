# jaxstep/integrators/ralston.py
"""Ralston's two-stage second-order method (b = 1/4, 3/4; c2 = 2/3)."""

from __future__ import annotations

from ..state import DeltaState, ParticleState
from .base import StageEvaluator


def ralston_step(
    state: ParticleState,
    time: float,
    dt: float,
    evaluate: StageEvaluator,
) -> None:
    """
    Ralston step: k1 at the start, k2 at 2/3 dt built from k1.

    The evaluator is responsible for applying the offset to k1 to form
    the intermediate state k2 is sampled at.
    """
    k1 = evaluate(state, time, 0.0, DeltaState())
    k2 = evaluate(state, time, (2.0 / 3.0) * dt, k1)

    state.pos = state.pos + dt * (0.25 * k1.vel + 0.75 * k2.vel)
    state.vel = state.vel + dt * (0.25 * k1.accel + 0.75 * k2.accel)
