# jaxstep/evaluators.py
"""
Adapters from a plain derivative function to the two evaluator shapes.

Callers usually know how to compute dy/dt at a given state and time
(``deriv(state, t) -> DeltaState``, e.g. "acceleration from the current
forces"). The steppers instead need to evaluate at an intermediate
state built from earlier stage samples. These helpers do that
construction:

- ``stage_evaluator`` for ``euler_step``, ``midpoint_step``,
  ``ralston_step`` and ``rk4_step``;
- ``tableau_evaluator`` for ``explicit_rk_step``.

The input state is never mutated; a fresh ``ParticleState`` is built for
every intermediate point.
"""

from __future__ import annotations
from typing import Callable, List, Optional

from .integrators.base import DerivativeFn, StageEvaluator, TableauEvaluator
from .integrators.tableau import ButcherTableau
from .state import DeltaState, ParticleState


def stage_evaluator(deriv: DerivativeFn) -> StageEvaluator:
    """
    Wrap ``deriv`` into the ``(state, time, offset, prior)`` shape.

    The sample is taken at ``time + offset`` and at the state
    ``(pos + offset * prior.vel, vel + offset * prior.accel)``. With a zero
    ``prior`` this is the state itself.

    Examples
    --------
    >>> evaluate = stage_evaluator(lambda s, t: DeltaState(vel=s.vel, accel=-s.pos))
    >>> rk4_step(state, 0.0, 0.01, evaluate)  # doctest: +SKIP
    """
    def evaluate(state: ParticleState, time: float, offset: float, prior: DeltaState) -> DeltaState:
        intermediate = ParticleState(
            pos=state.pos + offset * prior.vel,
            vel=state.vel + offset * prior.accel,
        )
        return deriv(intermediate, time + offset)

    return evaluate


def tableau_evaluator(deriv: DerivativeFn) -> TableauEvaluator:
    """
    Wrap ``deriv`` into the ``(state, time, dt, ks, tableau, stage)`` shape.

    Stage ``i`` is sampled at ``time + c[i] * dt`` and at
    ``y + dt * sum_{j<i} a[i][j] * ks[j]``. Zero coefficients are skipped,
    so only stages the tableau actually couples to are read.
    """
    def evaluate(
        state: ParticleState,
        time: float,
        dt: float,
        ks: List[Optional[DeltaState]],
        tableau: ButcherTableau,
        stage: int,
    ) -> DeltaState:
        row = tableau.a[stage]
        pos = state.pos
        vel = state.vel
        for j in range(stage):
            a_ij = row[j]
            if a_ij == 0.0:
                continue
            pos = pos + (dt * a_ij) * ks[j].vel
            vel = vel + (dt * a_ij) * ks[j].accel
        return deriv(ParticleState(pos=pos, vel=vel), time + tableau.c[stage] * dt)

    return evaluate


def acceleration_derivative(accel_fn: Callable) -> DerivativeFn:
    """
    Build ``deriv`` from a force law ``accel_fn(pos, vel, t) -> accel``.

    The position derivative is the velocity itself, which is the
    second-order point-mass system written as a first-order one.
    """
    def deriv(state: ParticleState, t: float) -> DeltaState:
        return DeltaState(vel=state.vel, accel=accel_fn(state.pos, state.vel, t))

    return deriv
