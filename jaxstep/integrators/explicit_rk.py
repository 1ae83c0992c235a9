# jaxstep/integrators/explicit_rk.py
"""
Tableau-driven explicit Runge-Kutta integration.

Given dy/dt = f(t, y) and y(t0) = y0:

    y_{n+1} = y_n + h * sum_{i=1..s} b_i k_i
    k_i     = f(t_n + c_i h, y_n + h * sum_j a_ij k_j)

The stepper only drives the stage loop and the final combination; the
evaluator consults ``tableau.a`` and ``tableau.c`` to build each
intermediate state (see ``jaxstep.evaluators.tableau_evaluator``).
"""

from __future__ import annotations
from typing import List, Optional

from ..state import DeltaState, ParticleState
from .base import TableauEvaluator
from .tableau import ButcherTableau


def explicit_rk_step(
    state: ParticleState,
    time: float,
    dt: float,
    tableau: ButcherTableau,
    evaluate: TableauEvaluator,
) -> None:
    """
    General explicit Runge-Kutta step.

    Parameters
    ----------
    state : ParticleState
        State to advance in place
    time : float
        Time at the start of the step
    dt : float
        Time step size
    tableau : ButcherTableau
        Method coefficients; ``tableau.stages`` stages are evaluated
    evaluate : TableauEvaluator
        ``(state, time, dt, ks, tableau, stage) -> DeltaState``

    Notes
    -----
    Stage i is evaluated only after stages 0..i-1 are stored in ``ks``;
    entries not yet computed are None. Explicitness is a property of the
    tableau and is not re-checked here.
    """
    n_stages = len(tableau.b)
    ks: List[Optional[DeltaState]] = [None] * n_stages
    for i in range(n_stages):
        ks[i] = evaluate(state, time, dt, ks, tableau, i)

    delta_pos = 0.0
    delta_vel = 0.0
    for b_i, k_i in zip(tableau.b, ks):
        delta_pos = delta_pos + b_i * k_i.vel
        delta_vel = delta_vel + b_i * k_i.accel

    state.pos = state.pos + dt * delta_pos
    state.vel = state.vel + dt * delta_vel
