# jaxstep/integrators/base.py

from __future__ import annotations
from typing import TYPE_CHECKING, Callable, List, Optional, Protocol

from ..state import DeltaState, ParticleState

if TYPE_CHECKING:
    from .tableau import ButcherTableau


class StageEvaluator(Protocol):
    """
    Derivative evaluation for the fixed-formula steppers.

    Called as ``evaluate(state, time, offset, prior)`` where ``offset`` is
    the sub-step offset from ``time`` (0 for the first stage) and
    ``prior`` is the stage sample the intermediate state is built from
    (``DeltaState()`` when there is none). Must not mutate ``state``.
    """

    def __call__(
        self,
        state: ParticleState,
        time: float,
        offset: float,
        prior: DeltaState,
    ) -> DeltaState:
        ...


class TableauEvaluator(Protocol):
    """
    Derivative evaluation for the tableau-driven stepper.

    Called as ``evaluate(state, time, dt, ks, tableau, stage)``. Only
    ``ks[0:stage]`` are filled; the evaluator combines them with
    ``tableau.a[stage]`` and evaluates at ``time + tableau.c[stage] * dt``.
    Must not mutate ``state``, ``ks`` or ``tableau``.
    """

    def __call__(
        self,
        state: ParticleState,
        time: float,
        dt: float,
        ks: List[Optional[DeltaState]],
        tableau: "ButcherTableau",
        stage: int,
    ) -> DeltaState:
        ...


class IntegratorFn(Protocol):
    """
    Protocol for fixed-formula step functions.

    All of ``euler_step``, ``midpoint_step``, ``ralston_step`` and
    ``rk4_step`` follow this signature and return None; the state is
    advanced in place.
    """

    def __call__(
        self,
        state: ParticleState,
        time: float,
        dt: float,
        evaluate: StageEvaluator,
    ) -> None:
        ...


# Utility type aliases for convenience
DerivativeFn = Callable[[ParticleState, float], DeltaState]
"""Plain derivative function ``deriv(state, t) -> DeltaState``."""

IntegratorRegistry = dict[str, IntegratorFn]
"""Registry mapping integrator names to functions."""
