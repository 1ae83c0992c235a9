"""
jaxstep Integrators

Explicit single-step methods for point-mass states. The fixed-formula
steppers follow the signature:

    step(state, t, dt, evaluate)

where:
- state: ParticleState, advanced in place
- t: scalar time at the start of the step
- dt: scalar step size
- evaluate: callable (state, t, offset, prior) -> DeltaState

The tableau-driven stepper takes the tableau as an extra argument:

    explicit_rk_step(state, t, dt, tableau, evaluate)

with evaluate: callable (state, t, dt, ks, tableau, stage) -> DeltaState.
"""

from typing import List, Optional

from .base import (
    DerivativeFn,
    IntegratorFn,
    IntegratorRegistry,
    StageEvaluator,
    TableauEvaluator,
)
from .euler import euler_step
from .midpoint import midpoint_step
from .ralston import ralston_step
from .rk4 import rk4_step
from .explicit_rk import explicit_rk_step
from .tableau import (
    ButcherTableau,
    EULER,
    MIDPOINT,
    HEUN,
    RALSTON,
    KUTTA3,
    RK4,
    RK38,
    TABLEAUX,
    get_tableau,
)

INTEGRATORS: IntegratorRegistry = {
    'euler': euler_step,
    'midpoint': midpoint_step,
    'ralston': ralston_step,
    'rk4': rk4_step,
}


def available_integrators() -> List[str]:
    """Names accepted by ``get_integrator``."""
    return sorted(INTEGRATORS)


def get_integrator(name: Optional[str] = None) -> IntegratorFn:
    """
    Look up a fixed-formula stepper by name.

    name: 'euler', 'midpoint', 'ralston' or 'rk4'; None uses the
    configured ``default_integrator``.
    """
    if name is None:
        from ..utils.config import get_config
        name = get_config().default_integrator
    key = name.lower()
    if key not in INTEGRATORS:
        raise ValueError(f"Unknown integrator: {name}. Available: {available_integrators()}")
    return INTEGRATORS[key]


__all__ = [
    "DerivativeFn",
    "IntegratorFn",
    "StageEvaluator",
    "TableauEvaluator",
    "euler_step",
    "midpoint_step",
    "ralston_step",
    "rk4_step",
    "explicit_rk_step",
    "ButcherTableau",
    "EULER",
    "MIDPOINT",
    "HEUN",
    "RALSTON",
    "KUTTA3",
    "RK4",
    "RK38",
    "TABLEAUX",
    "get_tableau",
    "INTEGRATORS",
    "available_integrators",
    "get_integrator",
]
