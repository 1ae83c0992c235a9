"""
jaxstep: explicit single-step integrators for point-mass states.

Advances a state (position, velocity) by one step of dy/dt = f(t, y)
with a caller-supplied derivative evaluation:
- Fixed-formula steppers: Euler, Midpoint, Ralston, classical RK4
- General explicit Runge-Kutta stepper driven by a Butcher tableau
- Works on Python floats, NumPy arrays or JAX arrays

Core workflow:
1. Build a state → ParticleState.create
2. Describe the dynamics → stage_evaluator / tableau_evaluator
3. Pick a scheme → get_integrator / get_tableau
4. Step in your own loop → rk4_step(state, t, dt, evaluate)
"""

from __future__ import annotations

# Version info
__version__ = "0.1.0"
__author__ = "jaxstep Contributors"

from .utils.jax_utils import JAX_AVAILABLE
from .utils.config import configure, get_config, reset_config
from .utils.diagnostics import check_system_requirements

from .state import ParticleState, DeltaState

from .integrators import (
    StageEvaluator,
    TableauEvaluator,
    euler_step,
    midpoint_step,
    ralston_step,
    rk4_step,
    explicit_rk_step,
    ButcherTableau,
    get_tableau,
    get_integrator,
    available_integrators,
)

from .evaluators import (
    stage_evaluator,
    tableau_evaluator,
    acceleration_derivative,
)

__all__ = [
    # Version
    "__version__",
    # Utilities
    "JAX_AVAILABLE",
    "configure",
    "get_config",
    "reset_config",
    "check_system_requirements",
    # State
    "ParticleState",
    "DeltaState",
    # Evaluator contracts and adapters
    "StageEvaluator",
    "TableauEvaluator",
    "stage_evaluator",
    "tableau_evaluator",
    "acceleration_derivative",
    # Steppers
    "euler_step",
    "midpoint_step",
    "ralston_step",
    "rk4_step",
    "explicit_rk_step",
    # Tableaux and lookup
    "ButcherTableau",
    "get_tableau",
    "get_integrator",
    "available_integrators",
]
