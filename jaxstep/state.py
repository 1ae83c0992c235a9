# jaxstep/state.py
"""
Point-mass state containers.

``ParticleState`` holds the position and velocity a stepper advances in
place. ``DeltaState`` is one derivative sample dy/dt = (velocity,
acceleration) produced by an evaluator for a single stage.

Both accept any value supporting ``+`` and scalar ``*``: Python floats,
NumPy arrays or JAX arrays of any dimension.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Optional

from .utils.config import get_config
from .utils.jax_utils import asarray


@dataclass
class ParticleState:
    """
    Position and velocity of a single point mass.

    Steppers mutate ``pos`` and ``vel`` by reassignment, once each per
    step, after every stage sample of that step has been evaluated.
    """
    pos: Any
    vel: Any

    @classmethod
    def create(cls, pos, vel, dtype: Optional[str] = None) -> "ParticleState":
        """
        Build a state from array-likes using the package dtype.

        Parameters
        ----------
        pos, vel : array_like
            Initial position and velocity, same shape
        dtype : str, optional
            'float32' or 'float64'; uses the configured dtype if None

        Returns
        -------
        ParticleState
        """
        config = get_config()
        dtype = dtype or config.dtype
        pos_arr = asarray(pos, dtype=dtype, use_jax=config.use_jax_arrays)
        vel_arr = asarray(vel, dtype=dtype, use_jax=config.use_jax_arrays)
        if pos_arr.shape != vel_arr.shape:
            raise ValueError(
                f"Position and velocity must have the same shape, got {pos_arr.shape} and {vel_arr.shape}"
            )
        return cls(pos=pos_arr, vel=vel_arr)

    def copy(self) -> "ParticleState":
        """Return an independent copy (arrays are copied, scalars shared)."""
        return ParticleState(pos=_copy_value(self.pos), vel=_copy_value(self.vel))


@dataclass(frozen=True)
class DeltaState:
    """
    Derivative sample at one stage: dpos/dt and dvel/dt.

    The defaults are scalar zeros, which stand for "no prior sample" and
    broadcast against any position/velocity type.
    """
    vel: Any = 0.0
    accel: Any = 0.0


def _copy_value(value):
    copy = getattr(value, "copy", None)
    return copy() if callable(copy) else value
