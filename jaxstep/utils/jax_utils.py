# jaxstep/utils/jax_utils.py
from __future__ import annotations
from typing import Any, Optional

try:
    import jax
    import jax.numpy as jnp
    JAX_AVAILABLE = True
except Exception:
    JAX_AVAILABLE = False
    jax = None  # type: ignore
    jnp = None  # type: ignore

import numpy as np


def get_jax_version() -> Optional[str]:
    """Return the JAX version string if available, else None."""
    return getattr(jax, "__version__", None) if JAX_AVAILABLE else None


def get_devices(kind: Optional[str] = None):
    """
    Return the list of JAX devices, or [] if JAX is unavailable.

    kind: 'cpu'|'gpu'|'tpu' or None for all.
    """
    if not JAX_AVAILABLE:
        return []
    try:
        return jax.devices(kind) if kind else jax.devices()
    except Exception:
        return []


def asarray(x: Any, dtype: Any = None, use_jax: bool = False):
    """Create an array with JAX when requested and available, else NumPy."""
    if use_jax and JAX_AVAILABLE:
        return jnp.asarray(x, dtype=dtype)
    return np.asarray(x, dtype=dtype)


def x64_enabled() -> bool:
    """Whether JAX computes in 64-bit precision."""
    if not JAX_AVAILABLE:
        return False
    return jnp.asarray(0.0).dtype == np.float64


def set_x64(enable: bool) -> None:
    """Toggle JAX 64-bit arithmetic; no-op without JAX."""
    if JAX_AVAILABLE:
        jax.config.update("jax_enable_x64", bool(enable))
