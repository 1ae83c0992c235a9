# jaxstep/utils/__init__.py
"""
Utilities for jaxstep.

Contains:
- jax_utils: JAX guards, array helpers, 64-bit switch
- config: package-wide settings
- diagnostics: backend availability report

All modules handle JAX availability gracefully with NumPy fallbacks.
"""

from .jax_utils import (
    JAX_AVAILABLE,
    get_jax_version,
    get_devices,
    asarray,
    x64_enabled,
    set_x64,
)

from .config import (
    PackageConfig,
    get_config,
    configure,
    reset_config,
)

from .diagnostics import check_system_requirements

__all__ = [
    "JAX_AVAILABLE",
    "get_jax_version",
    "get_devices",
    "asarray",
    "x64_enabled",
    "set_x64",
    "PackageConfig",
    "get_config",
    "configure",
    "reset_config",
    "check_system_requirements",
]
