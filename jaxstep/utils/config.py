# jaxstep/utils/config.py
"""
Global package configuration.

Provides centralized settings for data types, device placement and the
default stepper used when callers ask for an integrator by name.
"""

from __future__ import annotations
from dataclasses import dataclass, field, replace
from typing import Dict, Any, Optional
import warnings

from .jax_utils import JAX_AVAILABLE, get_devices, get_jax_version, set_x64

if JAX_AVAILABLE:
    try:
        import jax
    except Exception:
        JAX_AVAILABLE = False


_FIXED_STEPPERS = ("euler", "midpoint", "ralston", "rk4")


@dataclass
class PackageConfig:
    """
    Global configuration for the jaxstep package.

    Controls the floating point type of states built through
    ``ParticleState.create``, device placement for JAX arrays and the
    integrator returned by ``get_integrator(None)``.

    Notes
    -----
    With JAX installed, ``jax_enable_x64`` follows ``dtype`` process-wide.
    Importing jaxstep applies the float64 default and so enables it;
    ``configure(dtype="float32")`` disables it again, including when it
    was enabled outside jaxstep.
    """
    # Data type settings
    dtype: str = "float64"              # 'float32' | 'float64'

    # Device settings
    device: str = "cpu"                 # 'cpu' | 'gpu' | 'tpu'
    device_id: Optional[int] = None     # Specific device ID
    use_jax_arrays: bool = False        # Build states from jax.numpy arrays

    # Stepping
    default_integrator: str = "rk4"     # 'euler' | 'midpoint' | 'ralston' | 'rk4'

    # Output
    verbose: bool = False

    _available_devices: list = field(default_factory=list, init=False)

    def __post_init__(self):
        self._detect_devices()
        self._validate_config()
        self._apply_jax_config()

    def _detect_devices(self):
        """Detect available JAX devices."""
        self._available_devices = [{"type": "cpu", "devices": get_devices("cpu")}]
        for kind in ("gpu", "tpu"):
            devices = get_devices(kind)
            if devices:
                self._available_devices.append({"type": kind, "devices": devices})

    def _validate_config(self):
        """Validate configuration settings."""
        if self.dtype not in ["float32", "float64"]:
            raise ValueError(f"dtype must be 'float32' or 'float64', got '{self.dtype}'")

        available_device_types = [d["type"] for d in self._available_devices]
        if self.device not in available_device_types:
            warnings.warn(f"Device '{self.device}' not available, using 'cpu'")
            self.device = "cpu"

        self.default_integrator = str(self.default_integrator).lower()
        if self.default_integrator not in _FIXED_STEPPERS:
            raise ValueError(
                f"default_integrator must be one of {list(_FIXED_STEPPERS)}, "
                f"got '{self.default_integrator}'"
            )

    def _apply_jax_config(self):
        """Apply JAX-specific configuration."""
        if not JAX_AVAILABLE:
            return

        try:
            set_x64(self.dtype == "float64")

            if self.device != "cpu":
                device_info = next((d for d in self._available_devices if d["type"] == self.device), None)
                if device_info and device_info["devices"]:
                    target_device = device_info["devices"][self.device_id or 0]
                    jax.config.update("jax_default_device", target_device)
        except Exception as e:
            warnings.warn(f"JAX configuration failed: {e}")

    # ---------- Configuration methods ----------

    def set_dtype(self, dtype: str) -> None:
        """Set global data type."""
        if dtype not in ["float32", "float64"]:
            raise ValueError(f"dtype must be 'float32' or 'float64', got '{dtype}'")
        self.dtype = dtype
        self._apply_jax_config()

    def set_device(self, device: str, device_id: Optional[int] = None) -> None:
        """Set target device for computation."""
        self.device = device
        self.device_id = device_id
        self._validate_config()
        self._apply_jax_config()

    def get_system_info(self) -> Dict[str, Any]:
        """Get device information and the active settings."""
        return {
            "available_devices": [d["type"] for d in self._available_devices],
            "jax_available": JAX_AVAILABLE,
            "jax_version": get_jax_version(),
            "current_config": {
                "dtype": self.dtype,
                "device": self.device,
                "use_jax_arrays": self.use_jax_arrays,
                "default_integrator": self.default_integrator,
            },
        }


# Global configuration instance
_global_config = PackageConfig()


def get_config() -> PackageConfig:
    """Get global package configuration."""
    return _global_config


def configure(**kwargs) -> None:
    """
    Configure package settings.

    Parameters
    ----------
    **kwargs : dict
        Configuration parameters to update

    Raises
    ------
    ValueError
        If an updated value is invalid; the active configuration is left
        unchanged.
    """
    global _global_config

    updates = {}
    for key, value in kwargs.items():
        if hasattr(_global_config, key) and not key.startswith("_"):
            updates[key] = value
        else:
            warnings.warn(f"Unknown configuration parameter: {key}")

    # Validated and applied in __post_init__ before it replaces the active config
    _global_config = replace(_global_config, **updates)


def reset_config() -> None:
    """Reset configuration to defaults."""
    global _global_config
    _global_config = PackageConfig()
