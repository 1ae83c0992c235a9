import sys
from pathlib import Path

import pytest

# Add project root to path for testing
sys.path.insert(0, str(Path(__file__).parent.parent))

from jaxstep.state import DeltaState  # noqa: E402
from jaxstep.utils.config import reset_config  # noqa: E402


@pytest.fixture(autouse=True)
def _fresh_config():
    """Every test starts and ends with the default package configuration."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def exponential_deriv():
    """dy/dt = y with pos and vel both carrying y."""
    def deriv(state, t):
        return DeltaState(vel=state.pos, accel=state.vel)
    return deriv


@pytest.fixture
def damped_oscillator_deriv():
    """Forced, damped spring in 3D: a = -k x - c v + F sin(t)."""
    import numpy as np

    forcing = np.array([1.0, 0.0, 0.5])

    def deriv(state, t):
        accel = -4.0 * state.pos - 0.3 * state.vel + forcing * np.sin(t)
        return DeltaState(vel=state.vel, accel=accel)
    return deriv
