"""
jaxstep system diagnostics and requirement checking.

Reports which array backends are importable and how JAX is configured.
"""

from typing import Dict


def check_system_requirements(verbose: bool = True) -> Dict[str, bool]:
    """
    Check the array backends jaxstep can step states with.

    Parameters
    ----------
    verbose : bool, default True
        Whether to print detailed status information

    Returns
    -------
    Dict[str, bool]
        Dictionary mapping requirement names to availability status
    """
    if verbose:
        print("🔍 Checking jaxstep system requirements...")

    requirements = {
        'jaxstep': True,
    }

    try:
        import numpy
        requirements['numpy'] = True
        if verbose:
            print(f"   ✅ NumPy: v{numpy.__version__}")
    except ImportError:
        requirements['numpy'] = False
        if verbose:
            print("   ❌ NumPy: Not available")

    try:
        import jax
        requirements['jax'] = True
        if verbose:
            print(f"   ✅ JAX: v{jax.__version__}")
    except ImportError:
        requirements['jax'] = False
        if verbose:
            print("   ❌ JAX: Not available")

    from .jax_utils import x64_enabled
    requirements['jax_x64'] = x64_enabled()
    if verbose:
        status = "enabled" if requirements['jax_x64'] else "disabled"
        print(f"   ℹ️  JAX 64-bit arithmetic: {status}")

    return requirements
