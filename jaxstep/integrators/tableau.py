# jaxstep/integrators/tableau.py
"""
Butcher tableaux for explicit Runge-Kutta methods.

A tableau (a, b, c) with s stages defines

    k_i     = f(t_n + c_i h, y_n + h * sum_{j<i} a_ij k_j)
    y_{n+1} = y_n + h * sum_i b_i k_i

Only explicit tableaux are representable: ``a`` must be strictly lower
triangular, which is checked once at construction.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Optional, Sequence, Tuple
import math
import warnings

import numpy as np


def _as_tuple(values: Sequence[float]) -> Tuple[float, ...]:
    return tuple(float(v) for v in values)


@dataclass(frozen=True)
class ButcherTableau:
    """
    Immutable coefficient table of an explicit Runge-Kutta method.

    Parameters
    ----------
    a : sequence of sequences, shape (s, s)
        Stage coupling coefficients, strictly lower triangular
    b : sequence, length s
        Combination weights; ``len(b)`` fixes the stage count
    c : sequence, length s
        Stage nodes as fractions of the step size
    name : str, optional
        Human-readable method name
    order : int, optional
        Formal order of accuracy

    Raises
    ------
    ValueError
        If the shapes disagree or ``a`` has a nonzero entry on or above
        the diagonal.
    """
    a: Tuple[Tuple[float, ...], ...]
    b: Tuple[float, ...]
    c: Tuple[float, ...]
    name: str = "custom"
    order: Optional[int] = None

    def __post_init__(self):
        # Freeze whatever sequences were passed in
        object.__setattr__(self, "a", tuple(_as_tuple(row) for row in self.a))
        object.__setattr__(self, "b", _as_tuple(self.b))
        object.__setattr__(self, "c", _as_tuple(self.c))
        self._validate()

    def _validate(self) -> None:
        s = len(self.b)
        if s == 0:
            raise ValueError(f"Tableau '{self.name}' must have at least one stage (b is empty)")
        if len(self.c) != s:
            raise ValueError(f"Tableau '{self.name}': len(c)={len(self.c)} does not match len(b)={s}")
        if len(self.a) != s:
            raise ValueError(f"Tableau '{self.name}': a has {len(self.a)} rows, expected {s}")

        for i, row in enumerate(self.a):
            if len(row) != s:
                raise ValueError(f"Tableau '{self.name}': row {i} of a has length {len(row)}, expected {s}")
            for j in range(i, s):
                if row[j] != 0.0:
                    raise ValueError(
                        f"Tableau '{self.name}' is not explicit: a[{i}][{j}]={row[j]} "
                        f"(entries with j >= i must be zero)"
                    )

        values = np.array(self.b + self.c + tuple(v for row in self.a for v in row))
        if not np.all(np.isfinite(values)):
            raise ValueError(f"Tableau '{self.name}' contains non-finite coefficients")

        # Consistency conditions: a violation is still a valid explicit
        # scheme, just not a convergent one in the usual sense.
        if not math.isclose(math.fsum(self.b), 1.0, rel_tol=0.0, abs_tol=1e-12):
            warnings.warn(f"Tableau '{self.name}': weights sum to {math.fsum(self.b)}, not 1")
        for i, row in enumerate(self.a):
            if not math.isclose(math.fsum(row), self.c[i], rel_tol=0.0, abs_tol=1e-12):
                warnings.warn(
                    f"Tableau '{self.name}': c[{i}]={self.c[i]} differs from row sum of a ({math.fsum(row)})"
                )

    @property
    def stages(self) -> int:
        """Number of stages s."""
        return len(self.b)

    def as_arrays(self) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """Return (a, b, c) as float64 NumPy arrays (copies)."""
        return (
            np.array(self.a, dtype=np.float64),
            np.array(self.b, dtype=np.float64),
            np.array(self.c, dtype=np.float64),
        )


# ---------------------------------------------------------------------------
# Standard explicit methods
# ---------------------------------------------------------------------------

EULER = ButcherTableau(
    a=[[0.0]],
    b=[1.0],
    c=[0.0],
    name="euler",
    order=1,
)

MIDPOINT = ButcherTableau(
    a=[[0.0, 0.0],
       [0.5, 0.0]],
    b=[0.0, 1.0],
    c=[0.0, 0.5],
    name="midpoint",
    order=2,
)

HEUN = ButcherTableau(
    a=[[0.0, 0.0],
       [1.0, 0.0]],
    b=[0.5, 0.5],
    c=[0.0, 1.0],
    name="heun",
    order=2,
)

RALSTON = ButcherTableau(
    a=[[0.0, 0.0],
       [2.0 / 3.0, 0.0]],
    b=[0.25, 0.75],
    c=[0.0, 2.0 / 3.0],
    name="ralston",
    order=2,
)

KUTTA3 = ButcherTableau(
    a=[[0.0, 0.0, 0.0],
       [0.5, 0.0, 0.0],
       [-1.0, 2.0, 0.0]],
    b=[1.0 / 6.0, 2.0 / 3.0, 1.0 / 6.0],
    c=[0.0, 0.5, 1.0],
    name="kutta3",
    order=3,
)

RK4 = ButcherTableau(
    a=[[0.0, 0.0, 0.0, 0.0],
       [0.5, 0.0, 0.0, 0.0],
       [0.0, 0.5, 0.0, 0.0],
       [0.0, 0.0, 1.0, 0.0]],
    b=[1.0 / 6.0, 1.0 / 3.0, 1.0 / 3.0, 1.0 / 6.0],
    c=[0.0, 0.5, 0.5, 1.0],
    name="rk4",
    order=4,
)

RK38 = ButcherTableau(
    a=[[0.0, 0.0, 0.0, 0.0],
       [1.0 / 3.0, 0.0, 0.0, 0.0],
       [-1.0 / 3.0, 1.0, 0.0, 0.0],
       [1.0, -1.0, 1.0, 0.0]],
    b=[1.0 / 8.0, 3.0 / 8.0, 3.0 / 8.0, 1.0 / 8.0],
    c=[0.0, 1.0 / 3.0, 2.0 / 3.0, 1.0],
    name="rk38",
    order=4,
)

TABLEAUX: Dict[str, ButcherTableau] = {
    t.name: t for t in (EULER, MIDPOINT, HEUN, RALSTON, KUTTA3, RK4, RK38)
}


def get_tableau(name: str) -> ButcherTableau:
    """Look up a standard tableau by name (case-insensitive)."""
    key = name.lower()
    if key not in TABLEAUX:
        raise ValueError(f"Unknown tableau: {name}. Available: {sorted(TABLEAUX)}")
    return TABLEAUX[key]
