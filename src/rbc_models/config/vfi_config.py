# rbc_models/config/vfi_config.py
"""
Configuration for the Value Function Iteration (VFI) solver.

This module provides the grid specification, numerical tolerances and
reporting settings of the discrete-grid VFI method.

Example:
    >>> from rbc_models.config.vfi_config import GridConfig
    >>> config = GridConfig()
    >>> print(f"Capital grid points: {config.n_capital}")
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class GridConfig:
    """
    Configuration for VFI computational grids and numerical tolerances.

    This immutable configuration controls the discretization of the capital
    state and the convergence criteria for the Bellman iteration.  Use
    ``dataclasses.replace`` to derive variants.

    Attributes:
        n_capital: Number of points in the capital grid.
        capital_step: Distance between consecutive capital grid points.
        capital_lower_fraction: Lowest grid point as a fraction of
            steady-state capital.
        tol_vfi: Sup-norm convergence tolerance for the VFI loop.
        max_iter_vfi: Maximum iterations for the VFI loop.
        report_every: Progress is reported on the first iteration and on
            every multiple of this number.
        diagnostic_index: (capital index, productivity index) of the policy
            cell printed after a solve as a regression check.
    """

    n_capital: int = 17820
    capital_step: float = 1e-5
    capital_lower_fraction: float = 0.5

    tol_vfi: float = 1e-7
    max_iter_vfi: int = 2000
    report_every: int = 10

    diagnostic_index: Tuple[int, int] = (999, 2)
