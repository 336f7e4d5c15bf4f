"""Numerical kernels for the VFI solver.

Modules
-------
bellman_kernels
    XLA-compiled expected-value computation and sup-norm.
monotone_kernels
    Numba-compiled maximisation step exploiting policy monotonicity.
"""

from rbc_models.vfi.kernels.bellman_kernels import (
    compute_ev,
    sup_norm_diff,
)
from rbc_models.vfi.kernels.monotone_kernels import (
    bellman_rhs,
    monotone_policy_search,
)

__all__ = [
    "compute_ev",
    "sup_norm_diff",
    "bellman_rhs",
    "monotone_policy_search",
]
