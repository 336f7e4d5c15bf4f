"""Value Function Iteration (VFI) solver for the RBC model.

This package provides:

* :class:`RBCModelVFI` — VFI solver for the RBC model with full
  depreciation (2-D state space: capital × productivity).
* :class:`VFIEngine` — Bellman fixed-point iterator with monotone
  policy search.

Sub-packages
------------
kernels
    Expected-value and sup-norm kernels (XLA) and the monotone
    maximisation kernel (Numba).
grids
    Grid construction.

Modules
-------
policies
    Policy extraction and monotonicity check.
engine
    Bellman fixed-point iterator.
"""

from rbc_models.vfi.engine import VFIEngine, VFIResult
from rbc_models.vfi.rbc import RBCModelVFI

__all__ = [
    "RBCModelVFI",
    "VFIEngine",
    "VFIResult",
]
