"""
Grid management for VFI models.

This package provides utilities for constructing the discretized capital
grid and the productivity Markov chain used by the VFI solver.
"""

from rbc_models.vfi.grids.grid_builder import GridBuilder

__all__ = [
    'GridBuilder',
]
