# rbc_models/vfi/grids/grid_builder.py
"""
Grid construction utilities for VFI state spaces.

This module builds the evenly spaced capital grid anchored at a fraction
of steady-state capital, and converts the calibrated productivity chain
into tensors.
"""

from typing import Tuple

import tensorflow as tf

from rbc_models.config.economic_params import EconomicParams
from rbc_models.config.vfi_config import GridConfig
from rbc_models.core.types import TENSORFLOW_DTYPE, Tensor
from rbc_models.econ import SteadyStateCalculator


class GridBuilder:
    """
    Utility class for constructing VFI state space grids.

    This class provides static methods for building discretized grids
    for the capital and productivity state variables.
    """

    @staticmethod
    def build_productivity_grid(
        params: EconomicParams
    ) -> Tuple[Tensor, Tensor]:
        """
        Build the productivity grid from the calibrated Markov chain.

        The transition matrix is used exactly as calibrated; its rows sum to
        one only up to the four-decimal rounding of the published values.

        Args:
            params: Economic parameters with productivity levels and
                transition matrix.

        Returns:
            Tuple containing:
                - z_grid: Productivity grid tensor, shape ``(n_z,)``.
                - P: Transition probability matrix, shape ``(n_z, n_z)``.
        """
        z_grid = tf.constant(params.productivity_values, dtype=TENSORFLOW_DTYPE)
        P = tf.constant(params.transition_matrix, dtype=TENSORFLOW_DTYPE)
        return z_grid, P

    @staticmethod
    def build_capital_grid(
        config: GridConfig,
        params: EconomicParams,
    ) -> Tuple[Tensor, float]:
        """
        Build the evenly spaced capital grid.

        ``k_grid[i] = capital_lower_fraction * k_ss + capital_step * i``
        for ``i = 0, ..., n_capital - 1``.

        Args:
            config: Grid configuration.
            params: Economic parameters.

        Returns:
            Tuple containing:
                - k_grid: Capital grid tensor, shape ``(n_capital,)``.
                - k_ss: Steady state capital value.
        """
        k_ss = SteadyStateCalculator.calculate_capital(params)
        k_min_val = config.capital_lower_fraction * k_ss

        k_grid = GridBuilder._build_step_grid(
            k_min_val, config.capital_step, config.n_capital
        )
        return k_grid, k_ss

    @staticmethod
    def _build_step_grid(
        min_val: float,
        step: float,
        n_points: int
    ) -> Tensor:
        """Build a grid of ``n_points`` values ``min_val + step * i``."""
        steps = tf.range(n_points, dtype=TENSORFLOW_DTYPE)
        return tf.cast(min_val, TENSORFLOW_DTYPE) + tf.cast(step, TENSORFLOW_DTYPE) * steps
