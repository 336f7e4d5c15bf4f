"""Value Function Iteration for the RBC model with full depreciation.

Solves the planner problem

.. math::

    V(k, z) = \\max_{k'} (1 - \\beta) \\ln(z k^\\alpha - k')
              + \\beta \\, E[V(k', z') \\mid z]

on an evenly spaced capital grid placed just above half of steady-state
capital, with a five-state Markov chain for productivity.

Architecture note
-----------------
This module is a thin orchestrator.  The Bellman iteration is delegated
to ``vfi.engine``, its numerical kernels to ``vfi.kernels``, and policy
extraction to ``vfi.policies``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import tensorflow as tf

from rbc_models.config.economic_params import EconomicParams
from rbc_models.config.vfi_config import GridConfig
from rbc_models.econ import ProductionFunctions, SteadyStateCalculator
from rbc_models.vfi.engine import ProgressCallback, VFIEngine
from rbc_models.vfi.grids.grid_builder import GridBuilder
from rbc_models.vfi.policies import extract_policies, is_weakly_increasing

logger = logging.getLogger(__name__)


class RBCModelVFI:
    """VFI solver for the stochastic growth model with full depreciation.

    State space : (Capital K, Productivity Z)
    Choice      : Next-period capital K'

    Parameters
    ----------
    params : EconomicParams
        Structural economic parameters (frozen dataclass).
    config : GridConfig
        Grid sizes, tolerances, and iteration limits.

    Raises
    ------
    ValueError
        If the grid configuration is invalid, or if the lowest capital
        choice is not affordable in every state.
    """

    def __init__(
        self,
        params: EconomicParams,
        config: GridConfig,
    ) -> None:
        self._validate_inputs(config)

        self.params: EconomicParams = params
        self.config: GridConfig = config

        self._initialize_grids()
        self.output: tf.Tensor = self.compute_output()
        self._validate_feasibility()

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    @staticmethod
    def _validate_inputs(config: GridConfig) -> None:
        """Validate constructor arguments.

        Raises
        ------
        ValueError
            On any invalid grid configuration.
        """
        if config.n_capital < 2:
            raise ValueError(
                f"n_capital must be >= 2, got {config.n_capital}."
            )
        if config.capital_step <= 0.0:
            raise ValueError(
                f"capital_step must be positive, got {config.capital_step}."
            )
        if config.capital_lower_fraction <= 0.0:
            raise ValueError(
                "capital_lower_fraction must be positive, "
                f"got {config.capital_lower_fraction}."
            )

    def _validate_feasibility(self) -> None:
        """Require positive consumption at the lowest choice in every state.

        Output rises with capital and the monotone search only moves to
        choices already affordable at a lower capital level, so this check
        at the first grid point covers every state.
        """
        slack = self.output[0, :] - self.k_grid[0]
        if not bool(tf.reduce_all(slack > 0.0)):
            raise ValueError(
                "Lowest capital choice is not affordable in every "
                f"productivity state (output - k_min = {slack.numpy()})."
            )

    # ------------------------------------------------------------------
    # Grid initialisation
    # ------------------------------------------------------------------

    def _initialize_grids(self) -> None:
        """Build the productivity chain and capital grid."""
        self.z_grid: tf.Tensor
        self.P: tf.Tensor
        self.z_grid, self.P = GridBuilder.build_productivity_grid(self.params)

        self.k_grid: tf.Tensor
        self.k_ss: float
        self.k_grid, self.k_ss = GridBuilder.build_capital_grid(
            self.config, self.params
        )

        self.n_capital: int = int(tf.shape(self.k_grid)[0])
        self.n_productivity: int = int(tf.shape(self.z_grid)[0])

    # ------------------------------------------------------------------
    # Output table
    # ------------------------------------------------------------------

    def compute_output(self) -> tf.Tensor:
        """Compute output for every ``(k, z)`` pair.

        Returns
        -------
        tf.Tensor
            Shape ``(n_k, n_z)`` with entry ``z * k^alpha``.
        """
        k_curr = tf.reshape(self.k_grid, (self.n_capital, 1))
        z_curr = tf.reshape(self.z_grid, (1, self.n_productivity))
        return ProductionFunctions.cobb_douglas(k_curr, z_curr, self.params)

    # ------------------------------------------------------------------
    # Public entry point
    # ------------------------------------------------------------------

    def solve(
        self,
        progress_callback: Optional[ProgressCallback] = None,
    ) -> Dict[str, Any]:
        """Solve the model via value function iteration.

        Parameters
        ----------
        progress_callback : callable, optional
            Forwarded to :meth:`VFIEngine.run_vfi`.

        Returns
        -------
        dict
            ``V``
                Value function, shape ``(n_k, n_z)``.
            ``policy_k_idx``
                Optimal K' grid index, ``(n_k, n_z)``.
            ``policy_k_values``
                Optimal K' level, ``(n_k, n_z)``.
            ``K``, ``Z``
                Capital ``(n_k,)`` and productivity ``(n_z,)`` grids.
            ``output``
                Output table, ``(n_k, n_z)``.
            ``transition_matrix``
                Calibrated productivity transition matrix.
            ``k_ss``, ``y_ss``, ``c_ss``
                Deterministic steady state.
            ``iterations``, ``sup_diff``, ``converged``
                Convergence diagnostics.
        """
        logger.info(
            "Starting RBCModelVFI.solve(): alpha=%.4f, beta=%.4f, n_k=%d, n_z=%d",
            self.params.capital_share,
            self.params.discount_factor,
            self.n_capital,
            self.n_productivity,
        )

        engine = VFIEngine(
            beta=self.params.discount_factor,
            transition_matrix=self.P,
            tol=self.config.tol_vfi,
            max_iter=self.config.max_iter_vfi,
            report_every=self.config.report_every,
        )
        result = engine.run_vfi(
            self.output, self.k_grid, progress_callback=progress_callback
        )

        policy_k_values = extract_policies(self.k_grid, result.policy_idx)
        if not is_weakly_increasing(result.policy_idx):
            logger.warning(
                "Capital policy is not monotone in current capital; "
                "the monotone search assumption is violated."
            )

        steady_state = SteadyStateCalculator.calculate(self.params)
        return {
            "V": result.value,
            "policy_k_idx": result.policy_idx,
            "policy_k_values": policy_k_values.numpy(),
            "K": self.k_grid.numpy(),
            "Z": self.z_grid.numpy(),
            "output": self.output.numpy(),
            "transition_matrix": self.P.numpy(),
            "k_ss": float(steady_state.capital),
            "y_ss": float(steady_state.output),
            "c_ss": float(steady_state.consumption),
            "iterations": result.iterations,
            "sup_diff": result.sup_diff,
            "converged": result.converged,
        }
