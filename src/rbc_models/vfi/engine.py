"""Numerical engine for Value Function Iteration (VFI).

This module provides the fixed-point iterator for the Bellman equation of
the log-utility growth model, handling the expectation step, the monotone
maximisation step and convergence checks.  It knows nothing about how the
grids and output table were built.

Example::

    >>> engine = VFIEngine(beta=0.95, transition_matrix=P, tol=1e-7, max_iter=2000)
    >>> result = engine.run_vfi(output, k_grid)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

import numpy as np
import tensorflow as tf

from rbc_models.core.types import INDEX_DTYPE, NUMPY_DTYPE, TENSORFLOW_DTYPE, Array, Tensor
from rbc_models.vfi.kernels import compute_ev, monotone_policy_search, sup_norm_diff

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, float], None]


@dataclass(frozen=True)
class VFIResult:
    """Outcome of a Bellman fixed-point iteration.

    Attributes:
        value: Last value-function iterate, shape ``(n_k, n_z)``.
        policy_idx: Grid index of the optimal next-period capital,
            shape ``(n_k, n_z)``.
        iterations: Number of Bellman updates performed.
        sup_diff: Sup-norm distance between the last two iterates.
        converged: Whether ``sup_diff`` reached the tolerance.
    """

    value: Array
    policy_idx: Array
    iterations: int
    sup_diff: float
    converged: bool


class VFIEngine:
    """Fixed-point iterator for the Bellman equation.

    Iterates :math:`V_{t+1} = T(V_t)` until
    :math:`\\|V_{t+1} - V_t\\|_\\infty \\le \\text{tol}`, where

    .. math::

        T(V)(k, z) = \\max_{k'} (1 - \\beta) \\ln(y(k, z) - k')
                     + \\beta \\, E[V(k', z') \\mid z].

    Parameters
    ----------
    beta : float
        Discount factor in (0, 1).
    transition_matrix : Tensor
        Markov transition matrix for productivity, shape ``(n_z, n_z)``.
    tol : float
        Convergence tolerance (sup-norm).
    max_iter : int
        Maximum number of Bellman iterations.
    report_every : int
        Progress is reported on iteration 1 and every *report_every*
        iterations.

    Raises
    ------
    ValueError
        If *beta* is not in the open interval (0, 1).
    ValueError
        If *tol* is non-positive.
    ValueError
        If *max_iter* or *report_every* is non-positive.
    """

    def __init__(
        self,
        beta: float,
        transition_matrix: Tensor,
        tol: float,
        max_iter: int,
        report_every: int = 10,
    ) -> None:
        if not 0.0 < beta < 1.0:
            raise ValueError(
                f"Discount factor must be in (0, 1), got {beta}."
            )
        if tol <= 0.0:
            raise ValueError(f"Tolerance must be positive, got {tol}.")
        if max_iter <= 0:
            raise ValueError(
                f"max_iter must be positive, got {max_iter}."
            )
        if report_every <= 0:
            raise ValueError(
                f"report_every must be positive, got {report_every}."
            )

        self.beta: float = float(beta)
        self.transition_matrix: tf.Tensor = tf.cast(
            transition_matrix, TENSORFLOW_DTYPE
        )
        self.tol: float = float(tol)
        self.max_iter: int = int(max_iter)
        self.report_every: int = int(report_every)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def run_vfi(
        self,
        output: Tensor,
        k_grid: Tensor,
        v_init: Optional[Tensor] = None,
        progress_callback: Optional[ProgressCallback] = None,
    ) -> VFIResult:
        """Execute value function iteration until convergence.

        Parameters
        ----------
        output : Tensor
            Pre-computed output ``y(k, z)``, shape ``(n_k, n_z)``.
        k_grid : Tensor
            Strictly increasing capital grid, shape ``(n_k,)``.
        v_init : Tensor, optional
            Initial guess for the value function.  Zeros when *None*.
        progress_callback : callable, optional
            Called as ``progress_callback(iteration, sup_diff)`` whenever
            progress is reported.

        Returns
        -------
        VFIResult
            Final iterate, policy indices and convergence diagnostics.

        Raises
        ------
        ValueError
            If the shapes of *output*, *k_grid*, *v_init* and the transition
            matrix disagree.
        ValueError
            If a Bellman update is not finite, i.e. some state cannot afford
            any capital choice.
        """
        output_np = np.asarray(output, dtype=NUMPY_DTYPE)
        k_grid_np = np.asarray(k_grid, dtype=NUMPY_DTYPE)
        self._validate_shapes(output_np, k_grid_np)

        if v_init is None:
            v_curr = tf.zeros(output_np.shape, dtype=TENSORFLOW_DTYPE)
        else:
            v_curr = tf.cast(v_init, TENSORFLOW_DTYPE)
            if tuple(v_curr.shape) != output_np.shape:
                raise ValueError(
                    f"v_init shape {tuple(v_curr.shape)} does not match "
                    f"output shape {output_np.shape}."
                )

        beta = tf.constant(self.beta, dtype=TENSORFLOW_DTYPE)
        flow_weight = 1.0 - self.beta

        policy_idx = np.zeros(output_np.shape, dtype=INDEX_DTYPE)
        diff = float("inf")
        iteration = 0
        converged = False

        while iteration < self.max_iter:
            discounted_ev = compute_ev(v_curr, self.transition_matrix, beta)
            v_next_np, policy_idx = monotone_policy_search(
                output_np, k_grid_np, discounted_ev.numpy(), flow_weight
            )
            if not np.all(np.isfinite(v_next_np)):
                raise ValueError(
                    f"Bellman update produced non-finite values at iteration "
                    f"{iteration + 1}: some state has no affordable "
                    "capital choice."
                )
            v_next = tf.constant(v_next_np, dtype=TENSORFLOW_DTYPE)
            diff = float(sup_norm_diff(v_next, v_curr))
            v_curr = v_next
            iteration += 1

            if iteration == 1 or iteration % self.report_every == 0:
                self._report(iteration, diff, progress_callback)

            if diff <= self.tol:
                converged = True
                break

        if converged:
            logger.info(
                "VFIEngine converged in %d iterations (diff=%.2e).",
                iteration,
                diff,
            )
        else:
            logger.warning(
                "VFIEngine did not converge after %d iterations "
                "(final diff=%.2e).",
                self.max_iter,
                diff,
            )

        return VFIResult(
            value=v_curr.numpy(),
            policy_idx=policy_idx,
            iterations=iteration,
            sup_diff=diff,
            converged=converged,
        )

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _validate_shapes(self, output: Array, k_grid: Array) -> None:
        if output.ndim != 2:
            raise ValueError(
                f"output must have rank 2, got rank {output.ndim}."
            )
        n_k, n_z = output.shape
        if k_grid.shape != (n_k,):
            raise ValueError(
                f"k_grid shape {k_grid.shape} does not match "
                f"{n_k} capital states."
            )
        if tuple(self.transition_matrix.shape) != (n_z, n_z):
            raise ValueError(
                f"Transition matrix shape {tuple(self.transition_matrix.shape)} "
                f"does not match {n_z} productivity states."
            )

    @staticmethod
    def _report(
        iteration: int,
        diff: float,
        progress_callback: Optional[ProgressCallback],
    ) -> None:
        logger.info("Iteration %d: sup diff = %.6e", iteration, diff)
        if progress_callback is not None:
            progress_callback(iteration, diff)
