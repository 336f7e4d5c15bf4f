"""Unit tests for monotone_kernels: bellman_rhs, monotone_policy_search."""

from __future__ import annotations

import math

import numpy as np
import pytest

from rbc_models.vfi.kernels.monotone_kernels import bellman_rhs, monotone_policy_search


def _brute_force(output, k_grid, discounted_ev, flow_weight):
    """Exhaustive argmax over every choice for every state."""
    n_k, n_z = output.shape
    v = np.empty((n_k, n_z))
    idx = np.empty((n_k, n_z), dtype=np.int64)
    for iz in range(n_z):
        for ik in range(n_k):
            consumption = output[ik, iz] - k_grid
            values = np.full(n_k, -np.inf)
            feasible = consumption > 0
            values[feasible] = (
                flow_weight * np.log(consumption[feasible])
                + discounted_ev[feasible, iz]
            )
            idx[ik, iz] = int(np.argmax(values))
            v[ik, iz] = values[idx[ik, iz]]
    return v, idx


def _concave_problem(n_k=200, alpha=1.0 / 3.0, beta=0.95):
    k_grid = np.linspace(0.05, 0.4, n_k)
    z = np.array([0.95, 1.0, 1.05])
    output = z[None, :] * k_grid[:, None] ** alpha
    # Strictly concave continuation value in k'.
    discounted_ev = beta * 0.05 * np.log(k_grid)[:, None] * np.array([[1.0, 1.1, 1.2]])
    return output, k_grid, discounted_ev, 1.0 - beta


class TestBellmanRhs:
    """Tests for the candidate value."""

    def test_known_value(self):
        value = bellman_rhs(1.0, 0.5, 0.25, 0.05)
        assert value == pytest.approx(0.05 * math.log(0.5) + 0.25, abs=1e-15)

    def test_zero_consumption_is_minus_inf(self):
        assert bellman_rhs(0.5, 0.5, 10.0, 0.05) == -np.inf

    def test_negative_consumption_is_minus_inf(self):
        assert bellman_rhs(0.4, 0.5, 10.0, 0.05) == -np.inf


class TestMonotonePolicySearch:
    """Tests for the monotone maximisation step."""

    def test_matches_brute_force_on_concave_problem(self):
        """Single-peaked objective: monotone search finds the global max."""
        output, k_grid, ev, w = _concave_problem()
        v, idx = monotone_policy_search(output, k_grid, ev, w)
        v_bf, idx_bf = _brute_force(output, k_grid, ev, w)
        np.testing.assert_array_equal(idx, idx_bf)
        np.testing.assert_allclose(v, v_bf, rtol=1e-13)

    def test_shapes_and_dtypes(self):
        output, k_grid, ev, w = _concave_problem(n_k=30)
        v, idx = monotone_policy_search(output, k_grid, ev, w)
        assert v.shape == output.shape
        assert idx.shape == output.shape
        assert v.dtype == np.float64
        assert idx.dtype == np.int64

    def test_policy_weakly_increasing(self):
        output, k_grid, ev, w = _concave_problem()
        _, idx = monotone_policy_search(output, k_grid, ev, w)
        assert np.all(np.diff(idx, axis=0) >= 0)

    def test_every_cell_written_and_finite(self):
        output, k_grid, ev, w = _concave_problem()
        v, idx = monotone_policy_search(output, k_grid, ev, w)
        assert np.all(np.isfinite(v))
        assert np.all((idx >= 0) & (idx < len(k_grid)))

    def test_zero_continuation_picks_lowest_choice(self):
        """With no future value, consumption is maximised: k' = k_grid[0]."""
        output, k_grid, _, w = _concave_problem(n_k=50)
        ev = np.zeros_like(output)
        v, idx = monotone_policy_search(output, k_grid, ev, w)
        np.testing.assert_array_equal(idx, 0)
        np.testing.assert_allclose(v, w * np.log(output - k_grid[0]), rtol=1e-14)

    def test_search_stops_at_unaffordable_choice(self):
        """Infeasible candidates never beat a feasible one."""
        k_grid = np.array([0.1, 0.2, 0.3, 0.4])
        output = np.array([[0.25], [0.35], [0.45], [0.55]])
        # Continuation strongly favours large k', but only what is affordable.
        ev = np.array([[0.0], [10.0], [20.0], [30.0]])
        v, idx = monotone_policy_search(output, k_grid, ev, 0.05)
        np.testing.assert_array_equal(idx[:, 0], [1, 2, 3, 3])
        assert np.all(np.isfinite(v))

    def test_cursor_resets_per_productivity_column(self):
        """A later column may choose lower indices than an earlier one."""
        k_grid = np.linspace(0.1, 1.0, 10)
        output = np.full((10, 2), 2.0)
        ev = np.zeros((10, 2))
        ev[:, 0] = np.linspace(0.0, 5.0, 10)
        v, idx = monotone_policy_search(output, k_grid, ev, 0.05)
        np.testing.assert_array_equal(idx[:, 0], 9)
        np.testing.assert_array_equal(idx[:, 1], 0)
