"""Unit tests for SteadyStateCalculator and ProductionFunctions."""

from __future__ import annotations

import numpy as np
import pytest
import tensorflow as tf

tf.config.set_visible_devices([], 'GPU')

from rbc_models.config.economic_params import EconomicParams
from rbc_models.econ import ProductionFunctions, SteadyState, SteadyStateCalculator


class TestSteadyState:
    """Closed-form steady state of the full-depreciation model."""

    def test_capital_formula(self):
        """k_ss = (alpha * beta)^(1 / (1 - alpha)) exactly."""
        params = EconomicParams()
        alpha, beta = params.capital_share, params.discount_factor
        expected = (alpha * beta) ** (1.0 / (1.0 - alpha))
        assert SteadyStateCalculator.calculate_capital(params) == expected

    def test_output_and_consumption(self):
        params = EconomicParams()
        k_ss = SteadyStateCalculator.calculate_capital(params)
        y_ss = k_ss ** params.capital_share
        assert SteadyStateCalculator.calculate_output(params) == y_ss
        assert SteadyStateCalculator.calculate_consumption(params) == y_ss - k_ss

    def test_default_values(self):
        """Known values for alpha = 1/3, beta = 0.95."""
        ss = SteadyStateCalculator.calculate(EconomicParams())
        assert isinstance(ss, SteadyState)
        assert ss.capital == pytest.approx(0.178198, rel=1e-5)
        assert ss.output == pytest.approx(0.562731, rel=1e-5)
        assert ss.consumption == pytest.approx(0.384533, rel=1e-5)

    def test_savings_rate(self):
        """With full depreciation the planner saves alpha * beta of output."""
        params = EconomicParams()
        ss = SteadyStateCalculator.calculate(params)
        assert ss.capital / ss.output == pytest.approx(
            params.capital_share * params.discount_factor, rel=1e-12
        )


class TestCobbDouglas:
    """Output Y = Z * K^alpha."""

    def test_scalar(self):
        params = EconomicParams()
        y = ProductionFunctions.cobb_douglas(8.0, 2.0, params)
        assert y == pytest.approx(2.0 * 8.0 ** params.capital_share)

    def test_broadcast(self):
        params = EconomicParams()
        k = tf.constant([[1.0], [8.0]], dtype=tf.float64)
        z = tf.constant([[0.5, 1.0, 2.0]], dtype=tf.float64)
        y = ProductionFunctions.cobb_douglas(k, z, params).numpy()
        expected = np.array([[0.5, 1.0, 2.0]]) * np.array([[1.0], [8.0]]) ** params.capital_share
        assert y.shape == (2, 3)
        np.testing.assert_allclose(y, expected, rtol=1e-12)
