# rbc_models/econ/steady_state.py
"""
Steady state calculations for the RBC model.

This module computes the analytical deterministic steady state used to
position the capital grid.  With full depreciation and log utility the
Euler equation pins down k_ss = (alpha * beta)^(1 / (1 - alpha)).
"""

from dataclasses import dataclass

from rbc_models.config.economic_params import EconomicParams


@dataclass(frozen=True)
class SteadyState:
    """Deterministic steady-state capital, output and consumption."""

    capital: float
    output: float
    consumption: float


class SteadyStateCalculator:
    """Static methods for steady state calculations."""

    @staticmethod
    def calculate_capital(params: EconomicParams) -> float:
        """
        Calculate steady-state capital stock for the deterministic model.

        Derived from the Euler equation in steady state:
            k_ss = (alpha * beta)^(1 / (1 - alpha))

        Args:
            params: Economic parameters containing discount factor and
                    capital share.

        Returns:
            The steady-state capital stock.
        """
        alpha = params.capital_share
        return (alpha * params.discount_factor) ** (1.0 / (1.0 - alpha))

    @staticmethod
    def calculate_output(params: EconomicParams) -> float:
        """Steady-state output y_ss = k_ss^alpha."""
        k_ss = SteadyStateCalculator.calculate_capital(params)
        return k_ss ** params.capital_share

    @staticmethod
    def calculate_consumption(params: EconomicParams) -> float:
        """Steady-state consumption c_ss = y_ss - k_ss (full depreciation)."""
        return (
            SteadyStateCalculator.calculate_output(params)
            - SteadyStateCalculator.calculate_capital(params)
        )

    @staticmethod
    def calculate(params: EconomicParams) -> SteadyState:
        """Return capital, output and consumption in one container."""
        return SteadyState(
            capital=SteadyStateCalculator.calculate_capital(params),
            output=SteadyStateCalculator.calculate_output(params),
            consumption=SteadyStateCalculator.calculate_consumption(params),
        )
