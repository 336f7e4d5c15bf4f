# rbc_models/econ/production.py
"""
Production function calculations.

This module implements the production technology of the RBC model.
"""

from rbc_models.config.economic_params import EconomicParams
from rbc_models.core.types import Numeric


class ProductionFunctions:
    """Static methods for production-related calculations."""

    @staticmethod
    def cobb_douglas(
        capital: Numeric,
        productivity: Numeric,
        params: EconomicParams
    ) -> Numeric:
        """
        Compute output using Cobb-Douglas production technology.

        Formula: Y = Z * K^alpha

        Args:
            capital: Capital stock (K), scalar or tensor.
            productivity: Productivity level (Z), broadcastable against K.
            params: Economic parameters containing capital share.

        Returns:
            Gross production output.
        """
        return productivity * (capital ** params.capital_share)
