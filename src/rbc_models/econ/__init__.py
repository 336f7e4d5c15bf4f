# rbc_models/econ/__init__.py
"""
Core economic logic module.

This package provides the production technology and the closed-form
steady state of the RBC model.
"""

from rbc_models.econ.production import ProductionFunctions
from rbc_models.econ.steady_state import SteadyState, SteadyStateCalculator


__all__ = [
    'ProductionFunctions',
    'SteadyState',
    'SteadyStateCalculator',
]
