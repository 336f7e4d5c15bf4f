# rbc_models/config/economic_params.py
"""
Economic parameter definitions for the RBC model.

This module defines the structural parameters and the productivity Markov
chain of the one-sector RBC model with full depreciation.  Parameters are
immutable after initialization to prevent accidental modification during
model execution.

Example:
    >>> from rbc_models.config.economic_params import EconomicParams
    >>> params = EconomicParams()
    >>> print(f"Discount factor: {params.discount_factor}")
"""

from dataclasses import dataclass
from typing import Tuple

# -----------------------------------------------------------------------------
# Default calibration
# -----------------------------------------------------------------------------

CAPITAL_SHARE = 0.33333333333
DISCOUNT_FACTOR = 0.95

PRODUCTIVITY_VALUES: Tuple[float, ...] = (0.9792, 0.9896, 1.0000, 1.0106, 1.0212)

TRANSITION_MATRIX: Tuple[Tuple[float, ...], ...] = (
    (0.9727, 0.0273, 0.0000, 0.0000, 0.0000),
    (0.0041, 0.9806, 0.0153, 0.0000, 0.0000),
    (0.0000, 0.0082, 0.9837, 0.0082, 0.0000),
    (0.0000, 0.0000, 0.0153, 0.9806, 0.0041),
    (0.0000, 0.0000, 0.0000, 0.0273, 0.9727),
)

# Published transition probabilities are rounded to four decimals.
ROW_SUM_ATOL = 1e-3


@dataclass(frozen=True)
class EconomicParams:
    """
    Immutable container for the RBC model parameters.

    The frozen=True ensures immutability, preventing accidental modification
    during model execution.

    Attributes:
        capital_share: Output elasticity of capital (alpha), in (0, 1).
        discount_factor: Time preference parameter (beta), in (0, 1).
        productivity_values: Discrete productivity levels (z), all positive.
        transition_matrix: Row-stochastic Markov matrix over productivity
            levels; entry [i][j] is Pr(z' = z_j | z = z_i).

    Raises:
        ValueError: If any parameter is outside its valid range or the
            transition matrix is not row-stochastic.
    """

    capital_share: float = CAPITAL_SHARE
    discount_factor: float = DISCOUNT_FACTOR
    productivity_values: Tuple[float, ...] = PRODUCTIVITY_VALUES
    transition_matrix: Tuple[Tuple[float, ...], ...] = TRANSITION_MATRIX

    def __post_init__(self) -> None:
        """Validate parameters after initialization."""
        self._validate_discount_factor()
        self._validate_capital_share()
        self._validate_productivity()
        self._validate_transition_matrix()

    @property
    def n_productivity(self) -> int:
        return len(self.productivity_values)

    def _validate_discount_factor(self) -> None:
        """Ensure discount factor is economically meaningful."""
        if not (0 < self.discount_factor < 1):
            raise ValueError(
                f"Discount factor must be in (0, 1), got {self.discount_factor}"
            )

    def _validate_capital_share(self) -> None:
        """The steady-state exponent 1 / (1 - alpha) needs alpha < 1."""
        if not (0 < self.capital_share < 1):
            raise ValueError(
                f"Capital share must be in (0, 1), got {self.capital_share}"
            )

    def _validate_productivity(self) -> None:
        if len(self.productivity_values) == 0:
            raise ValueError("At least one productivity level is required")
        if any(z <= 0 for z in self.productivity_values):
            raise ValueError(
                f"Productivity levels must be positive, got {self.productivity_values}"
            )

    def _validate_transition_matrix(self) -> None:
        n_z = self.n_productivity
        if len(self.transition_matrix) != n_z:
            raise ValueError(
                f"Transition matrix has {len(self.transition_matrix)} rows, "
                f"expected {n_z}"
            )
        for i, row in enumerate(self.transition_matrix):
            if len(row) != n_z:
                raise ValueError(
                    f"Transition matrix row {i} has {len(row)} entries, "
                    f"expected {n_z}"
                )
            if any(p < 0 or p > 1 for p in row):
                raise ValueError(
                    f"Transition probabilities must lie in [0, 1], row {i}: {row}"
                )
            row_sum = sum(row)
            if abs(row_sum - 1.0) > ROW_SUM_ATOL:
                raise ValueError(
                    f"Transition matrix row {i} sums to {row_sum}, expected 1"
                )
