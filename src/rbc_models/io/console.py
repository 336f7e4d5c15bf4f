# rbc_models/io/console.py
"""
Human-readable console report of a VFI solve.

Every line is formatted with ``%g`` so that numbers read the same way
across runs and platforms.

Example:
    >>> reporter = ConsoleReporter()
    >>> reporter.steady_state(SteadyStateCalculator.calculate(params))
    Output = 0.562731, Capital = 0.178198, Consumption = 0.384533
"""

import sys
from typing import Optional, TextIO

from rbc_models.econ import SteadyState


class ConsoleReporter:
    """Write solver progress and results to a text stream.

    Args:
        stream: Destination; ``sys.stdout`` at call time when *None*.
    """

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def _write(self, line: str) -> None:
        self.stream.write(line + "\n")

    def steady_state(self, steady_state: SteadyState) -> None:
        self._write(
            "Output = %g, Capital = %g, Consumption = %g"
            % (steady_state.output, steady_state.capital, steady_state.consumption)
        )

    def iteration(self, iteration: int, sup_diff: float) -> None:
        """Progress line; usable directly as an engine progress callback."""
        self._write("Iteration = %d, Sup Diff = %g" % (iteration, sup_diff))

    def final(self, iterations: int, sup_diff: float, converged: bool) -> None:
        self.iteration(iterations, sup_diff)
        if not converged:
            self._write(
                "Did not converge after %d iterations (Sup Diff = %g)"
                % (iterations, sup_diff)
            )

    def policy_check(self, value: float) -> None:
        self._write("My check = %g" % value)

    def elapsed(self, seconds: float) -> None:
        self._write("Elapsed time is   = %g" % seconds)
