"""Unit tests for the console reporter and the CPU-time stopwatch."""

from __future__ import annotations

import io

from rbc_models.core.timing import Stopwatch, cpu_time
from rbc_models.econ import SteadyState
from rbc_models.io.console import ConsoleReporter


def _reporter():
    stream = io.StringIO()
    return ConsoleReporter(stream), stream


class TestConsoleReporter:
    """Line formats of the console report."""

    def test_steady_state(self):
        reporter, stream = _reporter()
        reporter.steady_state(SteadyState(capital=0.178198, output=0.562731, consumption=0.384533))
        assert stream.getvalue() == (
            "Output = 0.562731, Capital = 0.178198, Consumption = 0.384533\n"
        )

    def test_iteration(self):
        reporter, stream = _reporter()
        reporter.iteration(10, 0.00123456789)
        assert stream.getvalue() == "Iteration = 10, Sup Diff = 0.00123457\n"

    def test_final_converged(self):
        reporter, stream = _reporter()
        reporter.final(257, 9.5e-8, converged=True)
        assert stream.getvalue() == "Iteration = 257, Sup Diff = 9.5e-08\n"

    def test_final_not_converged(self):
        reporter, stream = _reporter()
        reporter.final(3, 0.02, converged=False)
        lines = stream.getvalue().splitlines()
        assert lines == [
            "Iteration = 3, Sup Diff = 0.02",
            "Did not converge after 3 iterations (Sup Diff = 0.02)",
        ]

    def test_policy_check_and_elapsed(self):
        reporter, stream = _reporter()
        reporter.policy_check(0.146568)
        reporter.elapsed(1.5)
        assert stream.getvalue().splitlines() == [
            "My check = 0.146568",
            "Elapsed time is   = 1.5",
        ]

    def test_defaults_to_stdout(self, capsys):
        ConsoleReporter().iteration(1, 0.5)
        assert capsys.readouterr().out == "Iteration = 1, Sup Diff = 0.5\n"


class TestStopwatch:
    """CPU-time readings."""

    def test_cpu_time_non_negative_and_monotone(self):
        first = cpu_time()
        second = cpu_time()
        assert first >= 0.0
        assert second >= first

    def test_elapsed_non_negative(self):
        watch = Stopwatch().start()
        sum(i * i for i in range(10000))
        assert watch.elapsed() >= 0.0

    def test_start_returns_self(self):
        watch = Stopwatch()
        assert watch.start() is watch
