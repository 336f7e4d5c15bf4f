# rbc_models/core/timing.py
"""
Process CPU-time measurement.

The solver is timed in CPU seconds of the current process rather than
wall-clock seconds; ``time.process_time`` is the portable source for that
reading on every platform.
"""

import time


def cpu_time() -> float:
    """Return the CPU time of the current process in seconds."""
    return time.process_time()


class Stopwatch:
    """
    Elapsed CPU-time counter.

    Reads the process clock once on :meth:`start` and once on
    :meth:`elapsed`.

    Example:
        >>> watch = Stopwatch().start()
        >>> ...
        >>> seconds = watch.elapsed()
    """

    def __init__(self) -> None:
        self._start: float = 0.0

    def start(self) -> "Stopwatch":
        self._start = cpu_time()
        return self

    def elapsed(self) -> float:
        """CPU seconds since :meth:`start`."""
        return cpu_time() - self._start
