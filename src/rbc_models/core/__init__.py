"""Core utilities shared by the RBC solver.

Provide the global numerical precision, shared type definitions and the
CPU-time stopwatch used to time a solve.
"""

from rbc_models.core.types import TENSORFLOW_DTYPE, NUMPY_DTYPE, Tensor, Array
from rbc_models.core.timing import Stopwatch, cpu_time
