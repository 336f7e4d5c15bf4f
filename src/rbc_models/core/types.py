# rbc_models/core/types.py
"""
Global type definitions for TensorFlow and NumPy precision.

This module establishes a single source of truth for numerical precision
across the entire codebase, ensuring consistency between TensorFlow
operations, NumPy arrays and the Numba search kernel.

Example:
    >>> from rbc_models.core.types import TENSORFLOW_DTYPE, NUMPY_DTYPE
    >>> import tensorflow as tf
    >>> tensor = tf.constant([1.0, 2.0], dtype=TENSORFLOW_DTYPE)
"""

import tensorflow as tf
import numpy as np
from typing import Union

# -----------------------------------------------------------------------------
# Global Precision Settings
# -----------------------------------------------------------------------------
# The capital grid step is 1e-5 and the convergence tolerance is 1e-7, both
# below float32 resolution for values of order one.

TENSORFLOW_DTYPE = tf.float64
NUMPY_DTYPE = np.float64
INDEX_DTYPE = np.int64

# -----------------------------------------------------------------------------
# Type Aliases
# -----------------------------------------------------------------------------

Tensor = tf.Tensor
Array = np.ndarray
Numeric = Union[float, np.float64, tf.Tensor]
