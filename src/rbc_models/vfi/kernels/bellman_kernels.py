"""Bellman-iteration XLA kernels.

Contains two small XLA kernels:
- ``compute_ev`` — discounted expected-value computation
- ``sup_norm_diff`` — ‖a − b‖∞
"""

from __future__ import annotations

import tensorflow as tf


@tf.function(jit_compile=True)
def compute_ev(
    v_curr: tf.Tensor,
    P: tf.Tensor,
    beta: tf.Tensor,
) -> tf.Tensor:
    """Compute discounted expected continuation value (XLA-compiled).

    Returns ``β · V @ Pᵀ``, i.e. entry ``[k, z]`` is
    ``β · Σ_z' P[z, z'] · V[k, z']``.

    Parameters
    ----------
    v_curr : tf.Tensor
        Current value function, ``(nk, nz)``.
    P : tf.Tensor
        Markov transition matrix, ``(nz, nz)``.
    beta : tf.Tensor
        Scalar discount factor.

    Returns
    -------
    tf.Tensor
        Discounted expected value, same shape as *v_curr*.
    """
    return beta * tf.matmul(v_curr, P, transpose_b=True)


@tf.function(jit_compile=True)
def sup_norm_diff(a: tf.Tensor, b: tf.Tensor) -> tf.Tensor:
    """Compute the sup-norm ``‖a − b‖∞`` (XLA-compiled)."""
    return tf.reduce_max(tf.abs(a - b))
