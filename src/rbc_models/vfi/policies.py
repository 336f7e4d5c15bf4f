"""Policy extraction and diagnostics for the VFI solver.

Contains pure functions that map discrete policy indices to capital
levels and check the monotonicity the policy search relies on.
"""

from __future__ import annotations

import tensorflow as tf


def extract_policies(
    k_grid: tf.Tensor,
    policy_k_idx: tf.Tensor,
) -> tf.Tensor:
    """Map discrete policy indices to capital values.

    Parameters
    ----------
    k_grid : tf.Tensor
        Capital grid, shape ``(n_k,)``.
    policy_k_idx : tf.Tensor
        Grid indices of optimal K', shape ``(n_k, n_z)``.

    Returns
    -------
    tf.Tensor
        K' values, shape ``(n_k, n_z)``.
    """
    return tf.gather(k_grid, policy_k_idx)


def is_weakly_increasing(policy: tf.Tensor) -> bool:
    """Return whether *policy* is non-decreasing along the capital axis.

    Parameters
    ----------
    policy : tf.Tensor
        Policy (indices or values), shape ``(n_k, n_z)``.
    """
    policy = tf.convert_to_tensor(policy)
    steps = policy[1:, :] - policy[:-1, :]
    return bool(tf.reduce_all(steps >= 0))
