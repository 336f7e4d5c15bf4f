"""Shared test configuration for VFI unit tests."""

import tensorflow as tf

# Force CPU for CI — must be called before any TF ops
tf.config.set_visible_devices([], 'GPU')
