"""Saturating arithmetic on 16-bit signed samples."""

import numpy as np

from .constants import INT16_MIN, INT16_MAX


def saturate(values):
    """Clamp wide values to the int16 range, then narrow.

    Args:
        values: Array (or scalar) of integer or float values.

    Returns:
        int16 numpy array.
    """
    return np.clip(values, INT16_MIN, INT16_MAX).astype(np.int16)


def scale_samples(samples, factor):
    """Multiply samples by a factor without wraparound.

    The product is truncated toward zero, then clamped to the int16 range.

    Args:
        samples: int16 array.
        factor: Scalar, or float array with one factor per sample.

    Returns:
        int16 array of the same length.
    """
    product = np.asarray(samples, dtype=np.float64) * factor
    return saturate(np.trunc(product))


def saturating_add(a, b):
    """Add two int16 arrays, clamping instead of wrapping."""
    return saturate(np.asarray(a, dtype=np.int32) + np.asarray(b, dtype=np.int32))
