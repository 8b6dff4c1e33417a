"""sRGB transfer functions."""
from __future__ import annotations

import numpy as np

# Linear-segment thresholds of the piecewise sRGB curve
LINEAR_THRESHOLD = 0.0031308
ENCODED_THRESHOLD = 0.04045


def gamma_correct(value: float) -> float:
    """Encode a linear-light value with the sRGB transfer function.

    Args:
        value: Linear channel value, nominally in [0, 1].

    Returns:
        Gamma-encoded channel value.
    """
    if value <= LINEAR_THRESHOLD:
        return 12.92 * value
    return 1.055 * value ** (1.0 / 2.4) - 0.055


def gamma_uncorrect(value: float) -> float:
    """Decode an sRGB-encoded value back to linear light.

    Args:
        value: Encoded channel value, nominally in [0, 1].

    Returns:
        Linear channel value.
    """
    if value <= ENCODED_THRESHOLD:
        return value / 12.92
    return ((value + 0.055) / 1.055) ** 2.4


def gamma_correct_array(linear: np.ndarray) -> np.ndarray:
    """Vectorized gamma_correct.

    Args:
        linear: Array of linear values of any shape.

    Returns:
        Array of encoded values with the same shape.
    """
    linear = np.asarray(linear, dtype=np.float64)
    # Clip before the power so the unused branch never sees negatives
    safe = np.maximum(linear, LINEAR_THRESHOLD)
    return np.where(
        linear <= LINEAR_THRESHOLD,
        12.92 * linear,
        1.055 * safe ** (1.0 / 2.4) - 0.055,
    )


def gamma_uncorrect_array(encoded: np.ndarray) -> np.ndarray:
    """Vectorized gamma_uncorrect.

    Args:
        encoded: Array of encoded values of any shape.

    Returns:
        Array of linear values with the same shape.
    """
    encoded = np.asarray(encoded, dtype=np.float64)
    return np.where(
        encoded <= ENCODED_THRESHOLD,
        encoded / 12.92,
        ((np.maximum(encoded, ENCODED_THRESHOLD) + 0.055) / 1.055) ** 2.4,
    )
