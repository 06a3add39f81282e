"""
Channel quantization shared by every output path.
"""

from __future__ import annotations

from typing import Tuple

import numpy as np

CHANNEL_MIN = 0.0
CHANNEL_MAX = 255.0


def quantize_channels(encoded: np.ndarray) -> np.ndarray:
    """
    Clamp encoded channels to [0, 255] and round half-up to integers.

    NaN channels become 0; infinities clamp to the nearest bound.

    Parameters
    ----------
    encoded : np.ndarray
        Encoded channel values on the 0-255 scale, any shape.

    Returns
    -------
    np.ndarray
        ``uint8`` array of the same shape.
    """

    values = np.nan_to_num(
        np.asarray(encoded, dtype=np.float64),
        nan=CHANNEL_MIN,
        posinf=CHANNEL_MAX,
        neginf=CHANNEL_MIN,
    )
    clamped = np.clip(values, CHANNEL_MIN, CHANNEL_MAX)
    return np.floor(clamped + 0.5).astype(np.uint8)


def as_triple(channels: np.ndarray) -> Tuple[int, int, int]:
    """Unpack a quantized ``(3,)`` array into plain ints."""

    r, g, b = (int(c) for c in channels)
    return r, g, b
