"""
Transfer curves: encoded channel values <-> linear light.

Decoding takes 0-255 encoded channels and returns linear values normalized
to [0, 1]. Encoding takes linear values and returns *normalized* encoded
values; scaling back to 0-255 happens at quantization. Inputs are not
clamped, so overshoot from cross-space matrices flows through unchanged.
"""

from __future__ import annotations

import numpy as np

from swatchspace.core.channels import CHANNEL_MAX
from swatchspace.core.config import TransferCurve
from swatchspace.spaces.specs import ColorSpaceSpec


def decode_srgb(normalized: np.ndarray, spec: ColorSpaceSpec) -> np.ndarray:
    """Piecewise sRGB decode on normalized [0, 1] encoded values."""

    v = np.asarray(normalized, dtype=np.float64)
    threshold = spec.decode_threshold
    # Power branch evaluated on a floored copy so np.where never sees a
    # fractional power of a negative number.
    v_pow = np.maximum(v, threshold)
    power = np.power((v_pow + spec.offset) / (1.0 + spec.offset), spec.gamma)
    return np.where(v > threshold, power, v / spec.toe_slope)


def encode_srgb(linear: np.ndarray, spec: ColorSpaceSpec) -> np.ndarray:
    """Piecewise sRGB encode; returns normalized encoded values."""

    lin = np.asarray(linear, dtype=np.float64)
    threshold = spec.encode_threshold
    lin_pow = np.maximum(lin, threshold)
    power = (1.0 + spec.offset) * np.power(lin_pow, 1.0 / spec.gamma) - spec.offset
    return np.where(lin > threshold, power, spec.toe_slope * lin)


def decode_pure_gamma(normalized: np.ndarray, spec: ColorSpaceSpec) -> np.ndarray:
    """
    Power-law decode.

    Negative inputs (undershoot below 0) are mirrored through the origin so
    the result stays finite and is clamped later like any other overshoot.
    """

    v = np.asarray(normalized, dtype=np.float64)
    return np.sign(v) * np.power(np.abs(v), spec.gamma)


def encode_pure_gamma(linear: np.ndarray, spec: ColorSpaceSpec) -> np.ndarray:
    """Power-law encode; negative linear light floors to 0."""

    lin = np.asarray(linear, dtype=np.float64)
    return np.power(np.maximum(lin, 0.0), 1.0 / spec.gamma)


def to_linear(encoded: np.ndarray, spec: ColorSpaceSpec) -> np.ndarray:
    """
    Convert 0-255 encoded channels to linear light.

    Parameters
    ----------
    encoded : np.ndarray
        Encoded channel values, any shape (typically ``(..., 3)``).
    spec : ColorSpaceSpec
        Space whose transfer curve applies.
    """

    normalized = np.asarray(encoded, dtype=np.float64) / CHANNEL_MAX

    if spec.curve == TransferCurve.PIECEWISE_SRGB:
        return decode_srgb(normalized, spec)
    if spec.curve == TransferCurve.PURE_GAMMA:
        return decode_pure_gamma(normalized, spec)

    raise ValueError(f"Unknown transfer curve: {spec.curve}")


def from_linear(linear: np.ndarray, spec: ColorSpaceSpec) -> np.ndarray:
    """Convert linear light to normalized encoded values (not scaled to 255)."""

    if spec.curve == TransferCurve.PIECEWISE_SRGB:
        return encode_srgb(linear, spec)
    if spec.curve == TransferCurve.PURE_GAMMA:
        return encode_pure_gamma(linear, spec)

    raise ValueError(f"Unknown transfer curve: {spec.curve}")
