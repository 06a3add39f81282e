"""
Linear RGB <-> CIE XYZ matrix transforms.
"""

from __future__ import annotations

import numpy as np

from swatchspace.spaces.specs import ColorSpaceSpec


def rgb_to_xyz(linear_rgb: np.ndarray, spec: ColorSpaceSpec) -> np.ndarray:
    """
    Convert linear RGB in ``spec``'s primaries to XYZ.

    Parameters
    ----------
    linear_rgb : np.ndarray
        Linear RGB, shape (..., 3)
    """

    return np.dot(np.asarray(linear_rgb, dtype=np.float64), spec.to_xyz.T)


def xyz_to_rgb(xyz: np.ndarray, spec: ColorSpaceSpec) -> np.ndarray:
    """Convert XYZ to linear RGB in ``spec``'s primaries. No clamping."""

    return np.dot(np.asarray(xyz, dtype=np.float64), spec.from_xyz.T)
