"""
Per-space colorimetric constants.

Each supported space is described by one immutable record holding its
linear RGB <-> XYZ (D65) matrices and its transfer curve parameters.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Sequence

import numpy as np

from swatchspace.core.config import ColorSpace, TransferCurve


def _frozen_matrix(rows: Sequence[Sequence[float]]) -> np.ndarray:
    matrix = np.array(rows, dtype=np.float64)
    matrix.flags.writeable = False
    return matrix


@dataclass(frozen=True)
class ColorSpaceSpec:
    """Color space specification."""

    name: str
    to_xyz: np.ndarray  # linear RGB -> XYZ, 3x3
    from_xyz: np.ndarray  # XYZ -> linear RGB, 3x3
    curve: TransferCurve
    gamma: float
    # Piecewise curves only
    decode_threshold: float = 0.0  # encoded domain
    encode_threshold: float = 0.0  # linear domain
    toe_slope: float = 1.0
    offset: float = 0.0


SRGB_SPEC = ColorSpaceSpec(
    name="sRGB",
    to_xyz=_frozen_matrix(
        [
            [0.4124, 0.3576, 0.1805],
            [0.2126, 0.7152, 0.0722],
            [0.0193, 0.1192, 0.9505],
        ]
    ),
    from_xyz=_frozen_matrix(
        [
            [3.2406, -1.5372, -0.4986],
            [-0.9689, 1.8758, 0.0415],
            [0.0557, -0.2040, 1.0570],
        ]
    ),
    curve=TransferCurve.PIECEWISE_SRGB,
    gamma=2.4,
    decode_threshold=0.04045,
    encode_threshold=0.0031308,
    toe_slope=12.92,
    offset=0.055,
)

ADOBE_RGB_SPEC = ColorSpaceSpec(
    name="Adobe RGB (1998)",
    to_xyz=_frozen_matrix(
        [
            [0.5767309, 0.1855540, 0.1881852],
            [0.2973769, 0.6273491, 0.0752741],
            [0.0270343, 0.0706872, 0.9911085],
        ]
    ),
    from_xyz=_frozen_matrix(
        [
            [2.0413690, -0.5649464, -0.3446944],
            [-0.9692660, 1.8760108, 0.0415560],
            [0.0134474, -0.1183897, 1.0154096],
        ]
    ),
    curve=TransferCurve.PURE_GAMMA,
    gamma=2.19921875,  # 563/256
)

COLOR_SPACE_SPECS: Dict[ColorSpace, ColorSpaceSpec] = {
    ColorSpace.SRGB: SRGB_SPEC,
    ColorSpace.ADOBE_RGB: ADOBE_RGB_SPEC,
}


def get_space_spec(space: ColorSpace) -> ColorSpaceSpec:
    """Look up the constants for ``space``."""

    try:
        return COLOR_SPACE_SPECS[space]
    except KeyError:
        raise ValueError(f"No specification for color space {space!r}") from None
