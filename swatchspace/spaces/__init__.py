"""Per-space constants, transfer curves and matrix transforms."""

from swatchspace.spaces.gamma import from_linear, to_linear
from swatchspace.spaces.matrix import rgb_to_xyz, xyz_to_rgb
from swatchspace.spaces.specs import (
    ADOBE_RGB_SPEC,
    COLOR_SPACE_SPECS,
    SRGB_SPEC,
    ColorSpaceSpec,
    get_space_spec,
)

__all__ = [
    "ColorSpaceSpec",
    "COLOR_SPACE_SPECS",
    "SRGB_SPEC",
    "ADOBE_RGB_SPEC",
    "get_space_spec",
    "to_linear",
    "from_linear",
    "rgb_to_xyz",
    "xyz_to_rgb",
]
