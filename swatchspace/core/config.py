"""
Configuration primitives for swatchspace.

Defines enums for the supported RGB color spaces and their transfer curves,
and a dataclass collecting the conversion policy knobs.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Union

_TAG_NOISE = re.compile(r"[\s_\-()]+")


class ColorSpace(Enum):
    """RGB color spaces understood by the converter."""

    SRGB = "sRGB"                 # Browser/display native
    ADOBE_RGB = "AdobeRGB1998"    # Wide gamut, print workflows

    @classmethod
    def parse(cls, tag: Union["ColorSpace", str]) -> "ColorSpace":
        """
        Resolve a space tag as stored by callers.

        Accepts enum members and the spellings the dashboard writes to the
        database ("sRGB", "Adobe RGB", "Adobe RGB1998", "Adobe RGB (1998)").
        Matching ignores case, whitespace, hyphens, underscores and parentheses.
        """

        if isinstance(tag, cls):
            return tag
        if not isinstance(tag, str):
            raise ValueError(f"Unsupported color space tag: {tag!r}")

        key = _TAG_NOISE.sub("", tag).lower()
        space = _ALIASES.get(key)
        if space is None:
            raise ValueError(f"Unsupported color space tag: {tag!r}")
        return space


_ALIASES = {
    "srgb": ColorSpace.SRGB,
    "adobergb": ColorSpace.ADOBE_RGB,
    "adobergb1998": ColorSpace.ADOBE_RGB,
}


class TransferCurve(Enum):
    """Gamma encoding family."""

    PIECEWISE_SRGB = "piecewise_srgb"  # Linear toe + 2.4 power segment
    PURE_GAMMA = "pure_gamma"          # Single power law, no toe


@dataclass
class ConversionConfig:
    """
    Conversion policy.

    The defaults fail loudly on unknown space tags and non-finite channels.
    """

    # Interpretation of swatches stored without a space tag
    default_space: ColorSpace = ColorSpace.ADOBE_RGB

    # Error policy
    strict_spaces: bool = True  # False: unknown tags pass through unchanged
    reject_non_finite: bool = True  # False: NaN/Inf channels quantize to 0

    def validate(self) -> None:
        """Validate configuration parameters."""

        if not isinstance(self.default_space, ColorSpace):
            raise ValueError(
                f"default_space must be a ColorSpace, got {self.default_space!r}"
            )

        if not isinstance(self.strict_spaces, bool):
            raise ValueError(f"strict_spaces must be a bool, got {self.strict_spaces!r}")

        if not isinstance(self.reject_non_finite, bool):
            raise ValueError(
                f"reject_non_finite must be a bool, got {self.reject_non_finite!r}"
            )
