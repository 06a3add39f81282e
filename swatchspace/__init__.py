"""Swatch color space conversion (swatchspace).

Converts catalog RGB swatches between Adobe RGB (1998) and sRGB through CIE
XYZ, and renders them as CSS and hex strings for display.
"""

from swatchspace.core.config import ColorSpace, ConversionConfig, TransferCurve
from swatchspace.core.converter import (
    ColorConverter,
    convert,
    convert_array,
    default_converter,
)
from swatchspace.display import (
    ColorSwatch,
    filter_swatches,
    to_css_color,
    to_display_rgb,
    to_hex,
)

__all__ = [
    "ColorSpace",
    "TransferCurve",
    "ConversionConfig",
    "ColorConverter",
    "convert",
    "convert_array",
    "default_converter",
    "to_css_color",
    "to_hex",
    "to_display_rgb",
    "ColorSwatch",
    "filter_swatches",
]

try:  # Optional PyTorch acceleration
    from swatchspace.torch import TorchColorSpaceConverter, convert_torch  # type: ignore

    __all__.extend(["TorchColorSpaceConverter", "convert_torch"])
except ImportError:  # pragma: no cover - torch not installed
    TorchColorSpaceConverter = None  # type: ignore
    convert_torch = None  # type: ignore

__version__ = "1.0.0"
