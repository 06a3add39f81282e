"""Display formatting and catalog swatches."""

from swatchspace.display.formatting import (
    format_css,
    format_hex,
    to_css_color,
    to_display_rgb,
    to_hex,
)
from swatchspace.display.swatch import ColorSwatch, filter_swatches

__all__ = [
    "to_css_color",
    "to_hex",
    "to_display_rgb",
    "format_css",
    "format_hex",
    "ColorSwatch",
    "filter_swatches",
]
