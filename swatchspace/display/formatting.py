"""
Display formatting.

Every formatter converts to sRGB first, because that is what browsers
render, then applies the shared clamp-and-round policy before building the
string. The same-space fast path is therefore clamped as well.
"""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

import numpy as np

from swatchspace.core.channels import as_triple, quantize_channels
from swatchspace.core.config import ColorSpace
from swatchspace.core.converter import ColorConverter, SpaceTag, default_converter

DISPLAY_SPACE = ColorSpace.SRGB


def to_display_rgb(
    r: float,
    g: float,
    b: float,
    source_space: Optional[SpaceTag] = ColorSpace.SRGB,
    converter: Optional[ColorConverter] = None,
) -> Tuple[int, int, int]:
    """Convert a triple to clamped sRGB bytes for display."""

    converter = converter or default_converter()
    srgb = converter.convert(r, g, b, source_space, DISPLAY_SPACE)
    return as_triple(quantize_channels(np.array(srgb)))


def format_css(channels: Sequence[int]) -> str:
    """Format an sRGB byte triple as ``rgb(R, G, B)``."""

    r, g, b = as_triple(quantize_channels(np.asarray(channels)))
    return f"rgb({r}, {g}, {b})"


def format_hex(channels: Sequence[int]) -> str:
    """Format an sRGB byte triple as ``#rrggbb``."""

    r, g, b = as_triple(quantize_channels(np.asarray(channels)))
    return f"#{r:02x}{g:02x}{b:02x}"


def to_css_color(
    r: float,
    g: float,
    b: float,
    source_space: Optional[SpaceTag] = ColorSpace.SRGB,
    converter: Optional[ColorConverter] = None,
) -> str:
    """
    CSS color string for a triple interpreted in ``source_space``.

    >>> to_css_color(300, -4, 127.6)
    'rgb(255, 0, 128)'
    """

    return format_css(to_display_rgb(r, g, b, source_space, converter))


def to_hex(
    r: float,
    g: float,
    b: float,
    source_space: Optional[SpaceTag] = ColorSpace.SRGB,
    converter: Optional[ColorConverter] = None,
) -> str:
    """
    Hex color string for a triple interpreted in ``source_space``.

    >>> to_hex(255, 8, 0)
    '#ff0800'
    """

    return format_hex(to_display_rgb(r, g, b, source_space, converter))
