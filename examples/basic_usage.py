"""
Basic usage examples for swatchspace.
"""

from __future__ import annotations

import logging

import numpy as np

from swatchspace import (
    ColorConverter,
    ColorSpace,
    ColorSwatch,
    ConversionConfig,
    convert,
    convert_array,
    to_css_color,
    to_hex,
)


def example_single_color() -> tuple:
    """Convert one Adobe RGB swatch for web display."""

    srgb = convert(200, 30, 30, ColorSpace.ADOBE_RGB, ColorSpace.SRGB)
    print(f"Adobe RGB (200, 30, 30) -> sRGB {srgb}")
    print(f"  CSS: {to_css_color(200, 30, 30, ColorSpace.ADOBE_RGB)}")
    print(f"  Hex: {to_hex(200, 30, 30, ColorSpace.ADOBE_RGB)}")
    return srgb


def example_swatch_preview() -> dict:
    """Build the preview panel values for a stored catalog row."""

    row = {
        "name": "signal-red",
        "display_name": "Signal Red",
        "rgb_r": 200,
        "rgb_g": 30,
        "rgb_b": 30,
        "spot_color": "PANTONE 485 C",
        "color_space": "Adobe RGB",
    }
    preview = ColorSwatch.from_row(row).preview()
    print(f"Swatch preview: {preview}")
    return preview


def example_image() -> np.ndarray:
    """Convert a whole sRGB image into Adobe RGB."""

    img = np.random.randint(0, 256, size=(64, 64, 3))
    result = convert_array(img, ColorSpace.SRGB, ColorSpace.ADOBE_RGB)
    print(f"Image example output range: [{result.min()}, {result.max()}]")
    return result


def example_lenient_tags() -> tuple:
    """Pass unknown tags through instead of raising."""

    converter = ColorConverter(ConversionConfig(strict_spaces=False))
    result = converter.convert(12, 34, 56, "CMYK", ColorSpace.SRGB)
    print(f"Lenient pass-through: {result}")
    return result


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)
    print("Running swatchspace basic examples...")
    example_single_color()
    example_swatch_preview()
    example_image()
    example_lenient_tags()
