"""Core conversion components."""

from swatchspace.core.channels import quantize_channels
from swatchspace.core.config import ColorSpace, ConversionConfig, TransferCurve
from swatchspace.core.converter import (
    ColorConverter,
    convert,
    convert_array,
    default_converter,
)

__all__ = [
    "ColorSpace",
    "TransferCurve",
    "ConversionConfig",
    "ColorConverter",
    "convert",
    "convert_array",
    "default_converter",
    "quantize_channels",
]
