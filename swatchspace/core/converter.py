"""
Color space conversion orchestrator.

Composes the per-space stages: decode gamma -> linear RGB -> XYZ ->
linear RGB (target primaries) -> encode gamma -> clamp and round.
"""

from __future__ import annotations

import logging
from typing import Optional, Tuple, Union

import numpy as np

from swatchspace.core.channels import CHANNEL_MAX, as_triple, quantize_channels
from swatchspace.core.config import ColorSpace, ConversionConfig
from swatchspace.spaces.gamma import from_linear, to_linear
from swatchspace.spaces.matrix import rgb_to_xyz, xyz_to_rgb
from swatchspace.spaces.specs import get_space_spec

logger = logging.getLogger(__name__)

SpaceTag = Union[ColorSpace, str]


class ColorConverter:
    """
    Convert encoded RGB channels between sRGB and Adobe RGB (1998).

    Conversion stages:
        1. Transfer curve decode (source space)
        2. Linear RGB -> XYZ (source primaries)
        3. XYZ -> linear RGB (target primaries)
        4. Transfer curve encode (target space)
        5. Clamp to [0, 255] and round half-up

    Same-space requests skip stages 1-4.
    """

    def __init__(self, config: Optional[ConversionConfig] = None) -> None:
        self.config = config or ConversionConfig()
        self.config.validate()

        logger.debug(
            "ColorConverter: strict_spaces=%s reject_non_finite=%s default_space=%s",
            self.config.strict_spaces,
            self.config.reject_non_finite,
            self.config.default_space.value,
        )

    def resolve_space(self, tag: Optional[SpaceTag]) -> Optional[ColorSpace]:
        """
        Map a caller-supplied tag to a :class:`ColorSpace`.

        ``None`` resolves to the configured default space. Unknown tags raise
        ``ValueError`` in strict mode and resolve to ``None`` otherwise, which
        callers treat as a pass-through.
        """

        if tag is None:
            return self.config.default_space

        try:
            return ColorSpace.parse(tag)
        except ValueError:
            if self.config.strict_spaces:
                raise
            logger.warning("Unsupported color space %r, passing channels through", tag)
            return None

    def convert(
        self,
        r: float,
        g: float,
        b: float,
        from_space: Optional[SpaceTag],
        to_space: Optional[SpaceTag],
    ) -> Tuple[int, int, int]:
        """Convert one encoded triple; returns integers in [0, 255]."""

        converted = self.convert_array(np.array([r, g, b], dtype=np.float64), from_space, to_space)
        return as_triple(converted)

    def convert_array(
        self,
        pixels: np.ndarray,
        from_space: Optional[SpaceTag],
        to_space: Optional[SpaceTag],
    ) -> np.ndarray:
        """
        Convert an array of encoded triples.

        Parameters
        ----------
        pixels : np.ndarray
            Encoded channels on the 0-255 scale, shape (..., 3). Values outside
            the byte range are accepted and clamped on output.
        from_space, to_space : ColorSpace | str | None
            Source and target tags; ``None`` means the configured default.

        Returns
        -------
        np.ndarray
            ``uint8`` array with the same shape as ``pixels``.
        """

        values = np.asarray(pixels, dtype=np.float64)
        if values.ndim == 0 or values.shape[-1] != 3:
            raise ValueError(f"Expected (..., 3) channel array, got shape {values.shape}")
        self._check_finite(values)

        source = self.resolve_space(from_space)
        target = self.resolve_space(to_space)

        if source is None or target is None or source == target:
            return quantize_channels(values)

        logger.debug(
            "Converting %s -> %s: shape=%s", source.value, target.value, values.shape
        )

        encoded = self._convert_normalized(values, source, target)
        return quantize_channels(encoded * CHANNEL_MAX)

    def _convert_normalized(
        self, values: np.ndarray, source: ColorSpace, target: ColorSpace
    ) -> np.ndarray:
        source_spec = get_space_spec(source)
        target_spec = get_space_spec(target)

        linear = to_linear(values, source_spec)
        xyz = rgb_to_xyz(linear, source_spec)
        linear_target = xyz_to_rgb(xyz, target_spec)
        return from_linear(linear_target, target_spec)

    def _check_finite(self, values: np.ndarray) -> None:
        if np.isfinite(values).all():
            return
        if self.config.reject_non_finite:
            raise ValueError("Input contains NaN or Inf values")
        logger.warning("Input contains NaN or Inf values, output channels will be clamped")


_default_converter = ColorConverter()


def default_converter() -> ColorConverter:
    """Return the shared converter used by the module-level helpers."""

    return _default_converter


def convert(
    r: float,
    g: float,
    b: float,
    from_space: Optional[SpaceTag],
    to_space: Optional[SpaceTag],
) -> Tuple[int, int, int]:
    """
    Convenience wrapper for converting one triple with the default policy.
    """

    return _default_converter.convert(r, g, b, from_space, to_space)


def convert_array(
    pixels: np.ndarray,
    from_space: Optional[SpaceTag],
    to_space: Optional[SpaceTag],
) -> np.ndarray:
    """
    Convenience wrapper for converting an array with the default policy.
    """

    return _default_converter.convert_array(pixels, from_space, to_space)
