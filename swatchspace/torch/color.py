"""
Color space conversion implemented with torch tensors.
"""

from __future__ import annotations

import logging
from typing import Dict, Optional

import torch

from swatchspace.core.channels import CHANNEL_MAX
from swatchspace.core.config import ColorSpace, ConversionConfig, TransferCurve
from swatchspace.core.converter import ColorConverter, SpaceTag
from swatchspace.spaces.specs import COLOR_SPACE_SPECS, ColorSpaceSpec
from swatchspace.torch.common import ensure_tensor, from_nchw, to_nchw

logger = logging.getLogger(__name__)


class TorchColorSpaceConverter:
    """Torch equivalent of :class:`swatchspace.ColorConverter`."""

    def __init__(
        self,
        config: Optional[ConversionConfig] = None,
        device: Optional[torch.device] = None,
        dtype: torch.dtype = torch.float64,
    ) -> None:
        self.device = device or torch.device("cpu")
        self.dtype = dtype
        # Tag resolution and error policy are shared with the numpy converter.
        self.policy = ColorConverter(config)

        self.to_xyz: Dict[ColorSpace, torch.Tensor] = {}
        self.from_xyz: Dict[ColorSpace, torch.Tensor] = {}
        for space, spec in COLOR_SPACE_SPECS.items():
            self.to_xyz[space] = torch.tensor(spec.to_xyz.tolist(), dtype=dtype, device=self.device)
            self.from_xyz[space] = torch.tensor(spec.from_xyz.tolist(), dtype=dtype, device=self.device)

    def _matmul_channel(self, mat: torch.Tensor, img: torch.Tensor) -> torch.Tensor:
        """
        Multiply a 3x3 matrix with an image tensor in NCHW format.
        """

        # Reshape: (B, C, H, W) -> (B, H, W, C)
        img_swapped = img.permute(0, 2, 3, 1)
        result = torch.tensordot(img_swapped, mat.T, dims=([3], [0]))
        return result.permute(0, 3, 1, 2)

    def to_linear(self, encoded: torch.Tensor, spec: ColorSpaceSpec) -> torch.Tensor:
        v = encoded / CHANNEL_MAX
        if spec.curve == TransferCurve.PIECEWISE_SRGB:
            v_pow = torch.clamp(v, min=spec.decode_threshold)
            power = torch.pow((v_pow + spec.offset) / (1.0 + spec.offset), spec.gamma)
            return torch.where(v > spec.decode_threshold, power, v / spec.toe_slope)
        return torch.sign(v) * torch.pow(torch.abs(v), spec.gamma)

    def from_linear(self, linear: torch.Tensor, spec: ColorSpaceSpec) -> torch.Tensor:
        if spec.curve == TransferCurve.PIECEWISE_SRGB:
            lin_pow = torch.clamp(linear, min=spec.encode_threshold)
            power = (1.0 + spec.offset) * torch.pow(lin_pow, 1.0 / spec.gamma) - spec.offset
            return torch.where(linear > spec.encode_threshold, power, spec.toe_slope * linear)
        return torch.pow(torch.clamp(linear, min=0.0), 1.0 / spec.gamma)

    def quantize(self, encoded: torch.Tensor) -> torch.Tensor:
        """Clamp to [0, 255] and round half-up, keeping the tensor dtype."""

        values = torch.nan_to_num(encoded, nan=0.0, posinf=CHANNEL_MAX, neginf=0.0)
        return torch.floor(torch.clamp(values, 0.0, CHANNEL_MAX) + 0.5)

    def convert(
        self,
        img,
        from_space: Optional[SpaceTag],
        to_space: Optional[SpaceTag],
    ) -> torch.Tensor:
        """
        Convert encoded RGB tensors between spaces.

        Parameters
        ----------
        img : torch.Tensor or array-like
            Encoded channels on the 0-255 scale: ``(3,)``, ``(H, W, 3)``,
            ``(3, H, W)`` or ``(N, 3, H, W)``. A rank-3 tensor whose last axis
            is 3 is read as ``(H, W, 3)``.

        Returns
        -------
        torch.Tensor
            ``uint8`` tensor in the input layout, like ``convert_array``.
        """

        tensor = ensure_tensor(img, device=self.device, dtype=self.dtype)
        img_cf, fmt = to_nchw(tensor)

        if not torch.isfinite(img_cf).all():
            if self.policy.config.reject_non_finite:
                raise ValueError("Input contains NaN or Inf values")
            logger.warning("Input contains NaN or Inf values, output channels will be clamped")

        source = self.policy.resolve_space(from_space)
        target = self.policy.resolve_space(to_space)

        if source is None or target is None or source == target:
            return from_nchw(self.quantize(img_cf), fmt).to(torch.uint8)

        logger.debug(
            "Converting %s -> %s on %s: shape=%s",
            source.value,
            target.value,
            self.device,
            tuple(img_cf.shape),
        )

        source_spec = COLOR_SPACE_SPECS[source]
        target_spec = COLOR_SPACE_SPECS[target]

        linear = self.to_linear(img_cf, source_spec)
        xyz = self._matmul_channel(self.to_xyz[source], linear)
        linear_target = self._matmul_channel(self.from_xyz[target], xyz)
        encoded = self.from_linear(linear_target, target_spec) * CHANNEL_MAX

        return from_nchw(self.quantize(encoded), fmt).to(torch.uint8)


def convert_torch(
    img,
    from_space: Optional[SpaceTag],
    to_space: Optional[SpaceTag],
    device: Optional[torch.device] = None,
    dtype: torch.dtype = torch.float64,
) -> torch.Tensor:
    """
    Convenience wrapper mirroring :func:`swatchspace.convert_array`.
    """

    converter = TorchColorSpaceConverter(device=device, dtype=dtype)
    return converter.convert(img, from_space, to_space)
