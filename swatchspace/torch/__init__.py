"""
Tensor color space conversion backed by PyTorch.
"""

from swatchspace.torch.color import TorchColorSpaceConverter, convert_torch

__all__ = ["TorchColorSpaceConverter", "convert_torch"]
