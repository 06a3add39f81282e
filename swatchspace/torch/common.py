"""
Shared helpers for the torch-based converter.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

import torch


@dataclass(frozen=True)
class TensorFormat:
    """Bookkeeping for tensor layout during conversion."""

    original_dim: int
    channel_first: bool


def ensure_tensor(
    data,
    device: Optional[torch.device] = None,
    dtype: torch.dtype = torch.float32,
) -> torch.Tensor:
    """
    Convert input data to a torch tensor on the requested device.
    """

    if isinstance(data, torch.Tensor):
        tensor = data.to(dtype=dtype)
        if device is not None:
            tensor = tensor.to(device)
        return tensor

    return torch.as_tensor(data, dtype=dtype, device=device)


def to_nchw(img: torch.Tensor) -> Tuple[torch.Tensor, TensorFormat]:
    """
    Reshape an RGB tensor to NCHW.

    Accepts ``(3,)`` triples, ``(H, W, 3)`` or ``(3, H, W)`` images and
    ``(N, 3, H, W)`` batches. Rank-3 input with a trailing axis of 3 is read
    as channel-last, the same ``(..., 3)`` rule as the numpy converter.
    """

    dim = img.dim()
    if dim == 1:
        if img.shape[0] != 3:
            raise ValueError(f"Expected an RGB triple, got shape {tuple(img.shape)}")
        return img.reshape(1, 3, 1, 1), TensorFormat(original_dim=1, channel_first=True)

    if dim == 3:
        if img.shape[-1] == 3:
            channel_first = False
            img_cf = img.permute(2, 0, 1)
        elif img.shape[0] == 3:
            channel_first = True
            img_cf = img
        else:
            raise ValueError(f"Expected 3 color channels, got shape {tuple(img.shape)}")
        return img_cf.unsqueeze(0), TensorFormat(original_dim=3, channel_first=channel_first)

    if dim == 4:
        if img.shape[1] != 3:
            raise ValueError(f"Expected NCHW with 3 channels, got shape {tuple(img.shape)}")
        return img, TensorFormat(original_dim=4, channel_first=True)

    raise ValueError(f"Unsupported tensor rank {dim} for color input.")


def from_nchw(img: torch.Tensor, fmt: TensorFormat) -> torch.Tensor:
    """
    Convert an NCHW tensor back to the original layout.
    """

    if img.dim() != 4:
        raise ValueError("Expected NCHW tensor with a batch dimension.")

    if fmt.original_dim == 4:
        return img
    if fmt.original_dim == 1:
        return img.reshape(3)

    img = img.squeeze(0)
    if fmt.channel_first:
        return img
    return img.permute(1, 2, 0)
