"""
Tests for the torch converter. Skipped automatically when torch is unavailable.
"""

from __future__ import annotations

import numpy as np
import pytest

torch = pytest.importorskip("torch")

from swatchspace import ColorSpace, convert, convert_array  # noqa: E402
from swatchspace.torch import TorchColorSpaceConverter, convert_torch  # noqa: E402


def test_torch_matches_numpy_on_hwc_image() -> None:
    rng = np.random.default_rng(3)
    pixels = rng.integers(0, 256, size=(8, 9, 3)).astype(np.float64)

    expected = convert_array(pixels, ColorSpace.ADOBE_RGB, ColorSpace.SRGB)
    result = convert_torch(torch.from_numpy(pixels), ColorSpace.ADOBE_RGB, ColorSpace.SRGB)

    assert result.shape == pixels.shape
    assert np.abs(result.numpy().astype(int) - expected.astype(int)).max() <= 1


def test_torch_batch_layout_is_preserved() -> None:
    img = torch.rand(2, 3, 4, 4, dtype=torch.float64) * 255.0
    converter = TorchColorSpaceConverter(device=torch.device("cpu"))
    result = converter.convert(img, "sRGB", "Adobe RGB")

    assert result.shape == img.shape
    assert torch.isfinite(result).all()
    assert result.min() >= 0.0
    assert result.max() <= 255.0


def test_torch_triple_matches_scalar_convert() -> None:
    result = convert_torch([200.0, 30.0, 30.0], "Adobe RGB", "sRGB")
    assert tuple(int(c) for c in result) == convert(200, 30, 30, "Adobe RGB", "sRGB")


def test_torch_same_space_clamps() -> None:
    result = convert_torch([300.0, -10.0, 128.5], ColorSpace.SRGB, ColorSpace.SRGB)
    assert result.dtype == torch.uint8
    assert result.tolist() == [255, 0, 129]


def test_torch_rejects_non_finite() -> None:
    with pytest.raises(ValueError, match="NaN or Inf"):
        convert_torch([float("nan"), 0.0, 0.0], "sRGB", "Adobe RGB")


def test_torch_reads_short_hwc_strip_as_channel_last() -> None:
    rng = np.random.default_rng(11)
    pixels = rng.integers(0, 256, size=(3, 5, 3)).astype(np.float64)

    expected = convert_array(pixels, ColorSpace.ADOBE_RGB, ColorSpace.SRGB)
    result = convert_torch(torch.from_numpy(pixels), ColorSpace.ADOBE_RGB, ColorSpace.SRGB)

    assert result.shape == pixels.shape
    assert result.dtype == torch.uint8
    assert np.abs(result.numpy().astype(int) - expected.astype(int)).max() <= 1


def test_torch_channel_first_image_is_still_accepted() -> None:
    rng = np.random.default_rng(5)
    pixels = rng.integers(0, 256, size=(4, 6, 3)).astype(np.float64)

    expected = convert_array(pixels, ColorSpace.SRGB, ColorSpace.ADOBE_RGB)
    chw = torch.from_numpy(pixels).permute(2, 0, 1).contiguous()
    result = convert_torch(chw, ColorSpace.SRGB, ColorSpace.ADOBE_RGB)

    assert result.shape == chw.shape
    assert np.abs(result.permute(1, 2, 0).numpy().astype(int) - expected.astype(int)).max() <= 1
