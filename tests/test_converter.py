"""
Tests for the space conversion orchestrator.
"""

from __future__ import annotations

import itertools
import logging

import numpy as np
import pytest

from swatchspace import (
    ColorConverter,
    ColorSpace,
    ConversionConfig,
    convert,
    convert_array,
)

SPACES = list(ColorSpace)

NEAR_NEUTRAL = [
    (120, 128, 136),
    (200, 190, 180),
    (60, 64, 70),
    (100, 110, 90),
    (230, 220, 235),
    (35, 32, 30),
]


@pytest.mark.parametrize("space", SPACES)
@pytest.mark.parametrize(
    "channels, expected",
    [
        ((0, 0, 0), (0, 0, 0)),
        ((12.4, 12.5, 254.6), (12, 13, 255)),
        ((300, -10, 128.5), (255, 0, 129)),
        ((17, 99, 201), (17, 99, 201)),
    ],
)
def test_same_space_rounds_and_clamps(space, channels, expected) -> None:
    assert convert(*channels, space, space) == expected


@pytest.mark.parametrize("source, target", list(itertools.product(SPACES, SPACES)))
def test_black_is_fixed(source, target) -> None:
    assert convert(0, 0, 0, source, target) == (0, 0, 0)


def test_white_is_preserved_both_ways() -> None:
    assert convert(255, 255, 255, ColorSpace.ADOBE_RGB, ColorSpace.SRGB) == (255, 255, 255)
    assert convert(255, 255, 255, ColorSpace.SRGB, ColorSpace.ADOBE_RGB) == (255, 255, 255)


def test_out_of_range_input_is_clamped() -> None:
    result = convert(300, -10, 128, "sRGB", "Adobe RGB1998")
    assert all(isinstance(channel, int) for channel in result)
    assert all(0 <= channel <= 255 for channel in result)


def test_srgb_red_desaturates_into_adobe() -> None:
    r, g, b = convert(255, 0, 0, "sRGB", "Adobe RGB1998")
    assert 200 < r < 255
    assert g <= 1
    assert b <= 1


def test_adobe_red_clamps_at_srgb_gamut_edge() -> None:
    r, g, b = convert(255, 0, 0, "Adobe RGB1998", "sRGB")
    assert r == 255
    assert g <= 1
    assert b <= 1


def test_adobe_red_gains_saturation_in_srgb() -> None:
    # Reading these channels as sRGB without conversion would look duller
    r, g, b = convert(200, 30, 30, ColorSpace.ADOBE_RGB, ColorSpace.SRGB)
    assert r > 220
    assert g < 30
    assert b < 30


def test_srgb_grey_ramp_round_trips() -> None:
    ramp = np.repeat(np.arange(256, dtype=np.float64)[:, None], 3, axis=1)
    adobe = convert_array(ramp, ColorSpace.SRGB, ColorSpace.ADOBE_RGB)
    back = convert_array(adobe, ColorSpace.ADOBE_RGB, ColorSpace.SRGB)
    assert np.abs(back.astype(int) - ramp.astype(int)).max() <= 1


def test_adobe_grey_ramp_round_trips_above_shadows() -> None:
    ramp = np.repeat(np.arange(16, 256, dtype=np.float64)[:, None], 3, axis=1)
    srgb = convert_array(ramp, ColorSpace.ADOBE_RGB, ColorSpace.SRGB)
    back = convert_array(srgb, ColorSpace.SRGB, ColorSpace.ADOBE_RGB)
    assert np.abs(back.astype(int) - ramp.astype(int)).max() <= 1


@pytest.mark.parametrize("channels", NEAR_NEUTRAL)
@pytest.mark.parametrize(
    "source, target",
    [(ColorSpace.SRGB, ColorSpace.ADOBE_RGB), (ColorSpace.ADOBE_RGB, ColorSpace.SRGB)],
)
def test_near_neutral_round_trip(channels, source, target) -> None:
    there = convert(*channels, source, target)
    back = convert(*there, target, source)
    assert all(abs(a - b) <= 1 for a, b in zip(back, channels))


def test_convert_array_matches_scalar_convert() -> None:
    rng = np.random.default_rng(7)
    pixels = rng.integers(0, 256, size=(6, 5, 3)).astype(np.float64)
    result = convert_array(pixels, "Adobe RGB", "sRGB")

    assert result.shape == pixels.shape
    assert result.dtype == np.uint8
    for index in np.ndindex(pixels.shape[:2]):
        assert tuple(result[index]) == convert(*pixels[index], "Adobe RGB", "sRGB")


def test_convert_array_does_not_mutate_input() -> None:
    pixels = np.array([[300.0, -10.0, 128.0], [12.0, 34.0, 56.0]])
    original = pixels.copy()
    convert_array(pixels, ColorSpace.SRGB, ColorSpace.ADOBE_RGB)
    convert_array(pixels, ColorSpace.SRGB, ColorSpace.SRGB)
    assert np.array_equal(pixels, original)


def test_convert_array_rejects_bad_shape() -> None:
    with pytest.raises(ValueError, match="channel array"):
        convert_array(np.zeros((4, 2)), ColorSpace.SRGB, ColorSpace.ADOBE_RGB)
    with pytest.raises(ValueError):
        convert_array(np.float64(3.0), ColorSpace.SRGB, ColorSpace.ADOBE_RGB)


@pytest.mark.parametrize(
    "tag, expected",
    [
        ("sRGB", ColorSpace.SRGB),
        ("srgb", ColorSpace.SRGB),
        ("Adobe RGB", ColorSpace.ADOBE_RGB),
        ("Adobe RGB1998", ColorSpace.ADOBE_RGB),
        ("AdobeRGB1998", ColorSpace.ADOBE_RGB),
        ("Adobe RGB (1998)", ColorSpace.ADOBE_RGB),
        ("adobe_rgb", ColorSpace.ADOBE_RGB),
        (ColorSpace.SRGB, ColorSpace.SRGB),
    ],
)
def test_parse_space_tags(tag, expected) -> None:
    assert ColorSpace.parse(tag) is expected


def test_unknown_space_raises_by_default() -> None:
    with pytest.raises(ValueError, match="Unsupported color space"):
        convert(10, 20, 30, "ProPhoto RGB", "sRGB")
    with pytest.raises(ValueError):
        convert(10, 20, 30, "sRGB", 42)


def test_unknown_space_passes_through_when_lenient(caplog) -> None:
    converter = ColorConverter(ConversionConfig(strict_spaces=False))
    with caplog.at_level(logging.WARNING, logger="swatchspace.core.converter"):
        result = converter.convert(300, 20.4, 30.5, "Display P3", "sRGB")

    assert result == (255, 20, 31)
    assert "Display P3" in caplog.text


def test_missing_tag_uses_default_space() -> None:
    assert convert(200, 30, 30, None, "sRGB") == convert(200, 30, 30, "Adobe RGB", "sRGB")

    converter = ColorConverter(ConversionConfig(default_space=ColorSpace.SRGB))
    assert converter.convert(200, 30, 30, None, "sRGB") == (200, 30, 30)


def test_non_finite_input_is_rejected() -> None:
    with pytest.raises(ValueError, match="NaN or Inf"):
        convert(float("nan"), 0, 0, ColorSpace.SRGB, ColorSpace.ADOBE_RGB)
    with pytest.raises(ValueError, match="NaN or Inf"):
        convert(0, float("inf"), 0, ColorSpace.SRGB, ColorSpace.SRGB)


def test_non_finite_input_is_clamped_when_allowed(caplog) -> None:
    converter = ColorConverter(ConversionConfig(reject_non_finite=False))
    with caplog.at_level(logging.WARNING, logger="swatchspace.core.converter"):
        result = converter.convert(float("nan"), 10, float("inf"), "sRGB", "sRGB")

    assert result == (0, 10, 255)
    assert "NaN or Inf" in caplog.text


def test_config_validation() -> None:
    with pytest.raises(ValueError, match="default_space"):
        ColorConverter(ConversionConfig(default_space="sRGB"))  # type: ignore[arg-type]
    with pytest.raises(ValueError, match="strict_spaces"):
        ColorConverter(ConversionConfig(strict_spaces="yes"))  # type: ignore[arg-type]
