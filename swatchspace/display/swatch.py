"""
Catalog color swatches.

A swatch is a named catalog color as stored by the admin dashboard: raw RGB
channels in a declared space, CMYK percentages for the press, and an
optional spot color reference. The stored channels are never rewritten;
display values are derived on every read.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from swatchspace.core.config import ColorSpace
from swatchspace.core.converter import ColorConverter, SpaceTag, default_converter
from swatchspace.display.formatting import format_css, format_hex, to_display_rgb

# Accepted column spellings per field, in priority order. Imports from
# spreadsheets and design tools use the short names.
ROW_ALIASES: Dict[str, Tuple[str, ...]] = {
    "name": ("name", "colorName", "colorname"),
    "display_name": ("display_name", "displayName", "displayname"),
    "rgb_r": ("rgb_r", "r", "red"),
    "rgb_g": ("rgb_g", "g", "green"),
    "rgb_b": ("rgb_b", "b", "blue"),
    "cmyk_c": ("cmyk_c", "c", "cyan"),
    "cmyk_m": ("cmyk_m", "m", "magenta"),
    "cmyk_y": ("cmyk_y", "y", "yellow"),
    "cmyk_k": ("cmyk_k", "k", "black"),
    "spot_color": ("spot_color", "spotColor", "spotcolor"),
    "color_space": ("color_space", "colorSpace", "colorspace"),
}

RGB_LABELS = (("rgb_r", "RGB Red"), ("rgb_g", "RGB Green"), ("rgb_b", "RGB Blue"))
CMYK_LABELS = (
    ("cmyk_c", "CMYK Cyan"),
    ("cmyk_m", "CMYK Magenta"),
    ("cmyk_y", "CMYK Yellow"),
    ("cmyk_k", "CMYK Black"),
)


def _lookup(row: Mapping[str, Any], key: str) -> Any:
    for alias in ROW_ALIASES[key]:
        value = row.get(alias)
        if value is not None and value != "":
            return value
    return None


def _number(value: Any) -> float:
    if value is None:
        return 0.0
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ValueError(f"Expected a number, got {value!r}") from None


@dataclass
class ColorSwatch:
    """A catalog color with its declared RGB space."""

    name: str
    display_name: str
    rgb_r: float
    rgb_g: float
    rgb_b: float
    cmyk_c: float = 0.0
    cmyk_m: float = 0.0
    cmyk_y: float = 0.0
    cmyk_k: float = 0.0
    spot_color: Optional[str] = None
    color_space: ColorSpace = ColorSpace.ADOBE_RGB
    extra: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.color_space = ColorSpace.parse(self.color_space)

    @classmethod
    def from_row(
        cls,
        row: Mapping[str, Any],
        index: int = 0,
        default_space: ColorSpace = ColorSpace.ADOBE_RGB,
    ) -> "ColorSwatch":
        """
        Build a swatch from a database row or an imported record.

        Missing names fall back to ``imported-color-<n>``; missing channels
        read as 0; a missing space tag reads as ``default_space``.
        """

        name = _lookup(row, "name") or f"imported-color-{index + 1}"
        display_name = (
            _lookup(row, "display_name")
            or _lookup(row, "name")
            or f"Imported Color {index + 1}"
        )
        tag = _lookup(row, "color_space")
        spot = _lookup(row, "spot_color")
        known = {alias for aliases in ROW_ALIASES.values() for alias in aliases}

        return cls(
            name=str(name),
            display_name=str(display_name),
            rgb_r=_number(_lookup(row, "rgb_r")),
            rgb_g=_number(_lookup(row, "rgb_g")),
            rgb_b=_number(_lookup(row, "rgb_b")),
            cmyk_c=_number(_lookup(row, "cmyk_c")),
            cmyk_m=_number(_lookup(row, "cmyk_m")),
            cmyk_y=_number(_lookup(row, "cmyk_y")),
            cmyk_k=_number(_lookup(row, "cmyk_k")),
            spot_color=str(spot) if spot is not None else None,
            color_space=ColorSpace.parse(tag) if tag is not None else default_space,
            extra={key: value for key, value in row.items() if key not in known},
        )

    @property
    def rgb(self) -> Tuple[float, float, float]:
        return self.rgb_r, self.rgb_g, self.rgb_b

    def validation_errors(self) -> List[str]:
        """Range problems: RGB must be 0-255, CMYK 0-100."""

        errors = []
        for attr, label in RGB_LABELS:
            if not 0 <= getattr(self, attr) <= 255:
                errors.append(f"{label} must be 0-255")
        for attr, label in CMYK_LABELS:
            if not 0 <= getattr(self, attr) <= 100:
                errors.append(f"{label} must be 0-100")
        return errors

    def validate(self) -> None:
        errors = self.validation_errors()
        if errors:
            raise ValueError(f"Invalid swatch {self.name!r}: " + "; ".join(errors))

    def to_srgb(self, converter: Optional[ColorConverter] = None) -> Tuple[int, int, int]:
        return to_display_rgb(*self.rgb, self.color_space, converter)

    def css_color(self, converter: Optional[ColorConverter] = None) -> str:
        return format_css(self.to_srgb(converter))

    def hex_color(self, converter: Optional[ColorConverter] = None) -> str:
        return format_hex(self.to_srgb(converter))

    def preview(self, converter: Optional[ColorConverter] = None) -> Dict[str, Any]:
        """
        Values for a swatch preview panel.

        Returns the declared space and raw input, the converted sRGB triple
        with its CSS and hex renderings, and, for wide-gamut swatches, the CSS
        color a browser would show if the channels were taken as sRGB as-is.
        """

        converter = converter or default_converter()
        srgb = self.to_srgb(converter)
        preview: Dict[str, Any] = {
            "name": self.name,
            "display_name": self.display_name,
            "color_space": self.color_space.value,
            "input_rgb": self.rgb,
            "srgb": srgb,
            "css": format_css(srgb),
            "hex": format_hex(srgb),
        }
        if self.color_space != ColorSpace.SRGB:
            preview["unconverted_css"] = format_css(
                to_display_rgb(*self.rgb, ColorSpace.SRGB, converter)
            )
        return preview


def filter_swatches(
    swatches: Iterable[ColorSwatch],
    space: Optional[SpaceTag] = None,
    search: str = "",
) -> List[ColorSwatch]:
    """
    Filter by declared space and a case-insensitive search term.

    The search term matches name, display name or spot color.
    """

    wanted = ColorSpace.parse(space) if space is not None else None
    term = search.lower()

    matches = []
    for swatch in swatches:
        if wanted is not None and swatch.color_space != wanted:
            continue
        if term:
            haystack: Sequence[str] = (
                swatch.name,
                swatch.display_name,
                swatch.spot_color or "",
            )
            if not any(term in text.lower() for text in haystack):
                continue
        matches.append(swatch)
    return matches
