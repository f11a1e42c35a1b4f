"""
Color derivation for placeholder images.

Given a base color, computes the shades the SVG composer needs:

- a lighter stop for the background gradient
- a tint for the dot texture
- a contrasting label color

All channel arithmetic truncates after the floating-point multiply.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import NamedTuple

logger = logging.getLogger(__name__)

DARK_LABEL_COLOR = "#111111"
LIGHT_LABEL_COLOR = "#eeeeee"
TRANSPARENT_LABEL_COLOR = "#ffffff00"

# (brightness upper bound, factor); brightness >= 150 uses the fallback factor
_LIGHTER_TIERS: tuple[tuple[float, float], ...] = (
    (10, 60.0),
    (30, 3.0),
    (60, 2.0),
    (100, 1.75),
    (150, 1.5),
)
_LIGHTER_FALLBACK = 0.8

_DOT_THRESHOLD = 80
_DOT_LIGHTEN = 1.8
_DOT_DARKEN = 0.55


class RGB(NamedTuple):
    r: int
    g: int
    b: int

    @classmethod
    def from_hex(cls, hex_color: str) -> RGB:
        """Parse a normalized 6-digit hex string (no leading '#')."""
        if len(hex_color) != 6:
            raise ValueError(f"Expected 6 hex digits, got {hex_color!r}")
        return cls(
            int(hex_color[0:2], 16),
            int(hex_color[2:4], 16),
            int(hex_color[4:6], 16),
        )

    @property
    def hex(self) -> str:
        return _format_channels(self.r, self.g, self.b)


@dataclass(frozen=True)
class DerivedPalette:
    base: str
    gradient_stop: str
    dot_tint: str
    label_color: str


def _format_channels(r: int, g: int, b: int) -> str:
    # %02x: a channel above 255 widens to three digits
    return f"{r:02x}{g:02x}{b:02x}"


def brightness(rgb: RGB) -> float:
    """BT.601 luma on the 0..255 scale."""
    return 0.299 * rgb.r + 0.587 * rgb.g + 0.114 * rgb.b


def luminance(rgb: RGB) -> float:
    """Brightness normalized to 0..1."""
    return brightness(rgb) / 255


def _lighter_factor(value: float) -> float:
    for upper, factor in _LIGHTER_TIERS:
        if value < upper:
            return factor
    return _LIGHTER_FALLBACK


def lighter_shade(rgb: RGB) -> str:
    """
    Gradient end stop for ``rgb``.

    Dark colors get large multiplicative boosts; colors brighter than 150
    are scaled down instead so they stay distinguishable from white.
    Channels are clamped to 255.
    """
    value = brightness(rgb)
    factor = _lighter_factor(value)
    logger.debug("Lighter shade: base=%s brightness=%.2f factor=%s", rgb.hex, value, factor)
    return _format_channels(
        int(min(rgb.r * factor, 255)),
        int(min(rgb.g * factor, 255)),
        int(min(rgb.b * factor, 255)),
    )


def dot_shade(rgb: RGB) -> str:
    """
    Dot texture tint for ``rgb``.

    Channels are not clamped, so a dark but saturated base can produce a
    channel above 255 which formats to three hex digits.
    """
    value = brightness(rgb)
    factor = _DOT_LIGHTEN if value < _DOT_THRESHOLD else _DOT_DARKEN
    logger.debug("Dot shade: base=%s brightness=%.2f factor=%s", rgb.hex, value, factor)
    return _format_channels(
        int(rgb.r * factor),
        int(rgb.g * factor),
        int(rgb.b * factor),
    )


def contrast_color(rgb: RGB) -> str:
    """Label color that stays readable on top of ``rgb``."""
    if luminance(rgb) > 0.5:
        return DARK_LABEL_COLOR
    return LIGHT_LABEL_COLOR


def derive(
    base: RGB,
    show_gradient: bool = False,
    show_dots: bool = False,
    show_label: bool = False,
) -> DerivedPalette:
    """Build the palette for one placeholder; disabled layers fall back to no-op colors."""
    base_hex = base.hex
    return DerivedPalette(
        base=base_hex,
        gradient_stop=lighter_shade(base) if show_gradient else base_hex,
        dot_tint=dot_shade(base) if show_dots else base_hex,
        label_color=contrast_color(base) if show_label else TRANSPARENT_LABEL_COLOR,
    )
