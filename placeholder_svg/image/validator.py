"""
Request validation for placeholder images.

Width and height must be integers in (0, 3000]. Colors accept an optional
leading '#' and 3 or 6 hex digits. Border radius is lenient: anything that
does not parse or does not fit the image falls back to 0.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from placeholder_svg.image.color import RGB

MAX_DIMENSION = 3000
DEFAULT_COLOR = "333333"
DEFAULT_RADIUS = "0"
DEFAULT_FLAG = "false"

_INT_RE = re.compile(r"[+-]?[0-9]+")
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


class ValidationError(Exception):
    """Base class for user-facing request errors."""

    def __init__(self, message: str, field: str):
        super().__init__(message)
        self.message = message
        self.field = field


class InvalidDimension(ValidationError):
    pass


class InvalidColor(ValidationError):
    def __init__(self, message: str = "Invalid color format"):
        super().__init__(message, "color")


@dataclass(frozen=True)
class PlaceholderRequest:
    width: int
    height: int
    color: RGB
    border_radius: int = 0
    show_dots: bool = False
    show_gradient: bool = False
    show_label: bool = False

    @property
    def max_radius(self) -> int:
        return max_radius(self.width, self.height)


def max_radius(width: int, height: int) -> int:
    return min(width, height) // 2


def parse_int(value: str | None) -> int | None:
    """Strict decimal parse: optional sign and ASCII digits only."""
    if value is None or not _INT_RE.fullmatch(value):
        return None
    try:
        return int(value)
    except ValueError:
        # digit strings past the interpreter's int conversion limit
        return None


def parse_flag(value: str | None) -> bool:
    return value == "true"


def _parse_dimension(value: str | None, field: str) -> int:
    parsed = parse_int(value)
    if parsed is None or parsed <= 0 or parsed > MAX_DIMENSION:
        raise InvalidDimension(f"Invalid {field}", field)
    return parsed


def normalize_color(value: str | None) -> str:
    """
    Normalize a user-supplied color to 6 lower-case hex digits.

    Examples:
        None -> "333333"
        "#ABCDEF" -> "abcdef"
        "abc" -> "aabbcc"
    """
    color = value or DEFAULT_COLOR
    if color.startswith("#"):
        color = color[1:]

    if len(color) not in (3, 6) or not set(color) <= _HEX_DIGITS:
        raise InvalidColor()

    if len(color) == 3:
        color = "".join(ch * 2 for ch in color)
    return color.lower()


def parse_radius(value: str | None, width: int, height: int) -> int:
    radius = parse_int(value)
    if radius is None or radius < 0 or radius > max_radius(width, height):
        return 0
    return radius


def validate(
    width: str | None,
    height: str | None,
    color: str | None = None,
    radius: str | None = DEFAULT_RADIUS,
    dot: str | None = DEFAULT_FLAG,
    gradient: str | None = DEFAULT_FLAG,
    text: str | None = DEFAULT_FLAG,
) -> PlaceholderRequest:
    """
    Build a PlaceholderRequest from raw path and query strings.

    Raises:
        InvalidDimension: width or height is not an integer in (0, 3000]
        InvalidColor: color is not 3 or 6 hex digits
    """
    w = _parse_dimension(width, "width")
    h = _parse_dimension(height, "height")
    rgb = RGB.from_hex(normalize_color(color))

    return PlaceholderRequest(
        width=w,
        height=h,
        color=rgb,
        border_radius=parse_radius(radius, w, h),
        show_dots=parse_flag(dot),
        show_gradient=parse_flag(gradient),
        show_label=parse_flag(text),
    )
