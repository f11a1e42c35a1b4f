# placeholder_svg/image/__init__.py
from .color import RGB, DerivedPalette, contrast_color, derive, dot_shade, lighter_shade
from .svg import compose, render_placeholder
from .validator import (
    InvalidColor,
    InvalidDimension,
    PlaceholderRequest,
    ValidationError,
    validate,
)

__all__ = [
    "RGB",
    "DerivedPalette",
    "PlaceholderRequest",
    "ValidationError",
    "InvalidDimension",
    "InvalidColor",
    "validate",
    "derive",
    "lighter_shade",
    "dot_shade",
    "contrast_color",
    "compose",
    "render_placeholder",
]
