"""Placeholder SVG image service."""

__version__ = "0.1.0"
