"""
Common router dependencies.
"""
from fastapi import Request

from placeholder_svg.core.config import Settings, settings


def get_settings(request: Request) -> Settings:
    """Return the settings the app was created with."""
    return getattr(request.app.state, "settings", settings)
