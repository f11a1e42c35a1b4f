"""Shared templates configuration for FastAPI routers."""

from pathlib import Path

from fastapi.templating import Jinja2Templates

# placeholder_svg/core/templates.py -> placeholder_svg/core -> placeholder_svg -> templates
TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
