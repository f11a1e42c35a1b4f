import logging

from fastapi import APIRouter, Depends, Query, Request, Response
from fastapi.responses import HTMLResponse, PlainTextResponse

from placeholder_svg.core.config import Settings
from placeholder_svg.core.templates import templates
from placeholder_svg.image.svg import render_placeholder
from placeholder_svg.image.validator import (
    DEFAULT_COLOR,
    DEFAULT_FLAG,
    DEFAULT_RADIUS,
    MAX_DIMENSION,
    ValidationError,
    validate,
)
from placeholder_svg.routers.dependencies import get_settings

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Placeholder"])

SVG_MEDIA_TYPE = "image/svg+xml"

LANDING_EXAMPLES = (
    "300/150",
    "300/150/0a84ff?g=true&t=true",
    "200/200/fc6?r=24&d=true&t=true",
    "320/180/111?d=true&g=true&t=true",
)


@router.get("/", response_class=HTMLResponse)
async def index(request: Request, app_settings: Settings = Depends(get_settings)):
    """사용법 안내 페이지"""
    base_url = str(request.base_url)
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "base_url": base_url,
            "examples": [base_url + example for example in LANDING_EXAMPLES],
            "max_dimension": MAX_DIMENSION,
            "default_color": DEFAULT_COLOR,
            "version": app_settings.APP_VERSION,
        },
    )


def _placeholder_response(
    width: str,
    height: str,
    color: str | None,
    r: str,
    d: str,
    g: str,
    t: str,
    app_settings: Settings,
) -> Response:
    try:
        placeholder = validate(width, height, color, radius=r, dot=d, gradient=g, text=t)
    except ValidationError as exc:
        logger.info(
            "Rejected placeholder request: field=%s width=%r height=%r color=%r",
            exc.field,
            width,
            height,
            color,
        )
        return PlainTextResponse(exc.message, status_code=400)

    svg = render_placeholder(placeholder)
    return Response(
        content=svg,
        media_type=SVG_MEDIA_TYPE,
        headers={"Cache-Control": app_settings.cache_control},
    )


@router.get("/{width}/{height}")
async def placeholder(
    width: str,
    height: str,
    r: str = Query(DEFAULT_RADIUS, description="Corner radius"),
    d: str = Query(DEFAULT_FLAG, description="Dot texture ('true' to enable)"),
    g: str = Query(DEFAULT_FLAG, description="Gradient fill ('true' to enable)"),
    t: str = Query(DEFAULT_FLAG, description="Size label ('true' to enable)"),
    app_settings: Settings = Depends(get_settings),
) -> Response:
    """Placeholder SVG with the default color."""
    return _placeholder_response(width, height, None, r, d, g, t, app_settings)


@router.get("/{width}/{height}/{color}")
async def placeholder_with_color(
    width: str,
    height: str,
    color: str,
    r: str = Query(DEFAULT_RADIUS, description="Corner radius"),
    d: str = Query(DEFAULT_FLAG, description="Dot texture ('true' to enable)"),
    g: str = Query(DEFAULT_FLAG, description="Gradient fill ('true' to enable)"),
    t: str = Query(DEFAULT_FLAG, description="Size label ('true' to enable)"),
    app_settings: Settings = Depends(get_settings),
) -> Response:
    """Placeholder SVG filled with ``color``."""
    return _placeholder_response(width, height, color, r, d, g, t, app_settings)
