import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from placeholder_svg.core.config import Settings, settings
from placeholder_svg.middleware.monitoring import MonitoringMiddleware
from placeholder_svg.monitoring.sentry import capture_exception, init_sentry
from placeholder_svg.routers import health, placeholder

logger = logging.getLogger(__name__)

SERVICE_NAME = "placeholder-svg-api"


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure FastAPI application."""
    app_settings = app_settings or settings

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info(
            "Placeholder service ready: environment=%s cache_control=%r",
            app_settings.ENVIRONMENT,
            app_settings.cache_control,
        )
        yield
        logger.info("Placeholder service shutting down")

    init_sentry(
        service_name=SERVICE_NAME,
        enable_fastapi=True,
        app_settings=app_settings,
    )

    app = FastAPI(
        title="Placeholder SVG",
        version=app_settings.APP_VERSION,
        lifespan=lifespan,
        docs_url="/docs" if app_settings.DOCS_ENABLED else None,
        redoc_url="/redoc" if app_settings.DOCS_ENABLED else None,
        openapi_url="/openapi.json" if app_settings.DOCS_ENABLED else None,
    )
    app.state.settings = app_settings

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Log all unhandled exceptions with full traceback"""
        logger.error(
            f"Unhandled exception on {request.method} {request.url.path}: {str(exc)}",
            exc_info=True,
            extra={
                "method": request.method,
                "url": str(request.url),
                "client": request.client.host if request.client else None,
            },
        )
        capture_exception(exc, method=request.method, path=request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal server error"},
        )

    # healthz 를 먼저 등록 (placeholder 경로는 2~3 segment 라 충돌 없음)
    app.include_router(health.router)
    app.include_router(placeholder.router)

    app.add_middleware(MonitoringMiddleware)

    return app


def configure_logging(log_level_name: str) -> None:
    log_level = getattr(logging, log_level_name.upper(), logging.INFO)
    if not isinstance(log_level, int):
        log_level = logging.INFO

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def main() -> None:
    configure_logging(settings.LOG_LEVEL)
    logger.info(f"Server starting on port :{settings.PORT}")
    uvicorn.run(
        api,
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


# Create app instance
api = create_app()


if __name__ == "__main__":
    main()
