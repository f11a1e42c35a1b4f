"""
Monitoring middleware for FastAPI.

Provides:
- Request ID propagation and response timing headers
- Logging and Sentry capture for requests that fail with an exception
"""

import logging
import time
import uuid
from typing import Callable

from fastapi import HTTPException, Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from placeholder_svg.monitoring.sentry import capture_exception

logger = logging.getLogger(__name__)


class MonitoringMiddleware(BaseHTTPMiddleware):
    """
    Middleware that times each request and turns escaped exceptions into JSON 500s.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """
        Process request with timing and error handling.

        Args:
            request: FastAPI request
            call_next: Next middleware/route handler

        Returns:
            Response from the handler or error response
        """
        start_time = time.time()
        request_id = request.headers.get("X-Request-ID") or uuid.uuid4().hex

        try:
            response = await call_next(request)
        except HTTPException:
            raise
        except Exception as exc:
            return self._handle_error(request, exc, start_time, request_id)

        duration_ms = (time.time() - start_time) * 1000
        response.headers["X-Request-ID"] = request_id
        response.headers["X-Process-Time"] = f"{duration_ms:.2f}ms"

        logger.debug(
            "%s %s -> %s (%.2fms)",
            request.method,
            request.url.path,
            response.status_code,
            duration_ms,
        )
        return response

    def _handle_error(
        self, request: Request, exc: Exception, start_time: float, request_id: str
    ) -> JSONResponse:
        """
        Handle error during request processing.

        Args:
            request: FastAPI request
            exc: Exception that occurred
            start_time: Request start time
            request_id: Request ID

        Returns:
            JSON error response
        """
        duration_ms = (time.time() - start_time) * 1000

        logger.error(
            f"Request failed: {request.method} {request.url.path}",
            exc_info=exc,
            extra={
                "request_id": request_id,
                "duration_ms": duration_ms,
                "client_ip": request.client.host if request.client else "unknown",
            },
        )
        capture_exception(
            exc,
            request_id=request_id,
            path=request.url.path,
            duration_ms=f"{duration_ms:.2f}",
        )

        return JSONResponse(
            status_code=500,
            content={
                "detail": "Internal server error",
                "request_id": request_id,
            },
            headers={
                "X-Request-ID": request_id,
                "X-Process-Time": f"{duration_ms:.2f}ms",
            },
        )
