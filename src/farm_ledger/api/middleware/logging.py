"""
Request logging middleware.

Logs all incoming HTTP requests with timing information.
"""

import logging
import time
import uuid
from typing import Awaitable, Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Middleware to log all HTTP requests with timing information.

    Logs method, path, request ID, response status and processing time.
    Adds X-Process-Time and X-Request-ID headers to every response; the
    request id is echoed from the request or generated when absent.
    """

    def __init__(
        self,
        app: ASGIApp,
        *,
        logger_instance: logging.Logger | None = None,
        skip_paths: set[str] | None = None,
    ) -> None:
        """
        Initialize the logging middleware.

        Args:
            app: ASGI application
            logger_instance: Custom logger instance
            skip_paths: Paths to skip logging for
        """
        super().__init__(app)
        self._logger = logger_instance or logger
        self._skip_paths = skip_paths or {"/health"}

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        if request.url.path in self._skip_paths:
            return await call_next(request)

        start_time = time.time()
        method = request.method
        path = request.url.path
        request_id = request.headers.get("x-request-id") or f"req-{uuid.uuid4().hex[:12]}"

        try:
            response = await call_next(request)
        except Exception as e:
            duration_ms = (time.time() - start_time) * 1000
            self._logger.error(
                "Request failed",
                extra={
                    "event": "request_failed",
                    "method": method,
                    "path": path,
                    "request_id": request_id,
                    "error": str(e),
                    "duration_ms": round(duration_ms, 2),
                },
                exc_info=True,
            )
            raise

        duration_ms = (time.time() - start_time) * 1000
        self._logger.info(
            "Request completed",
            extra={
                "event": "request_completed",
                "method": method,
                "path": path,
                "request_id": request_id,
                "status_code": response.status_code,
                "duration_ms": round(duration_ms, 2),
            },
        )

        response.headers["X-Process-Time"] = f"{duration_ms:.2f}"
        response.headers["X-Request-ID"] = request_id
        return response
