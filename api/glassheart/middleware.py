"""Request logging middleware for the API."""

from __future__ import annotations

import logging
import time
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from . import settings

logger = logging.getLogger(__name__)

# Paths to exclude from request logging
EXCLUDED_PATHS = {
    f"{settings.API_PREFIX}/health",
    "/docs",
    "/openapi.json",
    "/redoc",
}

# Path prefixes to exclude from request logging
EXCLUDED_PATH_PREFIXES = (
    f"{settings.API_PREFIX}/uploads/",  # Static file serving
)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Log one line per API call with method, path, status and duration.

    Failed calls (4xx/5xx) are logged at WARNING so they stand out.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        path = request.url.path
        started = time.perf_counter()

        response = await call_next(request)

        if self._should_log(request, path):
            elapsed_ms = (time.perf_counter() - started) * 1000
            level = logging.WARNING if response.status_code >= 400 else logging.INFO
            logger.log(
                level,
                f"{request.method} {path} -> {response.status_code} ({elapsed_ms:.1f} ms)",
            )

        return response

    def _should_log(self, request: Request, path: str) -> bool:
        # Skip OPTIONS requests (CORS preflight)
        if request.method == "OPTIONS":
            return False

        if path in EXCLUDED_PATHS:
            return False

        if path.startswith(EXCLUDED_PATH_PREFIXES):
            return False

        return True
