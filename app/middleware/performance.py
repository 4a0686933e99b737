"""Request timing middleware."""

import time
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from app.utils.constants import API_PREFIX, SLOW_REQUEST_THRESHOLD_SECONDS
from app.utils.logger import logger


class PerformanceMiddleware(BaseHTTPMiddleware):
    """Times every request and sets an ``X-Process-Time`` header.

    Requests over the slow threshold are logged as warnings. AI generation
    calls are slow by nature, so they are always logged at INFO with their
    duration instead.
    """

    EXCLUDED_PATHS = {
        "/health",
        "/",
        "/docs",
        "/redoc",
        "/openapi.json",
    }

    AI_PATH_PREFIX = f"{API_PREFIX}/ai/"

    def __init__(self, app, slow_threshold: float = SLOW_REQUEST_THRESHOLD_SECONDS):
        super().__init__(app)
        self.slow_threshold = slow_threshold

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.perf_counter()
        response = await call_next(request)
        process_time = time.perf_counter() - start_time

        response.headers["X-Process-Time"] = f"{process_time:.4f}"

        path = request.url.path
        method = request.method

        if path in self.EXCLUDED_PATHS:
            return response

        if path.startswith(self.AI_PATH_PREFIX):
            logger.info(f"[AI REQUEST] {method} {path} {response.status_code} - {process_time:.3f}s")
        elif process_time >= self.slow_threshold:
            logger.warning(f"[SLOW REQUEST] {method} {path} - {process_time:.3f}s")
        else:
            logger.debug(f"[REQUEST] {method} {path} - {process_time:.3f}s")

        return response
