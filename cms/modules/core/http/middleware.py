"""HTTP middleware provided by the core module."""

import time
import logging
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)


class ResponseTimerMiddleware(BaseHTTPMiddleware):
    """Middleware timing each request and reporting it in X-Response-Time."""

    async def dispatch(self, request: Request, call_next):
        started = time.perf_counter()

        response = await call_next(request)

        elapsed = (time.perf_counter() - started) * 1000
        response.headers["X-Response-Time"] = f"{elapsed:.2f}ms"
        logger.info(f"{request.method} {request.url.path} -> {response.status_code} ({elapsed:.2f}ms)")

        return response


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Middleware to add security headers to all responses."""

    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)

        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "SAMEORIGIN"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"

        return response
