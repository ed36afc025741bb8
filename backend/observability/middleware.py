"""
FastAPI middleware for observability.

Correlation ID and request logging middleware.

Dependencies: fastapi, starlette, backend.observability.correlation
System role: Request/response observability injection
"""

import logging
import time

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from backend.observability.correlation import clear_correlation_id, set_correlation_id

logger = logging.getLogger(__name__)

# Liveness probes hit these every few seconds; keep them at DEBUG
QUIET_PATH_PREFIXES = ("/api/health",)


def _elapsed_ms(start: float) -> float:
    return round((time.perf_counter() - start) * 1000, 2)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs one line per request with status and timing."""

    async def dispatch(self, request: Request, call_next):
        """
        Log the outcome of a request.

        Successful requests log at INFO, 4xx at WARNING and 5xx at ERROR.
        Health probes log at DEBUG. Unhandled exceptions are logged with
        traceback and re-raised.
        """
        start = time.perf_counter()
        method = request.method
        path = request.url.path
        context = {
            "method": method,
            "path": path,
            "client_host": request.client.host if request.client else None,
        }

        try:
            response: Response = await call_next(request)
        except Exception as e:
            logger.exception(
                f"{method} {path} - unhandled {type(e).__name__}",
                extra={**context, "process_time_ms": _elapsed_ms(start)},
            )
            raise

        if path.startswith(QUIET_PATH_PREFIXES):
            level = logging.DEBUG
        elif response.status_code >= 500:
            level = logging.ERROR
        elif response.status_code >= 400:
            level = logging.WARNING
        else:
            level = logging.INFO

        logger.log(
            level,
            f"{method} {path} - {response.status_code}",
            extra={
                **context,
                "status_code": response.status_code,
                "process_time_ms": _elapsed_ms(start),
            },
        )
        return response


class CorrelationMiddleware(BaseHTTPMiddleware):
    """Binds X-Correlation-ID (incoming or generated) to the request context."""

    async def dispatch(self, request: Request, call_next):
        correlation_id = set_correlation_id(request.headers.get("X-Correlation-ID"))
        try:
            response: Response = await call_next(request)
        finally:
            clear_correlation_id()
        response.headers["X-Correlation-ID"] = correlation_id
        return response
