"""
Request observability middleware.

CorrelationMiddleware accepts or mints an ``X-Correlation-ID`` and echoes
it on the response. RequestLoggingMiddleware writes one line when a request
arrives and one when it completes, tagged with method, path, status and
elapsed milliseconds.

Dependencies: fastapi, starlette, course_catalog.observability
System role: Request/response observability injection
"""

import logging
import time

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from course_catalog.observability.correlation import (
    clear_correlation_id,
    set_correlation_id,
)

logger = logging.getLogger(__name__)

CORRELATION_HEADER = "X-Correlation-ID"


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log each request and its outcome."""

    async def dispatch(self, request: Request, call_next) -> Response:
        started = time.perf_counter()
        route = f"{request.method} {request.url.path}"
        fields = {"method": request.method, "path": request.url.path}

        logger.info(
            route,
            extra={
                **fields,
                "client_host": request.client.host if request.client else None,
            },
        )

        try:
            response: Response = await call_next(request)
        except Exception as e:
            logger.exception(
                f"{route} failed",
                extra={**fields, "elapsed_ms": _elapsed_ms(started), "error_type": type(e).__name__},
            )
            raise

        level = logging.WARNING if response.status_code >= 500 else logging.INFO
        logger.log(
            level,
            f"{route} -> {response.status_code}",
            extra={**fields, "status_code": response.status_code, "elapsed_ms": _elapsed_ms(started)},
        )
        return response


class CorrelationMiddleware(BaseHTTPMiddleware):
    """Bind a correlation ID to the request context."""

    async def dispatch(self, request: Request, call_next) -> Response:
        correlation_id = set_correlation_id(request.headers.get(CORRELATION_HEADER))
        try:
            response: Response = await call_next(request)
        finally:
            clear_correlation_id()
        response.headers[CORRELATION_HEADER] = correlation_id
        return response
