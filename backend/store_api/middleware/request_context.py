"""
Request correlation and access logging middleware.

``RequestIDMiddleware`` gives every request a correlation id (taken from
the X-Request-ID header or freshly generated) and echoes it on the
response. ``LoggingMiddleware`` logs each request's start, completion and
failure with that id and the latency.

Register LoggingMiddleware before RequestIDMiddleware: Starlette runs the
last registered middleware first, and the logger needs the id to be set.
"""

import time
import uuid
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from store_api.core.logging_config import get_logger


logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Store a correlation id in ``request.state.request_id`` and return it in
    the X-Request-ID response header.
    """

    async def dispatch(
        self, request: Request, call_next: Callable
    ) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        request.state.request_id = request_id

        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = request_id
        return response


class LoggingMiddleware(BaseHTTPMiddleware):
    """
    Log every HTTP request with method, path, status code and latency.

    Unhandled exceptions are logged with their traceback and re-raised.
    """

    async def dispatch(
        self, request: Request, call_next: Callable
    ) -> Response:
        method = request.method
        path = request.url.path
        request_id = getattr(request.state, "request_id", None)

        logger.info(
            "Request started",
            extra={
                "method": method,
                "path": path,
                "query_params": str(request.query_params) or None,
                "request_id": request_id,
            }
        )

        start_time = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception as exc:
            logger.error(
                f"Request failed: {exc}",
                extra={
                    "method": method,
                    "path": path,
                    "latency_ms": round((time.perf_counter() - start_time) * 1000, 2),
                    "request_id": request_id,
                    "exception_type": type(exc).__name__,
                },
                exc_info=True
            )
            raise

        logger.info(
            "Request completed",
            extra={
                "method": method,
                "path": path,
                "status_code": response.status_code,
                "latency_ms": round((time.perf_counter() - start_time) * 1000, 2),
                "request_id": request_id,
            }
        )
        return response
