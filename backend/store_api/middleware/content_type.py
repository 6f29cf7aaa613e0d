"""
JSON content-type enforcement.

The API only speaks JSON: a request that carries a body (POST, PUT, PATCH)
must declare ``Content-Type: application/json``, otherwise it is rejected
with 415 before reaching a route.
"""

from typing import Callable

from fastapi import Request, Response, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware


BODY_METHODS = frozenset({"POST", "PUT", "PATCH"})


class JSONContentTypeMiddleware(BaseHTTPMiddleware):
    """
    Reject body-carrying requests whose media type is not application/json.

    Parameters such as ``; charset=utf-8`` are allowed.
    """

    async def dispatch(
        self, request: Request, call_next: Callable
    ) -> Response:
        if request.method in BODY_METHODS:
            content_type = request.headers.get("content-type", "")
            media_type = content_type.split(";", 1)[0].strip().lower()
            if media_type != "application/json":
                return JSONResponse(
                    status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
                    content={"detail": "Content-Type must be application/json"},
                )

        return await call_next(request)
