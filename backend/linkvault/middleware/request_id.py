"""
LinkVault Backend — Request ID Middleware
===========================================

What:  Gives each request a short correlation ID and returns it in the
       X-Request-ID response header.
How:   Uses the client's X-Request-ID when present, otherwise a fresh
       8-character UUID prefix. The value is stored in a ContextVar so any
       logger in the request can include it.
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# ContextVar, not threading.local: concurrent requests share one thread
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Assigns a request ID, exposes it to loggers and echoes it back."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = request.headers.get("X-Request-ID", str(uuid.uuid4())[:8])

        request_id_var.set(rid)

        response = await call_next(request)
        response.headers["X-Request-ID"] = rid

        return response
