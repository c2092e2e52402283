"""
StaffDesk Backend — Request ID Middleware
===========================================

What:  Assigns a correlation id to each request and echoes it back.
Why:   Error bodies carry the id so a report from the admin UI can be matched
       to the server log line that holds the real cause.
How:   Reuses X-Request-ID when the client sends one, otherwise generates a
       short uuid; stores it in a ContextVar and in request.state.

Unexpected exceptions (anything the typed handlers in main.py do not map) are
answered here, inside the request's context, so the generic 500 body and the
X-Request-ID header still carry the id.
"""

import logging
import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

logger = logging.getLogger(__name__)

# Coroutine-local: concurrent requests on the same thread each see their own id
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


def internal_error_response(rid: str) -> JSONResponse:
    """Generic 500 body; the cause stays in the server log."""
    return JSONResponse(
        status_code=500,
        content={"Status": False, "Error": "Internal Server Error", "request_id": rid},
    )


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Sets request_id_var for the duration of the request and adds X-Request-ID."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        # 8 chars is enough to correlate within one service's logs
        rid = request.headers.get("X-Request-ID") or str(uuid.uuid4())[:8]

        token = request_id_var.set(rid)
        request.state.request_id = rid
        try:
            response = await call_next(request)
        except Exception as exc:
            logger.error(
                "[%s] Unexpected error on %s %s: %s",
                rid,
                request.method,
                request.url.path,
                str(exc),
                exc_info=True,
            )
            response = internal_error_response(rid)
        finally:
            request_id_var.reset(token)

        response.headers["X-Request-ID"] = rid
        return response
