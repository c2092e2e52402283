"""
StaffDesk Backend — Request Logging Middleware
================================================

What:  One access log line per HTTP request.
How:   Measures wall time around the downstream app and logs method, path,
       status, duration, request id and client address.

    Level by status:
        5xx → ERROR, 4xx → WARNING, otherwise INFO

Request bodies are never logged: they carry plaintext passwords on
POST /add_employee and PUT /employee/{id}.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from app.middleware.request_id import request_id_var

logger = logging.getLogger("staffdesk.access")


def level_for_status(status: int) -> int:
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Access logging with request id correlation; /health is not logged."""

    SKIPPED_PATHS = frozenset({"/health"})

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in self.SKIPPED_PATHS:
            return await call_next(request)

        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            # Answered as a 500 by RequestIDMiddleware
            self._log_access(request, 500, started)
            raise

        self._log_access(request, response.status_code, started)
        return response

    def _log_access(self, request: Request, status: int, started: float) -> None:
        fields = {
            "request_id": request_id_var.get(""),
            "method": request.method,
            "path": request.url.path,
            "status": status,
            "duration_ms": round((time.perf_counter() - started) * 1000, 2),
            "client_ip": request.client.host if request.client else "unknown",
        }
        logger.log(
            level_for_status(status),
            "[%(request_id)s] %(method)s %(path)s -> %(status)d in %(duration_ms).1fms (%(client_ip)s)",
            fields,
            extra=fields,
        )
