"""
Snippets — Request Logging Middleware
======================================

What:  One access log line per request: method, path, status, duration,
       request ID and client IP.
When:  Runs inside RequestIDMiddleware so the request ID is available.

Log levels by status:
    5xx → ERROR, 4xx → WARNING, everything else (including the 303
    redirects after form posts) → INFO.

Request bodies are never logged; they hold user-submitted snippet code.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from snippets.middleware.request_id import request_id_var

logger = logging.getLogger("snippets.access")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs each HTTP request with its status and duration."""

    # Probes run every few seconds; logging them drowns real traffic
    SKIPPED_PATHS = {"/health"}

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in self.SKIPPED_PATHS:
            return await call_next(request)

        start_time = time.perf_counter()
        client_ip = getattr(request.client, "host", "unknown") if request.client else "unknown"
        method = request.method
        path = request.url.path

        response = await call_next(request)

        duration_ms = (time.perf_counter() - start_time) * 1000
        rid = request_id_var.get("")

        status = response.status_code
        if status >= 500:
            log_level = logging.ERROR
        elif status >= 400:
            log_level = logging.WARNING
        else:
            log_level = logging.INFO

        logger.log(
            log_level,
            "%s %s %d %.1fms [%s] from %s",
            method,
            path,
            status,
            duration_ms,
            rid,
            client_ip,
            extra={
                "request_id": rid,
                "method": method,
                "path": path,
                "status": status,
                "duration_ms": round(duration_ms, 2),
                "client_ip": client_ip,
            },
        )

        return response
