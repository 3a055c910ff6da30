"""
Notes API — Request Logging Middleware
=======================================

What:  One access-log line per HTTP request.
How:   Times the downstream call and logs method, path, status, duration,
       request id and client ip on the "notes_api.access" logger.

Log level follows the status code:
    5xx → ERROR, 4xx → WARNING, everything else → INFO

Request bodies are never logged; note content stays out of the logs.
Health probes (/ and /health) are skipped.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from notes_api.middleware.request_id import request_id_var

logger = logging.getLogger("notes_api.access")

HEALTH_PATHS = {"/", "/health"}


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        path = request.url.path
        if path in HEALTH_PATHS:
            return await call_next(request)

        start_time = time.perf_counter()
        client_ip = getattr(request.client, "host", "unknown") if request.client else "unknown"
        method = request.method
        rid = request_id_var.get("")

        response = await call_next(request)

        duration_ms = (time.perf_counter() - start_time) * 1000
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
