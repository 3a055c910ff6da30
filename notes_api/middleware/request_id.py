"""
Notes API — Request ID Middleware
==================================

What:  Gives every request a correlation id and returns it in X-Request-ID.
How:   Reuses a client-supplied X-Request-ID header, otherwise generates a
       short one. The id goes into a ContextVar read by the exception
       handlers and the access log.

Unexpected exceptions are turned into the 500 response here, while the id is
still set, so that response carries the id in its body and headers too.
"""

import logging
import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"

# Coroutine-local: concurrent requests on one event loop each see their own id.
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


def internal_error_response(rid: str) -> JSONResponse:
    """Generic 500 body; exception details stay in the server log."""
    return JSONResponse(
        status_code=500,
        content={
            "error": "internal_server_error",
            "message": "An unexpected error occurred. Please try again or contact support.",
            "request_id": rid,
        },
    )


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Behavior:
        1. Take X-Request-ID from the request if present
        2. Otherwise generate the first 8 characters of a uuid4
        3. Store it in request_id_var
        4. Answer unhandled exceptions with a 500 carrying the id
        5. Copy it onto the response headers
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())[:8]

        token = request_id_var.set(rid)
        try:
            response = await call_next(request)
        except Exception as exc:
            logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
            response = internal_error_response(rid)
        finally:
            request_id_var.reset(token)

        response.headers[REQUEST_ID_HEADER] = rid
        return response
