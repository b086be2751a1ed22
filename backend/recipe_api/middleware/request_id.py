"""
Recipe API — Request ID Middleware
====================================

What:  Gives every request a correlation ID that shows up in the access log,
       in error bodies (`request_id`), and in the X-Request-ID response header.
How:   A client may supply its own X-Request-ID so a trace can span the
       caller and this service. The header is attacker-controlled and ends up
       in log lines and JSON bodies, so it is only reused when it is a short
       token of safe characters; anything else gets a generated ID instead.

Accepted client IDs:
    1-64 characters from [A-Za-z0-9._-]
    e.g. "trace-123", "3f2b1c9e", "web.checkout_42"

Rejected (replaced with a generated 8-hex-char ID):
    ""                       empty
    "abc\\r\\nINFO forged"     CR/LF would start a fake log line
    "x" * 65                 longer than MAX_REQUEST_ID_LENGTH
"""

import logging
import re
import uuid
from contextvars import ContextVar
from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"
MAX_REQUEST_ID_LENGTH = 64

_SAFE_REQUEST_ID = re.compile(r"[A-Za-z0-9._-]{1,%d}" % MAX_REQUEST_ID_LENGTH)

# Read by RequestLoggingMiddleware and the exception handlers in main.py
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


def new_request_id() -> str:
    return uuid.uuid4().hex[:8]


def resolve_request_id(supplied: Optional[str]) -> str:
    """Returns the client's ID when it is safe to log and echo, else a fresh one."""
    if supplied and _SAFE_REQUEST_ID.fullmatch(supplied):
        return supplied
    if supplied:
        # Length only; the raw value is exactly what must not reach the log
        logger.debug("Discarding unusable %s header (%d chars)", REQUEST_ID_HEADER, len(supplied))
    return new_request_id()


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Binds the resolved request ID for the duration of one request."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = resolve_request_id(request.headers.get(REQUEST_ID_HEADER))
        token = request_id_var.set(rid)
        request.state.request_id = rid
        try:
            response = await call_next(request)
        finally:
            request_id_var.reset(token)

        response.headers[REQUEST_ID_HEADER] = rid
        return response
