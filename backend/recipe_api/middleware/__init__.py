# Middleware package init
"""
Recipe API — Middleware Package
=================================

Middleware Chain:
    Request → [Request ID] → [Logging] → [CORS] → Route Handler

    Request ID runs first so the access log line carries the correlation ID;
    the ID is also returned to the client in the X-Request-ID header.
"""
