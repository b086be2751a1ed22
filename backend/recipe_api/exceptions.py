"""
Recipe API — Custom Exception Hierarchy
=========================================

What:  Application-specific exceptions for the two error kinds the API knows:
       a record that does not exist, and anything else the store reports.
How:   Each exception carries a client-safe message and an optional context
       dict. Global handlers (registered in main.py) turn them into JSON
       responses with the right status code.
Who:   Raised by RecipeStore and RecipeService; caught by global handlers.

Exception Hierarchy:
    RecipeApiError (base)
    ├── ValidationError          → 400 Bad Request ("Invalid data")
    ├── NotFoundError            → 404 Not Found ("Recipe not found")
    ├── DatabaseError            → 500 Internal Server Error (opaque)
    └── StoreError               → raised by RecipeStore, never seen by clients
        ├── RecipeValidationError  (schema violation on create)
        └── MalformedIdError       (identifier outside the store's id scheme)

Store-level exceptions are translated by RecipeService: on create every
failure becomes ValidationError, elsewhere every failure becomes
DatabaseError. A malformed id is therefore indistinguishable from an outage
to API consumers.
"""

from typing import Any, Dict, Optional


class RecipeApiError(Exception):
    """
    Base exception for all Recipe API errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(RecipeApiError):
    """
    Raised when a write is rejected because the submitted data is unusable.

    HTTP:    400 Bad Request
    Body:    {"error": "Invalid data", "code": "validation_error", ...}

    No field-level detail is ever returned; the offending field, if known,
    is kept in `context` for the server log only.
    """

    def __init__(
        self,
        message: str = "Invalid data",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class NotFoundError(RecipeApiError):
    """
    Raised when an identifier does not resolve to a record.

    HTTP:    404 Not Found
    Body:    {"error": "Recipe not found", "code": "not_found", ...}

    The store returns None for missing records; the service turns that None
    into this exception.
    """

    def __init__(
        self,
        resource: str = "Recipe",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=f"{resource} not found", context=ctx)


class DatabaseError(RecipeApiError):
    """
    Raised when a store operation fails for any reason other than "not found".

    HTTP:    500 Internal Server Error
    Body:    {"error": "Internal Server Error", "code": "server_error", ...}

    The client message is always generic. The original exception type and
    the identifier involved go into `context` and are logged server-side.
    """

    def __init__(
        self,
        message: str = "Internal Server Error",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class StoreError(Exception):
    """Base class for failures reported by the record store itself."""


class RecipeValidationError(StoreError):
    """A document violates the recipe schema (missing or mistyped field)."""

    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        super().__init__(f"{field}: {reason}")


class MalformedIdError(StoreError):
    """An identifier cannot be interpreted by the store's addressing scheme."""

    def __init__(self, raw_id: str):
        self.raw_id = raw_id
        super().__init__(f"Cast to id failed for value {raw_id!r}")
