"""
LinkVault Backend — Custom Exception Hierarchy
================================================

What:  Application-specific exceptions for each class of request failure.
How:   Each exception carries a client-safe message and an optional context
       dict. Global exception handlers (registered in main.py) turn them into
       responses with the right status code; context is only ever logged.
Who:   Raised by routes and the auth gate; caught by global handlers.

Exception Hierarchy:
    LinkVaultError (base)
    ├── ValidationError      → 400 Bad Request
    ├── AuthorizationError   → 401 Unauthorized
    ├── NotFoundError        → 404 Not Found
    └── DatabaseError        → 500 Internal Server Error
"""

from typing import Any, Dict, Optional


class LinkVaultError(Exception):
    """
    Base exception for all LinkVault application errors.

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


class ValidationError(LinkVaultError):
    """
    Raised when client input fails validation.

    When:    Malformed JSON body, missing required field, unparsable id.
    HTTP:    400 Bad Request

    Example response:
        {"error": "Title and URL are required"}
    """

    def __init__(
        self,
        message: str = "Invalid request body",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class AuthorizationError(LinkVaultError):
    """
    Raised by the auth gate when the supplied password does not match.

    HTTP:    401 Unauthorized
    The message is fixed so that the response never hints at why the
    credential was rejected.
    """

    def __init__(self, context: Optional[Dict[str, Any]] = None):
        super().__init__(message="Unauthorized", context=context)


class NotFoundError(LinkVaultError):
    """
    Raised when a path does not name anything this service serves.

    When:    /api/categories/ or /api/bookmarks/ with no id.
    HTTP:    404 Not Found (plain text body)
    """

    def __init__(
        self,
        resource: str = "resource",
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        ctx = context or {}
        ctx["resource"] = resource
        super().__init__(message=message, context=ctx)


class DatabaseError(LinkVaultError):
    """
    Raised when a store operation fails.

    What:    Wraps the SQLAlchemy error raised by a service.
    HTTP:    500 Internal Server Error

    The message is the generic "Failed to <verb> <resource>" text chosen by
    the route; the original error type and text are kept in `context` for
    the server log only.
    """

    def __init__(
        self,
        message: str = "A database error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
