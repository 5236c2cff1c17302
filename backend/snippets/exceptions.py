"""
Snippets — Custom Exception Hierarchy
======================================

What:  Application-specific exceptions for the error scenarios we handle.
How:   Each exception carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return structured JSON error responses.
Who:   Raised by the store and services; caught by create_snippet or by
       the global handlers.

Exception Hierarchy:
    SnippetsError (base)
    ├── NotFoundError     → 404 Not Found
    └── DatabaseError     → 500 Internal Server Error

Note on create_snippet:
    create_snippet treats every SnippetsError as a "recognized" failure and
    shows its message in the form. Edit and delete let them propagate to
    the handlers instead.
"""

from typing import Any, Dict, Optional


class SnippetsError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  Human-readable error description
        context:  Additional debug info (logged, not rendered)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class NotFoundError(SnippetsError):
    """
    Raised when a requested resource does not exist.

    SQLAlchemy returns None for missing rows; the store converts that
    into this exception so the handler can answer 404.
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id is not None:
            message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = str(resource_id)
        super().__init__(message=message, context=ctx)


class DatabaseError(SnippetsError):
    """
    Raised when a store operation fails.

    The message is the driver's error text. The global handler never
    returns it to API clients; create_snippet does show it in the form.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
