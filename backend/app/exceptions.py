"""
StaffDesk Backend — Custom Exception Hierarchy
================================================

What:  Application-specific exceptions for the error scenarios the API knows about.
Why:   Services raise these instead of building HTTP responses; global handlers
       registered in main.py turn them into JSON bodies with the right status.
How:   Each exception carries a user-facing message and an optional context dict.
       The context is logged server-side and never returned to the client.

Exception Hierarchy:
    StaffDeskError (base)
    ├── ValidationError   → 400 Bad Request (missing field, nothing to update)
    ├── NotFoundError     → 404 Not Found (unmatched employee id)
    ├── FileStorageError  → 500 Internal Server Error (upload write failed)
    └── DatabaseError     → 500 Internal Server Error (any store failure)
"""

from typing import Any, Dict, Optional


class StaffDeskError(Exception):
    """
    Base exception for all StaffDesk application errors.

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


class ValidationError(StaffDeskError):
    """
    Raised when client input is missing something the operation needs.

    Only presence is checked: a category without a name, an employee without
    one of the required fields, or an update that carries no usable field.
    """

    def __init__(
        self,
        message: str = "Validation failed",
        fields: Optional[list] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if fields:
            ctx["fields"] = list(fields)
        super().__init__(message=message, context=ctx)
        self.fields = list(fields) if fields else []


class NotFoundError(StaffDeskError):
    """
    Raised when a statement addressed by id matched no row.

    The store reports zero affected rows rather than an error; the service
    layer converts that count into this exception.
    """

    def __init__(
        self,
        resource: str = "Resource",
        resource_id: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=f"{resource} not found.", context=ctx)


class FileStorageError(StaffDeskError):
    """Raised when an uploaded file cannot be written to the upload directory."""

    def __init__(
        self,
        message: str = "Failed to save uploaded image.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class DatabaseError(StaffDeskError):
    """
    Raised when a store statement fails.

    Security Note:
        The response body is always the fixed "Query Error" marker. The
        statement, driver message and constraint names are logged only.
    """

    def __init__(
        self,
        message: str = "A database error occurred.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
