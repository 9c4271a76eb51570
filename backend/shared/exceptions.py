"""
Base exception classes for the Vidnest backend.

Each module should define its own exceptions that inherit from these bases.
The API layer translates them to HTTP responses in one place
(see api/errors.py), keyed on these base classes.
"""

from typing import Optional, Any


class VidnestError(Exception):
    """
    Base exception for all Vidnest errors.

    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(VidnestError):
    """Input validation failed."""

    pass


class UnauthorizedError(VidnestError):
    """Authentication failed (invalid, missing or stale credentials)."""

    pass


class NotFoundError(VidnestError):
    """Resource not found."""

    pass


class ConflictError(VidnestError):
    """Resource already exists."""

    pass


class InternalError(VidnestError):
    """Unexpected server-side failure."""

    pass


class ExternalServiceError(VidnestError):
    """Error communicating with an external service."""

    def __init__(
        self,
        message: str,
        service: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.service = service
        self.details["service"] = service
