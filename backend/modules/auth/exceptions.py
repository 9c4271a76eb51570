"""
Authentication module exceptions.

These exceptions are raised by the auth module and caught by the API
error handler. The refresh flow raises a distinct class for each 401
cause (missing, invalid/expired, reused) so logs can tell them apart.
"""

from shared.exceptions import UnauthorizedError, ValidationError


class InvalidTokenError(UnauthorizedError):
    """Raised when a JWT token is invalid or malformed."""

    def __init__(self, message: str = "Invalid authentication token"):
        super().__init__(message, code="INVALID_TOKEN")


class ExpiredTokenError(UnauthorizedError):
    """Raised when a JWT token has expired."""

    def __init__(self, message: str = "Authentication token has expired"):
        super().__init__(message, code="TOKEN_EXPIRED")


class MissingTokenError(UnauthorizedError):
    """Raised when no token is provided."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message, code="MISSING_TOKEN")


class RefreshTokenReuseError(UnauthorizedError):
    """Raised when a refresh token is valid but no longer the stored one."""

    def __init__(self, user_id: str):
        super().__init__(
            "Refresh token is expired or used",
            code="REFRESH_TOKEN_REUSED",
            details={"user_id": user_id},
        )


class InvalidCredentialsError(UnauthorizedError):
    """Raised when the login password doesn't match."""

    def __init__(self, message: str = "Invalid user credentials"):
        super().__init__(message, code="INVALID_CREDENTIALS")


class InvalidPasswordError(ValidationError):
    """Raised when the old password given to change-password is wrong."""

    def __init__(self, message: str = "Invalid old password"):
        super().__init__(message, code="INVALID_OLD_PASSWORD")
