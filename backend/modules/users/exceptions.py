"""
Users module exceptions.
"""

from shared.exceptions import ConflictError, NotFoundError


class UserNotFoundError(NotFoundError):
    """Raised when a user lookup matches no row."""

    def __init__(self, identifier: str):
        super().__init__(
            "User does not exist",
            code="USER_NOT_FOUND",
            details={"user": identifier},
        )


class UserAlreadyExistsError(ConflictError):
    """Raised when a username or email is already taken."""

    def __init__(self, message: str = "User with this email or username already exists"):
        super().__init__(message, code="USER_ALREADY_EXISTS")
