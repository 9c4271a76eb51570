"""
Users module.

Stores user rows and serves profile reads and updates.

Public API:
- IUserRepository / IUserService: Interfaces
- User: Stored row (includes credentials, never serialized to clients)
- UserView: Public projection returned by the API
- Exceptions: UserNotFoundError, UserAlreadyExistsError
"""

from .interfaces import IUserRepository, IUserService
from .models import User, UserView, UpdateAccountRequest
from .exceptions import UserNotFoundError, UserAlreadyExistsError

__all__ = [
    # Interfaces
    "IUserRepository",
    "IUserService",
    # Models
    "User",
    "UserView",
    "UpdateAccountRequest",
    # Exceptions
    "UserNotFoundError",
    "UserAlreadyExistsError",
]
