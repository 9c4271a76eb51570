"""
Authentication module.

Handles token issuance and verification, password hashing, and the
session lifecycle (register, login, logout, refresh, change password).

Public API:
- ISessionService: Interface for session operations
- TokenIssuer / TokenConfig: Token minting and verification
- PasswordHasher: bcrypt hash and compare
- Auth exceptions: InvalidTokenError, ExpiredTokenError, etc.
"""

from .interfaces import ISessionService
from .models import (
    TokenConfig,
    TokenPayload,
    TokenPair,
    LoginResult,
    RegisterRequest,
    LoginRequest,
    RefreshTokenRequest,
    ChangePasswordRequest,
)
from .tokens import TokenIssuer
from .passwords import PasswordHasher
from .exceptions import (
    InvalidTokenError,
    ExpiredTokenError,
    MissingTokenError,
    RefreshTokenReuseError,
    InvalidCredentialsError,
    InvalidPasswordError,
)

__all__ = [
    # Interface
    "ISessionService",
    # Models
    "TokenConfig",
    "TokenPayload",
    "TokenPair",
    "LoginResult",
    "RegisterRequest",
    "LoginRequest",
    "RefreshTokenRequest",
    "ChangePasswordRequest",
    # Components
    "TokenIssuer",
    "PasswordHasher",
    # Exceptions
    "InvalidTokenError",
    "ExpiredTokenError",
    "MissingTokenError",
    "RefreshTokenReuseError",
    "InvalidCredentialsError",
    "InvalidPasswordError",
]
