"""
Shared infrastructure for Vidnest backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- database: Supabase client factory
- exceptions: Base exception classes
- logging: Process-wide log handler setup

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .database import get_supabase_client, reset_client_cache
from .exceptions import (
    VidnestError,
    ValidationError,
    UnauthorizedError,
    NotFoundError,
    ConflictError,
    InternalError,
    ExternalServiceError,
)
from .logging import configure_logging
from .models import AuthenticatedUser

__all__ = [
    "Settings",
    "get_settings",
    "get_supabase_client",
    "reset_client_cache",
    "VidnestError",
    "ValidationError",
    "UnauthorizedError",
    "NotFoundError",
    "ConflictError",
    "InternalError",
    "ExternalServiceError",
    "configure_logging",
    "AuthenticatedUser",
]
