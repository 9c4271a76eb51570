"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from pydantic import BaseModel, Field


class AuthenticatedUser(BaseModel):
    """
    Represents an authenticated user in the system.

    Populated by the access-token dependency after the token has been
    verified and the user row loaded, then handed to route handlers.
    This is the only place handlers get the caller's identity from.
    """

    id: str = Field(..., description="User ID (UUID)")
    username: str = Field(..., description="Lowercased unique username")
    email: str = Field(..., description="User's email address")
    fullname: str = Field(default="", description="Display name")

    model_config = {
        "frozen": True,  # Make immutable for safety
        "extra": "ignore",
    }
