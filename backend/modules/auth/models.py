"""
Authentication module data models.

These models define the data structures used by the auth module
and exposed to other modules through the interface.
"""

from typing import Literal, Optional
from pydantic import BaseModel, Field

from modules.users.models import ApiModel, UserView
from shared.config import Settings

TokenType = Literal["access", "refresh"]


class TokenConfig(BaseModel):
    """
    Signing material and lifetimes for the token issuer.

    Passed to TokenIssuer at construction; the issuer never reads
    settings on its own.
    """

    access_secret: str
    access_expire_minutes: int = 15
    refresh_secret: str
    refresh_expire_days: int = 10
    algorithm: str = "HS256"

    model_config = {"frozen": True}

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenConfig":
        return cls(
            access_secret=settings.access_token_secret,
            access_expire_minutes=settings.access_token_expire_minutes,
            refresh_secret=settings.refresh_token_secret,
            refresh_expire_days=settings.refresh_token_expire_days,
            algorithm=settings.jwt_algorithm,
        )

    @property
    def access_max_age(self) -> int:
        """Access token lifetime in seconds."""
        return self.access_expire_minutes * 60

    @property
    def refresh_max_age(self) -> int:
        """Refresh token lifetime in seconds."""
        return self.refresh_expire_days * 86400


class TokenPayload(BaseModel):
    """Decoded claims of an access or refresh token."""

    sub: str = Field(..., description="Subject (user ID)")
    type: TokenType = Field(..., description="Token class")
    jti: str = Field(..., description="Unique token ID")
    iat: int = Field(..., description="Issued at timestamp")
    exp: int = Field(..., description="Expiration timestamp")

    # Access tokens only
    username: Optional[str] = None
    email: Optional[str] = None


class TokenPair(ApiModel):
    """An access token and the refresh token minted with it."""

    access_token: str
    refresh_token: str


class LoginResult(ApiModel):
    """Body of a successful login: the user plus both tokens."""

    user: UserView
    access_token: str
    refresh_token: str


class RegisterRequest(BaseModel):
    """Text fields of the registration form."""

    fullname: str = ""
    email: str = ""
    username: str = ""
    password: str = ""


class LoginRequest(ApiModel):
    """Body of POST /login. Either username or email is required."""

    username: Optional[str] = None
    email: Optional[str] = None
    password: str = ""


class RefreshTokenRequest(ApiModel):
    """Body of POST /refresh-token for clients that don't keep cookies."""

    refresh_token: Optional[str] = None


class ChangePasswordRequest(ApiModel):
    """Body of POST /change-password."""

    old_password: str = ""
    new_password: str = ""
