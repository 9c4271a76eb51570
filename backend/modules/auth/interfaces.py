"""
Authentication module interface.

The API layer depends on ISessionService, not the concrete implementation.
This enables testing with fakes and keeps the route handlers thin.
"""

from typing import Protocol, Optional, runtime_checkable

from modules.media.models import MediaFile
from modules.users.models import UserView
from .models import LoginResult, RegisterRequest, TokenPair


@runtime_checkable
class ISessionService(Protocol):
    """
    Interface for the session lifecycle.

    Anonymous --login--> Authenticated --(access expires)--> AccessExpired
    --refresh--> Authenticated; Authenticated --logout--> Anonymous.
    """

    async def register(
        self,
        request: RegisterRequest,
        avatar: Optional[MediaFile],
        cover_image: Optional[MediaFile] = None,
    ) -> UserView:
        """
        Create a new user. Does not log the user in.

        Raises:
            ValidationError: If a required field or the avatar is missing
            UserAlreadyExistsError: If username or email is taken
            UploadError: If the avatar upload fails
        """
        ...

    async def login(
        self,
        username: Optional[str],
        email: Optional[str],
        password: str,
    ) -> LoginResult:
        """
        Check credentials and mint a token pair.

        Raises:
            ValidationError: If neither username nor email is given
            UserNotFoundError: If no user matches
            InvalidCredentialsError: If the password is wrong
        """
        ...

    async def logout(self, user_id: str) -> None:
        """Forget the user's stored refresh token."""
        ...

    async def refresh(self, refresh_token: Optional[str]) -> TokenPair:
        """
        Exchange a refresh token for a new pair, rotating the stored token.

        Raises:
            MissingTokenError: If no token is given
            InvalidTokenError / ExpiredTokenError: If verification fails
            UserNotFoundError: If the token's user is gone
            RefreshTokenReuseError: If the token is not the stored one
        """
        ...

    async def change_password(
        self,
        user_id: str,
        old_password: str,
        new_password: str,
    ) -> None:
        """
        Replace the user's password.

        Raises:
            InvalidPasswordError: If old_password is wrong
        """
        ...
