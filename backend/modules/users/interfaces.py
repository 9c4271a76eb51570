"""
Users module interfaces.

IUserRepository is the credential store contract the auth and users
services are written against; IUserService is what the API layer calls.
"""

from typing import Protocol, Optional, Any, runtime_checkable

from modules.media.models import MediaFile
from .models import User, UserView


@runtime_checkable
class IUserRepository(Protocol):
    """Storage contract for user rows."""

    def get_by_id(self, user_id: str) -> Optional[User]: ...

    def get_by_username(self, username: str) -> Optional[User]: ...

    def get_by_email(self, email: str) -> Optional[User]: ...

    def find_by_username_or_email(
        self,
        username: Optional[str] = None,
        email: Optional[str] = None,
    ) -> Optional[User]: ...

    def create(self, data: dict[str, Any]) -> User: ...

    def update_profile(self, user_id: str, fields: dict[str, Any]) -> Optional[User]: ...

    def update_password_hash(self, user_id: str, password_hash: str) -> None: ...

    def set_refresh_token(self, user_id: str, token: str) -> None: ...

    def rotate_refresh_token(self, user_id: str, expected: str, new_token: str) -> bool:
        """Atomically swap the stored refresh token if it equals `expected`."""
        ...

    def clear_refresh_token(self, user_id: str) -> None: ...


@runtime_checkable
class IUserService(Protocol):
    """
    Interface for profile operations on an authenticated user.
    """

    async def get_user(self, user_id: str) -> UserView:
        """
        Get the public view of a user.

        Raises:
            UserNotFoundError: If the user does not exist
        """
        ...

    async def update_account(self, user_id: str, fullname: str, email: str) -> UserView:
        """
        Update fullname and email.

        Raises:
            ValidationError: If either field is blank
            UserAlreadyExistsError: If the email belongs to another user
        """
        ...

    async def update_avatar(self, user_id: str, file: Optional[MediaFile]) -> UserView:
        """
        Upload a new avatar and point the user at it.

        Raises:
            ValidationError: If no file was sent
            UploadError: If the media store fails
        """
        ...

    async def update_cover_image(self, user_id: str, file: Optional[MediaFile]) -> UserView:
        """Same as update_avatar, for the cover image."""
        ...
