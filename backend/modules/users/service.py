"""
Users service implementation.

Profile reads and partial updates for the authenticated user.
"""

import logging
from typing import Optional

from shared.exceptions import ValidationError
from modules.media.interfaces import IMediaUploader
from modules.media.models import AVATAR_FOLDER, COVER_IMAGE_FOLDER, MediaFile

from .exceptions import UserNotFoundError
from .interfaces import IUserRepository, IUserService
from .models import User, UserView

logger = logging.getLogger(__name__)


class UserService(IUserService):
    """Profile operations on top of the user repository and media store."""

    def __init__(self, users: IUserRepository, media: IMediaUploader):
        self._users = users
        self._media = media

    async def get_user(self, user_id: str) -> UserView:
        return self._require_user(user_id).to_view()

    async def update_account(self, user_id: str, fullname: str, email: str) -> UserView:
        if not (fullname or "").strip() or not (email or "").strip():
            raise ValidationError("All fields are required", code="MISSING_FIELDS")

        updated = self._users.update_profile(
            user_id, {"fullname": fullname.strip(), "email": email.strip().lower()}
        )
        if updated is None:
            raise UserNotFoundError(user_id)
        return updated.to_view()

    async def update_avatar(self, user_id: str, file: Optional[MediaFile]) -> UserView:
        url = await self._upload(file, AVATAR_FOLDER, "Avatar file is missing")
        return self._set_media_url(user_id, "avatar_url", url)

    async def update_cover_image(self, user_id: str, file: Optional[MediaFile]) -> UserView:
        url = await self._upload(file, COVER_IMAGE_FOLDER, "Cover image file is missing")
        return self._set_media_url(user_id, "cover_image_url", url)

    async def _upload(self, file: Optional[MediaFile], folder: str, missing_message: str) -> str:
        if file is None or file.is_empty:
            raise ValidationError(missing_message, code="MISSING_FILE")
        return await self._media.upload(file, folder)

    def _set_media_url(self, user_id: str, column: str, url: str) -> UserView:
        updated = self._users.update_profile(user_id, {column: url})
        if updated is None:
            raise UserNotFoundError(user_id)
        logger.info(f"User {user_id} updated {column}")
        return updated.to_view()

    def _require_user(self, user_id: str) -> User:
        user = self._users.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user
