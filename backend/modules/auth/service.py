"""
Session service implementation.

Registration, login, logout, refresh-token rotation and password change,
on top of the user repository, the token issuer and the password hasher.
"""

import logging
from typing import Optional

from shared.exceptions import ValidationError
from modules.media.interfaces import IMediaUploader
from modules.media.exceptions import UploadError
from modules.media.models import AVATAR_FOLDER, COVER_IMAGE_FOLDER, MediaFile
from modules.users.exceptions import UserAlreadyExistsError, UserNotFoundError
from modules.users.interfaces import IUserRepository
from modules.users.models import UserView

from .exceptions import (
    ExpiredTokenError,
    InvalidCredentialsError,
    InvalidPasswordError,
    InvalidTokenError,
    MissingTokenError,
    RefreshTokenReuseError,
)
from .interfaces import ISessionService
from .models import LoginResult, RegisterRequest, TokenPair
from .passwords import MAX_PASSWORD_BYTES, PasswordHasher
from .tokens import TokenIssuer

logger = logging.getLogger(__name__)


def _blank(value: Optional[str]) -> bool:
    return value is None or value.strip() == ""


def _check_password_length(password: str) -> None:
    # bcrypt only accepts up to 72 bytes
    if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise ValidationError(
            f"Password must be at most {MAX_PASSWORD_BYTES} bytes",
            code="PASSWORD_TOO_LONG",
        )


class SessionService(ISessionService):
    """
    Session lifecycle over a single stored refresh token per user.

    A refresh token is honoured only while it equals the stored value;
    every successful refresh overwrites it, so each refresh token is
    good for exactly one exchange.
    """

    def __init__(
        self,
        users: IUserRepository,
        tokens: TokenIssuer,
        passwords: PasswordHasher,
        media: IMediaUploader,
    ):
        self._users = users
        self._tokens = tokens
        self._passwords = passwords
        self._media = media

    async def register(
        self,
        request: RegisterRequest,
        avatar: Optional[MediaFile],
        cover_image: Optional[MediaFile] = None,
    ) -> UserView:
        fields = [request.fullname, request.email, request.username, request.password]
        if any(_blank(f) for f in fields):
            raise ValidationError("All fields are required", code="MISSING_FIELDS")
        _check_password_length(request.password)

        username = request.username.strip().lower()
        email = request.email.strip().lower()

        if self._users.find_by_username_or_email(username=username, email=email):
            raise UserAlreadyExistsError()

        if avatar is None or avatar.is_empty:
            raise ValidationError("Avatar file is required", code="MISSING_AVATAR")

        avatar_url = await self._media.upload(avatar, AVATAR_FOLDER)
        cover_image_url = None
        if cover_image is not None and not cover_image.is_empty:
            # Cover image is optional; registration goes on without it
            try:
                cover_image_url = await self._media.upload(cover_image, COVER_IMAGE_FOLDER)
            except UploadError as e:
                logger.warning(f"Cover image upload failed for {username}: {e.message}")

        user = self._users.create({
            "fullname": request.fullname.strip(),
            "email": email,
            "username": username,
            "password_hash": await self._passwords.hash(request.password),
            "avatar_url": avatar_url,
            "cover_image_url": cover_image_url,
        })

        logger.info(f"Registered user {user.id} ({user.username})")
        return user.to_view()

    async def login(
        self,
        username: Optional[str],
        email: Optional[str],
        password: str,
    ) -> LoginResult:
        if _blank(username) and _blank(email):
            raise ValidationError("Username or email is required", code="MISSING_IDENTIFIER")

        username = None if _blank(username) else username.strip().lower()
        email = None if _blank(email) else email.strip().lower()

        user = self._users.find_by_username_or_email(username=username, email=email)
        if user is None:
            raise UserNotFoundError(username or email or "")

        if not await self._passwords.verify(password, user.password_hash):
            logger.warning(f"Failed login for user {user.id}")
            raise InvalidCredentialsError()

        pair = self._tokens.mint_pair(user)
        self._users.set_refresh_token(user.id, pair.refresh_token)

        logger.info(f"User {user.id} logged in")
        return LoginResult(
            user=user.to_view(),
            access_token=pair.access_token,
            refresh_token=pair.refresh_token,
        )

    async def logout(self, user_id: str) -> None:
        self._users.clear_refresh_token(user_id)
        logger.info(f"User {user_id} logged out")

    async def refresh(self, refresh_token: Optional[str]) -> TokenPair:
        if _blank(refresh_token):
            logger.warning("Refresh rejected: no token presented")
            raise MissingTokenError("Unauthorized request")

        try:
            payload = self._tokens.verify_refresh_token(refresh_token)
        except (InvalidTokenError, ExpiredTokenError) as e:
            logger.warning(f"Refresh rejected: {e.code}")
            raise

        user = self._users.get_by_id(payload.sub)
        if user is None:
            raise UserNotFoundError(payload.sub)

        if user.refresh_token != refresh_token:
            logger.warning(f"Refresh rejected for user {user.id}: token is not the stored one")
            raise RefreshTokenReuseError(user.id)

        pair = self._tokens.mint_pair(user)
        if not self._users.rotate_refresh_token(user.id, refresh_token, pair.refresh_token):
            # Another refresh with the same token committed first
            logger.warning(f"Refresh rejected for user {user.id}: lost rotation race")
            raise RefreshTokenReuseError(user.id)

        logger.info(f"Rotated refresh token for user {user.id}")
        return pair

    async def change_password(
        self,
        user_id: str,
        old_password: str,
        new_password: str,
    ) -> None:
        if _blank(new_password):
            raise ValidationError("New password is required", code="MISSING_FIELDS")
        _check_password_length(new_password)

        user = self._users.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)

        if not await self._passwords.verify(old_password, user.password_hash):
            raise InvalidPasswordError()

        self._users.update_password_hash(user_id, await self._passwords.hash(new_password))
        logger.info(f"User {user_id} changed password")
