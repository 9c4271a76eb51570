"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules:
in-memory stand-ins for the Supabase-backed repositories and the media
store, and pre-wired auth components.
"""

import uuid
from datetime import datetime, timezone
from typing import Any, Optional

import pytest

from api.dependencies import reset_container
from modules.auth.models import TokenConfig
from modules.auth.passwords import PasswordHasher
from modules.auth.service import SessionService
from modules.auth.tokens import TokenIssuer
from modules.channels.service import ChannelService
from modules.media.exceptions import UploadError
from modules.media.models import MediaFile
from modules.users.exceptions import UserAlreadyExistsError
from modules.users.models import User
from modules.users.service import UserService


TEST_ACCESS_SECRET = "test-access-secret-for-testing-only"
TEST_REFRESH_SECRET = "test-refresh-secret-for-testing-only"


class InMemoryUserRepository:
    """Dict-backed IUserRepository with the same uniqueness rules as the table."""

    def __init__(self) -> None:
        self.rows: dict[str, User] = {}

    def get_by_id(self, user_id: str) -> Optional[User]:
        return self.rows.get(user_id)

    def get_by_username(self, username: str) -> Optional[User]:
        username = username.lower()
        return next((u for u in self.rows.values() if u.username == username), None)

    def get_by_email(self, email: str) -> Optional[User]:
        email = email.lower()
        return next((u for u in self.rows.values() if u.email == email), None)

    def find_by_username_or_email(self, username=None, email=None) -> Optional[User]:
        if username:
            user = self.get_by_username(username)
            if user is not None:
                return user
        if email:
            return self.get_by_email(email)
        return None

    def create(self, data: dict[str, Any]) -> User:
        if self.get_by_username(data["username"]) or self.get_by_email(data["email"]):
            raise UserAlreadyExistsError()
        now = datetime.now(timezone.utc)
        user = User(id=str(uuid.uuid4()), created_at=now, updated_at=now, **data)
        self.rows[user.id] = user
        return user

    def update_profile(self, user_id: str, fields: dict[str, Any]) -> Optional[User]:
        user = self.rows.get(user_id)
        if user is None:
            return None
        if "email" in fields:
            other = self.get_by_email(fields["email"])
            if other is not None and other.id != user_id:
                raise UserAlreadyExistsError("Email is already in use")
        self.rows[user_id] = user.model_copy(update=fields)
        return self.rows[user_id]

    def update_password_hash(self, user_id: str, password_hash: str) -> None:
        self._update(user_id, password_hash=password_hash)

    def set_refresh_token(self, user_id: str, token: str) -> None:
        self._update(user_id, refresh_token=token)

    def rotate_refresh_token(self, user_id: str, expected: str, new_token: str) -> bool:
        user = self.rows.get(user_id)
        if user is None or user.refresh_token != expected:
            return False
        self._update(user_id, refresh_token=new_token)
        return True

    def clear_refresh_token(self, user_id: str) -> None:
        self._update(user_id, refresh_token=None)

    def _update(self, user_id: str, **fields: Any) -> None:
        user = self.rows.get(user_id)
        if user is not None:
            self.rows[user_id] = user.model_copy(update=fields)


class InMemorySubscriptionRepository:
    """Set of (subscriber_id, channel_id) edges."""

    def __init__(self) -> None:
        self.edges: set[tuple[str, str]] = set()

    def subscribe(self, subscriber_id: str, channel_id: str) -> None:
        self.edges.add((subscriber_id, channel_id))

    def count_subscribers(self, channel_id: str) -> int:
        return sum(1 for _, c in self.edges if c == channel_id)

    def count_subscriptions(self, subscriber_id: str) -> int:
        return sum(1 for s, _ in self.edges if s == subscriber_id)

    def is_subscribed(self, subscriber_id: str, channel_id: str) -> bool:
        return (subscriber_id, channel_id) in self.edges


class FakeMediaUploader:
    """Records uploads; can be told to fail."""

    def __init__(self) -> None:
        self.uploads: list[tuple[str, str]] = []
        self.fail = False
        self.fail_folders: set[str] = set()

    async def upload(self, file: MediaFile, folder: str) -> str:
        if self.fail or folder in self.fail_folders:
            raise UploadError(file.filename, "storage unavailable")
        self.uploads.append((folder, file.filename))
        return f"https://media.test/{folder}/{file.filename}"


def make_media_file(filename: str = "avatar.png", content: bytes = b"\x89PNG fake") -> MediaFile:
    """Helper to create an in-memory image."""
    return MediaFile(filename=filename, content=content, content_type="image/png")


@pytest.fixture(autouse=True)
def reset_service_container():
    """Reset the DI container before and after each test."""
    reset_container()
    yield
    reset_container()


@pytest.fixture
def token_config() -> TokenConfig:
    return TokenConfig(
        access_secret=TEST_ACCESS_SECRET,
        access_expire_minutes=15,
        refresh_secret=TEST_REFRESH_SECRET,
        refresh_expire_days=10,
    )


@pytest.fixture
def token_issuer(token_config: TokenConfig) -> TokenIssuer:
    return TokenIssuer(token_config)


@pytest.fixture
def password_hasher() -> PasswordHasher:
    """bcrypt's minimum cost factor keeps the suite fast."""
    return PasswordHasher(rounds=4)


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def subscription_repository() -> InMemorySubscriptionRepository:
    return InMemorySubscriptionRepository()


@pytest.fixture
def media_uploader() -> FakeMediaUploader:
    return FakeMediaUploader()


@pytest.fixture
def avatar_file() -> MediaFile:
    return make_media_file()


@pytest.fixture
def session_service(user_repository, token_issuer, password_hasher, media_uploader) -> SessionService:
    return SessionService(
        users=user_repository,
        tokens=token_issuer,
        passwords=password_hasher,
        media=media_uploader,
    )


@pytest.fixture
def user_service(user_repository, media_uploader) -> UserService:
    return UserService(users=user_repository, media=media_uploader)


@pytest.fixture
def channel_service(user_repository, subscription_repository) -> ChannelService:
    return ChannelService(users=user_repository, subscriptions=subscription_repository)


@pytest.fixture
def make_file():
    """Factory fixture for in-memory uploads."""
    return make_media_file
