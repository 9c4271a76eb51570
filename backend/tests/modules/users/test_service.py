"""Tests for the users (profile) service."""

import pytest

from modules.media.exceptions import UploadError
from modules.users.exceptions import UserAlreadyExistsError, UserNotFoundError
from shared.exceptions import ValidationError


def seed_user(user_repository, username: str = "alice", email: str = "alice@x.com"):
    return user_repository.create({
        "username": username,
        "email": email,
        "fullname": "Alice Liddell",
        "password_hash": "hash",
        "avatar_url": "https://media.test/avatars/old.png",
        "cover_image_url": None,
    })


class TestGetUser:
    @pytest.mark.asyncio
    async def test_get_user(self, user_service, user_repository):
        user = seed_user(user_repository)
        user_repository.set_refresh_token(user.id, "secret-token")

        view = await user_service.get_user(user.id)
        dumped = view.model_dump(by_alias=True)

        assert view.username == "alice"
        assert "refreshToken" not in dumped
        assert "passwordHash" not in dumped

    @pytest.mark.asyncio
    async def test_get_missing_user(self, user_service):
        with pytest.raises(UserNotFoundError):
            await user_service.get_user("ghost")


class TestUpdateAccount:
    @pytest.mark.asyncio
    async def test_update_account(self, user_service, user_repository):
        user = seed_user(user_repository)

        view = await user_service.update_account(user.id, " Alice L. ", "new@x.com")

        assert view.fullname == "Alice L."
        assert view.email == "new@x.com"
        assert user_repository.get_by_id(user.id).email == "new@x.com"

    @pytest.mark.asyncio
    async def test_update_account_lowercases_email(self, user_service, user_repository):
        user = seed_user(user_repository)

        view = await user_service.update_account(user.id, "Alice", " New@X.COM ")

        assert view.email == "new@x.com"

    @pytest.mark.asyncio
    async def test_update_account_email_taken_differing_in_case(self, user_service, user_repository):
        user = seed_user(user_repository)
        seed_user(user_repository, username="bob", email="bob@x.com")

        with pytest.raises(UserAlreadyExistsError):
            await user_service.update_account(user.id, "Alice", "Bob@X.com")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("fullname,email",[("", "a@x.com"), ("Alice", " "), ("", "")])
    async def test_update_account_requires_fields(self, user_service, user_repository, fullname, email):
        user = seed_user(user_repository)
        with pytest.raises(ValidationError, match="All fields are required"):
            await user_service.update_account(user.id, fullname, email)

    @pytest.mark.asyncio
    async def test_update_account_email_taken(self, user_service, user_repository):
        user = seed_user(user_repository)
        seed_user(user_repository, username="bob", email="bob@x.com")

        with pytest.raises(UserAlreadyExistsError):
            await user_service.update_account(user.id, "Alice", "bob@x.com")

    @pytest.mark.asyncio
    async def test_update_account_missing_user(self, user_service):
        with pytest.raises(UserNotFoundError):
            await user_service.update_account("ghost", "Alice", "a@x.com")


class TestMediaUpdates:
    @pytest.mark.asyncio
    async def test_update_avatar(self, user_service, user_repository, make_file):
        user = seed_user(user_repository)

        view = await user_service.update_avatar(user.id, make_file("new.png"))

        assert view.avatar_url == "https://media.test/avatars/new.png"

    @pytest.mark.asyncio
    async def test_update_cover_image(self, user_service, user_repository, make_file):
        user = seed_user(user_repository)

        view = await user_service.update_cover_image(user.id, make_file("cover.jpg"))

        assert view.cover_image_url == "https://media.test/cover-images/cover.jpg"
        assert view.avatar_url == "https://media.test/avatars/old.png"

    @pytest.mark.asyncio
    async def test_update_avatar_missing_file(self, user_service, user_repository):
        user = seed_user(user_repository)
        with pytest.raises(ValidationError, match="Avatar file is missing"):
            await user_service.update_avatar(user.id, None)

    @pytest.mark.asyncio
    async def test_update_cover_image_empty_file(self, user_service, user_repository, make_file):
        user = seed_user(user_repository)
        with pytest.raises(ValidationError, match="Cover image file is missing"):
            await user_service.update_cover_image(user.id, make_file(content=b""))

    @pytest.mark.asyncio
    async def test_update_avatar_upload_failure(
        self, user_service, user_repository, media_uploader, make_file
    ):
        user = seed_user(user_repository)
        media_uploader.fail = True

        with pytest.raises(UploadError):
            await user_service.update_avatar(user.id, make_file())
        assert user_repository.get_by_id(user.id).avatar_url == "https://media.test/avatars/old.png"
