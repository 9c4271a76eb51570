"""
Tests for access-token authentication middleware.
"""

import pytest
from unittest.mock import MagicMock

from fastapi.security import HTTPAuthorizationCredentials

from api.middleware.auth import authenticate, extract_access_token
from modules.auth.exceptions import (
    ExpiredTokenError,
    InvalidTokenError,
    MissingTokenError,
)
from modules.auth.models import TokenConfig
from modules.auth.tokens import TokenIssuer


def make_request(cookies: dict = None) -> MagicMock:
    request = MagicMock()
    request.cookies = cookies or {}
    return request


def seed_user(user_repository):
    return user_repository.create({
        "username": "alice",
        "email": "alice@x.com",
        "fullname": "Alice Liddell",
        "password_hash": "hash",
    })


class TestExtractAccessToken:
    def test_cookie(self):
        assert extract_access_token(make_request({"accessToken": "from-cookie"}), None) == "from-cookie"

    def test_bearer(self):
        creds = HTTPAuthorizationCredentials(scheme="Bearer", credentials="from-header")
        assert extract_access_token(make_request(), creds) == "from-header"

    def test_cookie_wins_over_bearer(self):
        creds = HTTPAuthorizationCredentials(scheme="Bearer", credentials="from-header")
        request = make_request({"accessToken": "from-cookie"})
        assert extract_access_token(request, creds) == "from-cookie"

    def test_nothing(self):
        assert extract_access_token(make_request(), None) is None


class TestAuthenticate:
    def test_valid_token(self, token_issuer, user_repository):
        user = seed_user(user_repository)
        token = token_issuer.mint_access_token(user)

        current = authenticate(token, token_issuer, user_repository)

        assert current.id == user.id
        assert current.username == "alice"
        assert current.email == "alice@x.com"

    def test_missing_token(self, token_issuer, user_repository):
        with pytest.raises(MissingTokenError, match="Unauthorized request"):
            authenticate(None, token_issuer, user_repository)

    def test_expired_token(self, token_config, user_repository):
        user = seed_user(user_repository)
        expired = TokenIssuer(token_config.model_copy(update={"access_expire_minutes": -1}))
        token = expired.mint_access_token(user)

        with pytest.raises(ExpiredTokenError):
            authenticate(token, TokenIssuer(token_config), user_repository)

    def test_refresh_token_is_not_an_access_token(self, token_issuer, user_repository):
        user = seed_user(user_repository)

        with pytest.raises(InvalidTokenError):
            authenticate(token_issuer.mint_refresh_token(user.id), token_issuer, user_repository)

    def test_token_signed_with_other_secret(self, token_issuer, user_repository):
        user = seed_user(user_repository)
        other = TokenIssuer(TokenConfig(access_secret="other", refresh_secret="other-refresh"))

        with pytest.raises(InvalidTokenError):
            authenticate(other.mint_access_token(user), token_issuer, user_repository)

    def test_deleted_user(self, token_issuer, user_repository):
        user = seed_user(user_repository)
        token = token_issuer.mint_access_token(user)
        del user_repository.rows[user.id]

        with pytest.raises(InvalidTokenError, match="Invalid access token"):
            authenticate(token, token_issuer, user_repository)
