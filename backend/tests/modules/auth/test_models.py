import pytest

from modules.auth.models import (
    ChangePasswordRequest,
    LoginRequest,
    LoginResult,
    RefreshTokenRequest,
    TokenConfig,
    TokenPair,
)
from modules.users.models import UserView
from shared.config import Settings


class TestTokenConfig:
    def test_from_settings(self):
        """Should copy secrets and lifetimes from settings."""
        settings = Settings(
            access_token_secret="a-secret",
            access_token_expire_minutes=5,
            refresh_token_secret="r-secret",
            refresh_token_expire_days=2,
        )
        config = TokenConfig.from_settings(settings)

        assert config.access_secret == "a-secret"
        assert config.refresh_secret == "r-secret"
        assert config.access_max_age == 300
        assert config.refresh_max_age == 2 * 86400
        assert config.algorithm == "HS256"

    def test_config_is_immutable(self):
        config = TokenConfig(access_secret="a", refresh_secret="r")
        with pytest.raises(Exception):
            config.access_secret = "other"


class TestWireModels:
    def test_login_request_accepts_partial_identifiers(self):
        request = LoginRequest.model_validate({"username": "alice", "password": "p1"})
        assert request.username == "alice"
        assert request.email is None

    def test_refresh_request_reads_camel_case(self):
        request = RefreshTokenRequest.model_validate({"refreshToken": "tok"})
        assert request.refresh_token == "tok"

    def test_change_password_request_reads_camel_case(self):
        request = ChangePasswordRequest.model_validate(
            {"oldPassword": "old", "newPassword": "new"}
        )
        assert request.old_password == "old"
        assert request.new_password == "new"

    def test_token_pair_dumps_camel_case(self):
        pair = TokenPair(access_token="a", refresh_token="r")
        assert pair.model_dump(by_alias=True) == {"accessToken": "a", "refreshToken": "r"}

    def test_login_result_has_no_credentials_in_user(self):
        result = LoginResult(
            user=UserView(id="u1", username="alice", email="a@x.com", fullname="Alice"),
            access_token="a",
            refresh_token="r",
        )
        dumped = result.model_dump(by_alias=True)

        assert set(dumped) == {"user", "accessToken", "refreshToken"}
        assert "passwordHash" not in dumped["user"]
        assert "refreshToken" not in dumped["user"]
