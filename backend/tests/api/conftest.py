"""Fixtures for API tests: a fresh app wired to the in-memory fakes."""

import pytest
from fastapi.testclient import TestClient

from api.app import create_app
from api.cookies import CookiePolicy
from api.dependencies import (
    get_channel_service,
    get_cookie_policy,
    get_session_service,
    get_token_issuer,
    get_user_repository,
    get_user_service,
)


@pytest.fixture
def cookie_policy() -> CookiePolicy:
    # TestClient talks plain http; secure cookies would never be sent back
    return CookiePolicy(secure=False)


@pytest.fixture
def app(
    session_service,
    user_service,
    channel_service,
    user_repository,
    token_issuer,
    cookie_policy,
):
    app = create_app()
    app.dependency_overrides[get_session_service] = lambda: session_service
    app.dependency_overrides[get_user_service] = lambda: user_service
    app.dependency_overrides[get_channel_service] = lambda: channel_service
    app.dependency_overrides[get_user_repository] = lambda: user_repository
    app.dependency_overrides[get_token_issuer] = lambda: token_issuer
    app.dependency_overrides[get_cookie_policy] = lambda: cookie_policy
    return app


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def register(client):
    """Factory fixture that registers a user through the API."""

    def _register(username: str = "alice", email: str = "alice@x.com", password: str = "p1"):
        return client.post(
            "/api/v1/users/register",
            data={
                "fullname": username.title(),
                "email": email,
                "username": username,
                "password": password,
            },
            files={"avatar": ("avatar.png", b"\x89PNG fake", "image/png")},
        )

    return _register


@pytest.fixture
def login(client, register):
    """Factory fixture that registers then logs in, returning the login body data."""

    def _login(username: str = "alice", password: str = "p1"):
        register(username=username, email=f"{username}@x.com", password=password)
        response = client.post(
            "/api/v1/users/login",
            json={"username": username, "password": password},
        )
        assert response.status_code == 200
        return response.json()["data"]

    return _login
