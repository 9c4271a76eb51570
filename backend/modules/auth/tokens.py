"""
Access and refresh token issuance and verification.

Both token classes are HS256 JWTs signed with separate secrets:
access tokens are short-lived and carry the user's handle for
convenience, refresh tokens are long-lived and carry only the user ID.
Every token gets a random jti, so two tokens minted for the same user
in the same second are still different strings.
"""

import uuid
from datetime import datetime, timedelta, timezone
from typing import Any

import jwt

from modules.users.models import User
from .exceptions import ExpiredTokenError, InvalidTokenError
from .models import TokenConfig, TokenPair, TokenPayload, TokenType


class TokenIssuer:
    """Mints and verifies signed, expiring tokens."""

    def __init__(self, config: TokenConfig):
        if not config.access_secret or not config.refresh_secret:
            raise RuntimeError(
                "Token configuration missing. "
                "Set ACCESS_TOKEN_SECRET and REFRESH_TOKEN_SECRET environment variables."
            )
        self._config = config

    @property
    def config(self) -> TokenConfig:
        return self._config

    def mint_access_token(self, user: User) -> str:
        return self._encode(
            {"sub": user.id, "username": user.username, "email": user.email},
            token_type="access",
            lifetime=timedelta(minutes=self._config.access_expire_minutes),
            secret=self._config.access_secret,
        )

    def mint_refresh_token(self, user_id: str) -> str:
        return self._encode(
            {"sub": user_id},
            token_type="refresh",
            lifetime=timedelta(days=self._config.refresh_expire_days),
            secret=self._config.refresh_secret,
        )

    def mint_pair(self, user: User) -> TokenPair:
        return TokenPair(
            access_token=self.mint_access_token(user),
            refresh_token=self.mint_refresh_token(user.id),
        )

    def verify(self, token: str, secret: str, expected_type: TokenType) -> TokenPayload:
        """
        Decode a token and check its signature, expiry and class.

        Raises:
            ExpiredTokenError: If the token's exp is in the past
            InvalidTokenError: On any other failure; the message carries
                the underlying reason
        """
        try:
            claims = jwt.decode(
                token,
                secret,
                algorithms=[self._config.algorithm],
                options={"require": ["sub", "exp", "iat"]},
            )
        except jwt.ExpiredSignatureError as e:
            raise ExpiredTokenError(f"Token expired: {e}")
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f"Invalid token: {e}")

        if claims.get("type") != expected_type:
            raise InvalidTokenError(f"Invalid token: expected a {expected_type} token")

        return TokenPayload(**claims)

    def verify_access_token(self, token: str) -> TokenPayload:
        return self.verify(token, self._config.access_secret, "access")

    def verify_refresh_token(self, token: str) -> TokenPayload:
        return self.verify(token, self._config.refresh_secret, "refresh")

    def _encode(
        self,
        claims: dict[str, Any],
        token_type: TokenType,
        lifetime: timedelta,
        secret: str,
    ) -> str:
        now = datetime.now(timezone.utc)
        payload = {
            **claims,
            "type": token_type,
            "jti": uuid.uuid4().hex,
            "iat": int(now.timestamp()),
            "exp": int((now + lifetime).timestamp()),
        }
        return jwt.encode(payload, secret, algorithm=self._config.algorithm)
