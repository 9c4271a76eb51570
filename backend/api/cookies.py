"""
Cookie transport for access and refresh tokens.

Both tokens travel as HTTP-only cookies so browser scripts can't read
them; the same attributes are used to set and to clear, otherwise
browsers keep the old cookie around.
"""

from dataclasses import dataclass
from typing import Literal

from starlette.responses import Response

from shared.config import Settings

ACCESS_TOKEN_COOKIE = "accessToken"
REFRESH_TOKEN_COOKIE = "refreshToken"


@dataclass(frozen=True)
class CookiePolicy:
    """Attributes applied to both auth cookies."""

    secure: bool = True
    samesite: Literal["lax", "strict", "none"] = "lax"
    access_max_age: int = 15 * 60
    refresh_max_age: int = 10 * 86400
    path: str = "/"

    @classmethod
    def from_settings(cls, settings: Settings) -> "CookiePolicy":
        return cls(
            secure=settings.cookie_secure,
            samesite=settings.cookie_samesite,
            access_max_age=settings.access_token_expire_minutes * 60,
            refresh_max_age=settings.refresh_token_expire_days * 86400,
        )

    def set_tokens(self, response: Response, access_token: str, refresh_token: str) -> None:
        self._set(response, ACCESS_TOKEN_COOKIE, access_token, self.access_max_age)
        self._set(response, REFRESH_TOKEN_COOKIE, refresh_token, self.refresh_max_age)

    def clear_tokens(self, response: Response) -> None:
        for key in (ACCESS_TOKEN_COOKIE, REFRESH_TOKEN_COOKIE):
            response.delete_cookie(
                key,
                path=self.path,
                secure=self.secure,
                httponly=True,
                samesite=self.samesite,
            )

    def _set(self, response: Response, key: str, value: str, max_age: int) -> None:
        response.set_cookie(
            key,
            value,
            max_age=max_age,
            path=self.path,
            secure=self.secure,
            httponly=True,
            samesite=self.samesite,
        )
