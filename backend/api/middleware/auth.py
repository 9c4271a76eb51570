"""
Access-token authentication dependency.

Reads the access token from the accessToken cookie or an
`Authorization: Bearer` header, verifies it and loads the user row.
The resulting AuthenticatedUser is the only source of caller identity
for route handlers.
"""

from typing import Optional
from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from modules.auth.exceptions import InvalidTokenError, MissingTokenError
from modules.auth.tokens import TokenIssuer
from modules.users.interfaces import IUserRepository
from shared.exceptions import UnauthorizedError
from shared.models import AuthenticatedUser

from ..cookies import ACCESS_TOKEN_COOKIE
from ..dependencies import get_token_issuer, get_user_repository

# Bearer token extractor
bearer_scheme = HTTPBearer(auto_error=False)


def extract_access_token(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials],
) -> Optional[str]:
    """Cookie first, then the Authorization header."""
    token = request.cookies.get(ACCESS_TOKEN_COOKIE)
    if token:
        return token
    if credentials is not None:
        return credentials.credentials
    return None


def authenticate(
    token: Optional[str],
    tokens: TokenIssuer,
    users: IUserRepository,
) -> AuthenticatedUser:
    """
    Verify an access token and resolve it to a user.

    Raises:
        MissingTokenError: If no token was sent
        InvalidTokenError / ExpiredTokenError: If verification fails or
            the token's user no longer exists
    """
    if not token:
        raise MissingTokenError("Unauthorized request")

    payload = tokens.verify_access_token(token)
    user = users.get_by_id(payload.sub)
    if user is None:
        raise InvalidTokenError("Invalid access token")

    return AuthenticatedUser(
        id=user.id,
        username=user.username,
        email=user.email,
        fullname=user.fullname,
    )


async def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    tokens: TokenIssuer = Depends(get_token_issuer),
    users: IUserRepository = Depends(get_user_repository),
) -> AuthenticatedUser:
    """
    Dependency that requires authentication.

    Usage:
        @router.get("/protected")
        async def protected_route(user: AuthenticatedUser = Depends(get_current_user)):
            return {"user_id": user.id}
    """
    return authenticate(extract_access_token(request, credentials), tokens, users)


async def get_optional_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    tokens: TokenIssuer = Depends(get_token_issuer),
    users: IUserRepository = Depends(get_user_repository),
) -> Optional[AuthenticatedUser]:
    """
    Dependency that optionally extracts user if authenticated.

    Use this for endpoints that work with or without authentication.
    """
    token = extract_access_token(request, credentials)
    if not token:
        return None

    try:
        return authenticate(token, tokens, users)
    except UnauthorizedError:
        return None


# Type aliases for cleaner route definitions
RequireAuth = Depends(get_current_user)
OptionalAuth = Depends(get_optional_user)
