"""
User and session endpoints.

Registration, login/logout, token refresh, password change, profile
reads and updates, and the channel profile query.
"""

from typing import Optional

from fastapi import APIRouter, Depends, File, Form, Request, UploadFile
from fastapi.responses import JSONResponse

from modules.auth.interfaces import ISessionService
from modules.auth.models import (
    ChangePasswordRequest,
    LoginRequest,
    RefreshTokenRequest,
    RegisterRequest,
)
from modules.channels.interfaces import IChannelService
from modules.media.models import MediaFile
from modules.users.interfaces import IUserService
from modules.users.models import UpdateAccountRequest
from shared.exceptions import UnauthorizedError
from shared.models import AuthenticatedUser

from ..cookies import REFRESH_TOKEN_COOKIE, CookiePolicy
from ..dependencies import (
    get_channel_service,
    get_cookie_policy,
    get_session_service,
    get_user_service,
)
from ..errors import response_for
from ..middleware.auth import get_current_user, get_optional_user
from ..models.responses import api_response

router = APIRouter()


async def to_media_file(upload: Optional[UploadFile]) -> Optional[MediaFile]:
    """Read an uploaded file into memory; None if nothing was sent."""
    if upload is None or not upload.filename:
        return None
    content = await upload.read()
    return MediaFile(
        filename=upload.filename,
        content=content,
        content_type=upload.content_type or "application/octet-stream",
    )


# -----------------------------------------------------------------------------
# Session
# -----------------------------------------------------------------------------


@router.post("/register", status_code=201)
async def register(
    fullname: str = Form(""),
    email: str = Form(""),
    username: str = Form(""),
    password: str = Form(""),
    avatar: Optional[UploadFile] = File(None),
    cover_image: Optional[UploadFile] = File(None, alias="coverImage"),
    sessions: ISessionService = Depends(get_session_service),
) -> JSONResponse:
    """
    Register a new user.

    Multipart form with the text fields plus an `avatar` file and an
    optional `coverImage` file. Does not log the user in.
    """
    user = await sessions.register(
        RegisterRequest(fullname=fullname, email=email, username=username, password=password),
        avatar=await to_media_file(avatar),
        cover_image=await to_media_file(cover_image),
    )
    return api_response(user, "User registered successfully", status_code=201)


@router.post("/login")
async def login(
    body: LoginRequest,
    sessions: ISessionService = Depends(get_session_service),
    cookies: CookiePolicy = Depends(get_cookie_policy),
) -> JSONResponse:
    """
    Log in with username or email and password.

    Tokens are set as HTTP-only cookies and also returned in the body
    for clients without a cookie jar.
    """
    result = await sessions.login(body.username, body.email, body.password)
    response = api_response(result, "User logged in successfully")
    cookies.set_tokens(response, result.access_token, result.refresh_token)
    return response


@router.post("/logout")
async def logout(
    user: AuthenticatedUser = Depends(get_current_user),
    sessions: ISessionService = Depends(get_session_service),
    cookies: CookiePolicy = Depends(get_cookie_policy),
) -> JSONResponse:
    """Log out the current user and clear both cookies."""
    await sessions.logout(user.id)
    response = api_response({}, "User logged out successfully")
    cookies.clear_tokens(response)
    return response


@router.post("/refresh-token")
async def refresh_token(
    request: Request,
    body: Optional[RefreshTokenRequest] = None,
    sessions: ISessionService = Depends(get_session_service),
    cookies: CookiePolicy = Depends(get_cookie_policy),
) -> JSONResponse:
    """
    Exchange a refresh token for a new token pair.

    The token is read from the refreshToken cookie, or from the body.
    A rejected token also clears the cookies.
    """
    incoming = request.cookies.get(REFRESH_TOKEN_COOKIE) or (body.refresh_token if body else None)

    try:
        pair = await sessions.refresh(incoming)
    except UnauthorizedError as e:
        response = response_for(e)
        cookies.clear_tokens(response)
        return response

    response = api_response(pair, "Access token refreshed")
    cookies.set_tokens(response, pair.access_token, pair.refresh_token)
    return response


@router.post("/change-password")
async def change_password(
    body: ChangePasswordRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    sessions: ISessionService = Depends(get_session_service),
) -> JSONResponse:
    """Change the current user's password."""
    await sessions.change_password(user.id, body.old_password, body.new_password)
    return api_response({}, "Password changed successfully")


# -----------------------------------------------------------------------------
# Profile
# -----------------------------------------------------------------------------


@router.get("/current-user")
async def current_user(
    user: AuthenticatedUser = Depends(get_current_user),
    users: IUserService = Depends(get_user_service),
) -> JSONResponse:
    """Get the current user's profile."""
    return api_response(await users.get_user(user.id), "Current user fetched successfully")


@router.patch("/update-account")
async def update_account(
    body: UpdateAccountRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    users: IUserService = Depends(get_user_service),
) -> JSONResponse:
    """Update the current user's fullname and email."""
    updated = await users.update_account(user.id, body.fullname, body.email)
    return api_response(updated, "Account details updated successfully")


@router.patch("/avatar")
async def update_avatar(
    avatar: Optional[UploadFile] = File(None),
    user: AuthenticatedUser = Depends(get_current_user),
    users: IUserService = Depends(get_user_service),
) -> JSONResponse:
    """Replace the current user's avatar."""
    updated = await users.update_avatar(user.id, await to_media_file(avatar))
    return api_response(updated, "Avatar updated successfully")


@router.patch("/cover-image")
async def update_cover_image(
    cover_image: Optional[UploadFile] = File(None, alias="coverImage"),
    user: AuthenticatedUser = Depends(get_current_user),
    users: IUserService = Depends(get_user_service),
) -> JSONResponse:
    """Replace the current user's cover image."""
    updated = await users.update_cover_image(user.id, await to_media_file(cover_image))
    return api_response(updated, "Cover image updated successfully")


# -----------------------------------------------------------------------------
# Channels
# -----------------------------------------------------------------------------


@router.get("/channel/{username}")
async def channel_profile(
    username: str,
    viewer: Optional[AuthenticatedUser] = Depends(get_optional_user),
    channels: IChannelService = Depends(get_channel_service),
) -> JSONResponse:
    """
    Get a channel's public profile with subscription counts.

    `isSubscribed` is true only when the caller is logged in and
    subscribed to the channel.
    """
    profile = await channels.get_channel_profile(username, viewer.id if viewer else None)
    return api_response(profile, "Channel fetched successfully")
