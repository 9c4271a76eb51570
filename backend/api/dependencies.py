"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations.
"""

from typing import TYPE_CHECKING

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from supabase import Client
    from modules.auth.interfaces import ISessionService
    from modules.auth.passwords import PasswordHasher
    from modules.auth.tokens import TokenIssuer
    from modules.channels.interfaces import IChannelService, ISubscriptionRepository
    from modules.media.interfaces import IMediaUploader
    from modules.users.interfaces import IUserRepository, IUserService
    from .cookies import CookiePolicy


class ServiceContainer:
    """
    Container for all service instances.

    This class manages the lifecycle of service instances and their
    dependencies. Services are created lazily on first access.

    All services are cached as singletons within the container.
    Use reset() to clear all cached services for testing.
    """

    def __init__(self) -> None:
        self.reset()

    @property
    def db(self) -> "Client":
        """Get the Supabase client."""
        if self._db is None:
            from shared.database import get_supabase_client
            self._db = get_supabase_client()
        return self._db

    @property
    def user_repository(self) -> "IUserRepository":
        """Get the user repository instance."""
        if self._user_repository is None:
            from modules.users.repository import UserRepository
            self._user_repository = UserRepository(self.db)
        return self._user_repository

    @property
    def subscription_repository(self) -> "ISubscriptionRepository":
        """Get the subscription repository instance."""
        if self._subscription_repository is None:
            from modules.channels.repository import SubscriptionRepository
            self._subscription_repository = SubscriptionRepository(self.db)
        return self._subscription_repository

    @property
    def token_issuer(self) -> "TokenIssuer":
        """Get the token issuer, configured from settings."""
        if self._token_issuer is None:
            from modules.auth.models import TokenConfig
            from modules.auth.tokens import TokenIssuer
            from shared.config import get_settings
            self._token_issuer = TokenIssuer(TokenConfig.from_settings(get_settings()))
        return self._token_issuer

    @property
    def password_hasher(self) -> "PasswordHasher":
        """Get the password hasher instance."""
        if self._password_hasher is None:
            from modules.auth.passwords import PasswordHasher
            from shared.config import get_settings
            self._password_hasher = PasswordHasher(rounds=get_settings().bcrypt_rounds)
        return self._password_hasher

    @property
    def media_uploader(self) -> "IMediaUploader":
        """Get the media uploader instance."""
        if self._media_uploader is None:
            from modules.media.service import SupabaseMediaUploader
            from shared.config import get_settings
            self._media_uploader = SupabaseMediaUploader(self.db, get_settings().media_bucket)
        return self._media_uploader

    @property
    def cookie_policy(self) -> "CookiePolicy":
        """Get the auth cookie policy."""
        if self._cookie_policy is None:
            from shared.config import get_settings
            from .cookies import CookiePolicy
            self._cookie_policy = CookiePolicy.from_settings(get_settings())
        return self._cookie_policy

    @property
    def sessions(self) -> "ISessionService":
        """Get the session service instance."""
        if self._session_service is None:
            from modules.auth.service import SessionService
            self._session_service = SessionService(
                users=self.user_repository,
                tokens=self.token_issuer,
                passwords=self.password_hasher,
                media=self.media_uploader,
            )
        return self._session_service

    @property
    def users(self) -> "IUserService":
        """Get the user service instance."""
        if self._user_service is None:
            from modules.users.service import UserService
            self._user_service = UserService(
                users=self.user_repository,
                media=self.media_uploader,
            )
        return self._user_service

    @property
    def channels(self) -> "IChannelService":
        """Get the channel service instance."""
        if self._channel_service is None:
            from modules.channels.service import ChannelService
            self._channel_service = ChannelService(
                users=self.user_repository,
                subscriptions=self.subscription_repository,
            )
        return self._channel_service

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self._db = None
        self._user_repository = None
        self._subscription_repository = None
        self._token_issuer = None
        self._password_hasher = None
        self._media_uploader = None
        self._cookie_policy = None
        self._session_service = None
        self._user_service = None
        self._channel_service = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    This clears the cached container, so the next call to get_container()
    will create a fresh container with new service instances.

    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_session_service() -> "ISessionService":
    """FastAPI dependency for the session service."""
    return get_container().sessions


def get_user_service() -> "IUserService":
    """FastAPI dependency for the user service."""
    return get_container().users


def get_channel_service() -> "IChannelService":
    """FastAPI dependency for the channel service."""
    return get_container().channels


def get_user_repository() -> "IUserRepository":
    """FastAPI dependency for the user repository."""
    return get_container().user_repository


def get_token_issuer() -> "TokenIssuer":
    """FastAPI dependency for the token issuer."""
    return get_container().token_issuer


def get_cookie_policy() -> "CookiePolicy":
    """FastAPI dependency for the auth cookie policy."""
    return get_container().cookie_policy
