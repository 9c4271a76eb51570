"""
Channel profile query.

Combines the channel owner's user row with subscription counts.
"""

from typing import Optional

from shared.exceptions import ValidationError
from modules.users.interfaces import IUserRepository

from .exceptions import ChannelNotFoundError
from .interfaces import IChannelService, ISubscriptionRepository
from .models import ChannelProfile


class ChannelService(IChannelService):
    """Read-only channel reporting."""

    def __init__(self, users: IUserRepository, subscriptions: ISubscriptionRepository):
        self._users = users
        self._subscriptions = subscriptions

    async def get_channel_profile(
        self,
        username: str,
        viewer_id: Optional[str] = None,
    ) -> ChannelProfile:
        username = (username or "").strip()
        if not username:
            raise ValidationError("Username is missing", code="MISSING_USERNAME")

        channel = self._users.get_by_username(username)
        if channel is None:
            raise ChannelNotFoundError(username)

        is_subscribed = False
        if viewer_id:
            is_subscribed = self._subscriptions.is_subscribed(viewer_id, channel.id)

        return ChannelProfile(
            id=channel.id,
            username=channel.username,
            fullname=channel.fullname,
            email=channel.email,
            avatar_url=channel.avatar_url,
            cover_image_url=channel.cover_image_url,
            subscribers_count=self._subscriptions.count_subscribers(channel.id),
            channels_subscribed_to_count=self._subscriptions.count_subscriptions(channel.id),
            is_subscribed=is_subscribed,
        )
