"""
Channels module interfaces.
"""

from typing import Protocol, Optional, runtime_checkable

from .models import ChannelProfile


@runtime_checkable
class ISubscriptionRepository(Protocol):
    """Read-only access to subscription edges."""

    def count_subscribers(self, channel_id: str) -> int: ...

    def count_subscriptions(self, subscriber_id: str) -> int: ...

    def is_subscribed(self, subscriber_id: str, channel_id: str) -> bool: ...


@runtime_checkable
class IChannelService(Protocol):
    """Interface for the channel profile query."""

    async def get_channel_profile(
        self,
        username: str,
        viewer_id: Optional[str] = None,
    ) -> ChannelProfile:
        """
        Aggregate a channel's public profile.

        Args:
            username: Channel owner's username (case-insensitive)
            viewer_id: ID of the user looking at the channel, if any

        Returns:
            ChannelProfile with subscriber counts and is_subscribed

        Raises:
            ValidationError: If username is blank
            ChannelNotFoundError: If no user has that username
        """
        ...
