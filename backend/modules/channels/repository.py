"""
Subscription repository for database access.

Read-only queries over the subscriptions table
(subscriber_id -> channel_id edges).
"""

from shared.repository import BaseRepository

SUBSCRIPTIONS_TABLE = "subscriptions"


class SubscriptionRepository(BaseRepository[dict]):
    """Counts and membership checks over subscription edges."""

    def count_subscribers(self, channel_id: str) -> int:
        """Number of users subscribed to the channel."""
        result = (
            self._db.table(SUBSCRIPTIONS_TABLE)
            .select("id", count="exact")
            .eq("channel_id", channel_id)
            .execute()
        )
        return result.count or 0

    def count_subscriptions(self, subscriber_id: str) -> int:
        """Number of channels the user is subscribed to."""
        result = (
            self._db.table(SUBSCRIPTIONS_TABLE)
            .select("id", count="exact")
            .eq("subscriber_id", subscriber_id)
            .execute()
        )
        return result.count or 0

    def is_subscribed(self, subscriber_id: str, channel_id: str) -> bool:
        result = (
            self._db.table(SUBSCRIPTIONS_TABLE)
            .select("id")
            .eq("subscriber_id", subscriber_id)
            .eq("channel_id", channel_id)
            .limit(1)
            .execute()
        )
        return bool(result.data)
