"""
Channels module data models.
"""

from typing import Optional

from modules.users.models import ApiModel


class ChannelProfile(ApiModel):
    """A user seen as a channel, with derived subscription counts."""

    id: str
    username: str
    fullname: str
    email: str
    avatar_url: Optional[str] = None
    cover_image_url: Optional[str] = None
    subscribers_count: int = 0
    channels_subscribed_to_count: int = 0
    is_subscribed: bool = False
