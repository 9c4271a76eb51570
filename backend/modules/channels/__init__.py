"""
Channels module.

Public API:
- IChannelService: Channel profile query
- ChannelProfile: Aggregated channel view
- ChannelNotFoundError
"""

from .interfaces import IChannelService, ISubscriptionRepository
from .models import ChannelProfile
from .exceptions import ChannelNotFoundError

__all__ = [
    "IChannelService",
    "ISubscriptionRepository",
    "ChannelProfile",
    "ChannelNotFoundError",
]
