"""
Channels module exceptions.
"""

from shared.exceptions import NotFoundError


class ChannelNotFoundError(NotFoundError):
    """Raised when no user owns the requested channel username."""

    def __init__(self, username: str):
        super().__init__(
            f"Channel does not exist: {username}",
            code="CHANNEL_NOT_FOUND",
            details={"username": username},
        )
