"""
Media module data models.
"""

from dataclasses import dataclass
from pathlib import PurePosixPath

AVATAR_FOLDER = "avatars"
COVER_IMAGE_FOLDER = "cover-images"


@dataclass(frozen=True)
class MediaFile:
    """An uploaded file held in memory until it is pushed to storage."""

    filename: str
    content: bytes
    content_type: str = "application/octet-stream"

    @property
    def is_empty(self) -> bool:
        return not self.content

    @property
    def extension(self) -> str:
        return PurePosixPath(self.filename).suffix.lower()
