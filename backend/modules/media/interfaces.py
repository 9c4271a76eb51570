"""
Media module interface.

Profile and registration flows depend on IMediaUploader only, so the
storage backend can be swapped without touching them.
"""

from typing import Protocol, runtime_checkable

from .models import MediaFile


@runtime_checkable
class IMediaUploader(Protocol):
    """Interface for pushing user media to remote storage."""

    async def upload(self, file: MediaFile, folder: str) -> str:
        """
        Store a file and return its public URL.

        Args:
            file: The file to store
            folder: Logical folder inside the bucket (e.g. "avatars")

        Returns:
            Publicly reachable URL of the stored object

        Raises:
            UploadError: If the storage backend fails
        """
        ...
