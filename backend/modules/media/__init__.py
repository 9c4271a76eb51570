"""
Media module.

Pushes avatars and cover images to remote object storage.

Public API:
- IMediaUploader: Interface for uploads
- MediaFile: In-memory file handed to the uploader
- UploadError: Raised when storage fails
"""

from .interfaces import IMediaUploader
from .models import MediaFile
from .exceptions import UploadError

__all__ = [
    "IMediaUploader",
    "MediaFile",
    "UploadError",
]
