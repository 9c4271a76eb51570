"""
Media uploader backed by Supabase Storage.
"""

import logging
import uuid

from supabase import Client

from .exceptions import UploadError
from .interfaces import IMediaUploader
from .models import MediaFile

logger = logging.getLogger(__name__)


class SupabaseMediaUploader(IMediaUploader):
    """Uploads files into a single Supabase Storage bucket."""

    def __init__(self, supabase_client: Client, bucket: str):
        self._db = supabase_client
        self._bucket = bucket

    async def upload(self, file: MediaFile, folder: str) -> str:
        path = f"{folder}/{uuid.uuid4().hex}{file.extension}"
        storage = self._db.storage.from_(self._bucket)

        try:
            storage.upload(path, file.content, {"content-type": file.content_type})
            url = storage.get_public_url(path)
        except Exception as e:
            logger.warning(f"Upload of {file.filename} to {self._bucket}/{path} failed: {e}")
            raise UploadError(file.filename, str(e)) from e

        logger.debug(f"Uploaded {file.filename} to {self._bucket}/{path}")
        return url
