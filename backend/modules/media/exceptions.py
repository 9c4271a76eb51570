"""
Media module exceptions.
"""

from typing import Optional

from shared.exceptions import ExternalServiceError


class UploadError(ExternalServiceError):
    """Raised when the media store rejects or fails an upload."""

    def __init__(self, filename: str, original_error: Optional[str] = None):
        super().__init__(
            f"Error while uploading file: {filename}",
            service="media_storage",
            code="UPLOAD_FAILED",
            details={"filename": filename, "original_error": original_error},
        )
