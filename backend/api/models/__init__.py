"""API models package."""

from .errors import ErrorResponse
from .responses import ApiResponse, api_response

__all__ = [
    "ErrorResponse",
    "ApiResponse",
    "api_response",
]
