"""
Error response models.

Standardized error envelope for the API.
"""

from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field


class ErrorResponse(BaseModel):
    """Standard error envelope; mirrors ApiResponse with success=false."""

    model_config = ConfigDict(populate_by_name=True)

    status_code: int = Field(..., alias="statusCode")
    data: None = None
    message: str
    success: bool = False
    code: Optional[str] = None
    errors: list[Any] = Field(default_factory=list)
