"""
Success response envelope.

Every successful endpoint returns
`{"statusCode", "data", "message", "success": true}`.
"""

from typing import Any
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field


class ApiResponse(BaseModel):
    """Standard success envelope."""

    model_config = ConfigDict(populate_by_name=True)

    status_code: int = Field(..., alias="statusCode")
    data: Any = None
    message: str = "Success"
    success: bool = True


def api_response(data: Any, message: str = "Success", status_code: int = 200) -> JSONResponse:
    """Wrap data in the envelope; models are serialized with their camelCase aliases."""
    envelope = ApiResponse(
        status_code=status_code,
        data=jsonable_encoder(data, by_alias=True),
        message=message,
        success=status_code < 400,
    )
    return JSONResponse(
        status_code=status_code,
        content=envelope.model_dump(by_alias=True),
    )
