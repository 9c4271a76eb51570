"""
Exception-to-response translation.

This is the single boundary where module exceptions become HTTP
responses. The status code is chosen by exception kind: the first base
class in the exception's MRO found in STATUS_BY_ERROR wins.
"""

import logging
from typing import Any, Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from shared.exceptions import (
    VidnestError,
    ValidationError,
    UnauthorizedError,
    NotFoundError,
    ConflictError,
    InternalError,
    ExternalServiceError,
)

from .models.errors import ErrorResponse

logger = logging.getLogger(__name__)

STATUS_BY_ERROR: dict[type[VidnestError], int] = {
    ValidationError: 400,
    UnauthorizedError: 401,
    NotFoundError: 404,
    ConflictError: 409,
    ExternalServiceError: 500,
    InternalError: 500,
}


def status_for(error: VidnestError) -> int:
    """Map an exception to its HTTP status by walking its class hierarchy."""
    for cls in type(error).__mro__:
        if cls in STATUS_BY_ERROR:
            return STATUS_BY_ERROR[cls]
    return 500


def error_response(
    status_code: int,
    message: str,
    code: Optional[str] = None,
    errors: Optional[list[Any]] = None,
    headers: Optional[dict[str, str]] = None,
) -> JSONResponse:
    """Render the error envelope."""
    body = ErrorResponse(
        status_code=status_code,
        message=message,
        code=code,
        errors=errors or [],
    )
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(body.model_dump(by_alias=True)),
        headers=headers,
    )


def response_for(error: VidnestError) -> JSONResponse:
    status_code = status_for(error)
    if status_code >= 500:
        # Don't leak external service detail to clients
        return error_response(status_code, error.message, code=error.code)
    errors = [error.details] if error.details else []
    return error_response(status_code, error.message, code=error.code, errors=errors)


async def handle_app_error(request: Request, exc: VidnestError) -> JSONResponse:
    if status_for(exc) >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.code}: {exc.message}")
    return response_for(exc)


async def handle_request_validation_error(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    return error_response(
        400,
        "Invalid request",
        code="REQUEST_VALIDATION_FAILED",
        errors=[
            {"loc": list(e.get("loc", ())), "msg": e.get("msg"), "type": e.get("type")}
            for e in exc.errors()
        ],
    )


async def handle_http_exception(
    request: Request,
    exc: StarletteHTTPException,
) -> JSONResponse:
    return error_response(
        exc.status_code,
        str(exc.detail),
        headers=getattr(exc, "headers", None),
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return error_response(500, "Internal server error", code="INTERNAL_ERROR")


def register_error_handlers(app: FastAPI) -> None:
    """Install the exception handlers on the app."""
    app.add_exception_handler(VidnestError, handle_app_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(Exception, handle_unexpected_error)
