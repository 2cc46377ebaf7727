"""
Exception handlers that render Connect Proxy errors as HTTP responses.
"""

import uuid
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..config import get_settings
from ..exceptions import RestError, ErrorCode, STATUS_ERROR_CODES
from ..models.base import ErrorResponse
from ..utils.logging import get_logger, log_rest_error

logger = get_logger(__name__)


def generate_request_id() -> str:
    """Generate a unique request ID for error tracking."""
    return str(uuid.uuid4())[:8]


def rest_error_response(error: RestError, request_id: str) -> JSONResponse:
    """Render a REST error without its internal diagnostics."""
    error_dict = error.to_dict()
    error_response = ErrorResponse(
        error=error_dict["error"],
        message=error_dict["message"],
        details=error_dict["details"] or None,
        request_id=request_id
    )

    return JSONResponse(
        status_code=error.status_code,
        content=error_response.model_dump(mode='json')
    )


async def rest_error_handler(request: Request, exc: RestError) -> JSONResponse:
    """Handle RestError exceptions raised by route handlers."""
    request_id = generate_request_id()
    log_rest_error(logger, exc, request_id=request_id, path=request.url.path)
    return rest_error_response(exc, request_id)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Handle request validation errors with structured response."""
    request_id = generate_request_id()
    logger.warning(f"[{request_id}] Validation error for {request.url}: {exc.errors()}")

    field_errors = {}
    for error in exc.errors():
        field_path = ".".join(str(loc) for loc in error["loc"])
        field_errors[field_path] = error["msg"]

    return JSONResponse(
        status_code=422,
        content=ErrorResponse(
            error=ErrorCode.VALIDATION_ERROR.value,
            message="Request validation failed",
            details={"field_errors": field_errors},
            request_id=request_id
        ).model_dump(mode='json')
    )


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Handle HTTP exceptions such as unknown routes with structured response."""
    request_id = generate_request_id()
    logger.warning(f"[{request_id}] HTTP error {exc.status_code} for {request.url}: {exc.detail}")

    error_code = STATUS_ERROR_CODES.get(exc.status_code)

    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(
            error=error_code.value if error_code else f"HTTP_{exc.status_code}",
            message=exc.detail or f"HTTP {exc.status_code} error occurred",
            details={"status_code": exc.status_code},
            request_id=request_id
        ).model_dump(mode='json'),
        headers=getattr(exc, "headers", None)
    )


async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions with structured response."""
    request_id = generate_request_id()
    logger.error(f"[{request_id}] Unexpected error for {request.url}: {exc}", exc_info=True)

    # Don't expose internal error details in production
    details = {
        "type": type(exc).__name__,
        "request_id": request_id
    }

    settings = get_settings()
    if settings.is_development() or settings.debug:
        details["message"] = str(exc)

    return JSONResponse(
        status_code=500,
        content=ErrorResponse(
            error=ErrorCode.INTERNAL_SERVER_ERROR.value,
            message="An unexpected error occurred. Please try again or contact support.",
            details=details,
            request_id=request_id
        ).model_dump(mode='json')
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the Connect Proxy exception handlers on an application."""
    app.add_exception_handler(RestError, rest_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)
