"""
Custom exception classes for the Connect Proxy.

This module defines the structured error types shared by the service. Errors
carry an error code, a user-facing message and optional details, and the
REST flavour additionally carries the HTTP status and the diagnostic fields
that the calling layer routes to the log sink.
"""

from http import HTTPStatus
from typing import Optional, Dict, Any, Mapping
from enum import Enum


class ErrorCode(str, Enum):
    """Standard error codes for the application."""

    # General errors
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"
    TIMEOUT = "TIMEOUT"
    UNAUTHORIZED = "UNAUTHORIZED"
    FORBIDDEN = "FORBIDDEN"
    SERVICE_UNAVAILABLE = "SERVICE_UNAVAILABLE"
    BAD_GATEWAY = "BAD_GATEWAY"
    METHOD_NOT_ALLOWED = "METHOD_NOT_ALLOWED"
    RATE_LIMITED = "RATE_LIMITED"


STATUS_ERROR_CODES = {
    400: ErrorCode.VALIDATION_ERROR,
    401: ErrorCode.UNAUTHORIZED,
    403: ErrorCode.FORBIDDEN,
    404: ErrorCode.NOT_FOUND,
    405: ErrorCode.METHOD_NOT_ALLOWED,
    408: ErrorCode.TIMEOUT,
    409: ErrorCode.CONFLICT,
    422: ErrorCode.VALIDATION_ERROR,
    429: ErrorCode.RATE_LIMITED,
    502: ErrorCode.BAD_GATEWAY,
    503: ErrorCode.SERVICE_UNAVAILABLE,
    504: ErrorCode.TIMEOUT,
}


def error_code_for_status(status_code: int) -> ErrorCode:
    """Map an HTTP status code to the closest application error code."""
    return STATUS_ERROR_CODES.get(status_code, ErrorCode.INTERNAL_SERVER_ERROR)


class ConnectProxyError(Exception):
    """Base exception class for all Connect Proxy errors.

    It provides structured error information including error codes, messages,
    and additional context details.
    """

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        """Initialize the exception.

        Args:
            message: Human-readable error message
            error_code: Standardized error code
            details: Additional error context and details
            cause: The underlying exception that caused this error
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.cause = cause

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary format for API responses."""
        details = dict(self.details)

        if self.cause:
            details["cause"] = str(self.cause)
            details["cause_type"] = type(self.cause).__name__

        return {
            "error": self.error_code.value,
            "message": self.message,
            "details": details
        }


class RestError(ConnectProxyError):
    """Error meant to be rendered as an HTTP response by the calling layer.

    The message is safe to show to end users. The cause and the log fields
    are internal diagnostics: they go to the logs, never into the response
    body. Silent errors are not logged at all.
    """

    def __init__(
        self,
        message: str,
        status_code: int = HTTPStatus.INTERNAL_SERVER_ERROR,
        cause: Optional[Exception] = None,
        log_fields: Optional[Mapping[str, Any]] = None,
        silent: bool = False,
        error_code: Optional[ErrorCode] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            error_code=error_code or error_code_for_status(int(status_code)),
            details=details,
            cause=cause
        )
        self.status_code = int(status_code)
        # Insertion order is kept so fields reach the log sink as declared
        self.log_fields: Dict[str, Any] = dict(log_fields or {})
        self.silent = silent

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the public response shape, without internal diagnostics."""
        return {
            "error": self.error_code.value,
            "message": self.message,
            "details": dict(self.details)
        }

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(status_code={self.status_code}, "
            f"message={self.message!r}, log_fields={self.log_fields!r}, silent={self.silent})"
        )
