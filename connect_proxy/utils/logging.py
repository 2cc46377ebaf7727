"""
Structured logging utilities for Connect Proxy.

This module provides JSON structured logging with request tracking, and a
helper that routes the diagnostic fields carried by REST errors to the log
sink.
"""

import json
import logging
from datetime import datetime, timezone
from typing import Dict, Any, Optional
from contextvars import ContextVar

from ..config import settings
from ..exceptions import RestError


# Context variable for request tracking
request_context: ContextVar[Dict[str, Any]] = ContextVar('request_context', default={})

# Attributes every LogRecord already has; extra fields may not reuse them
_RESERVED_ATTRS = frozenset({
    'name', 'msg', 'args', 'levelname', 'levelno', 'pathname', 'filename',
    'module', 'lineno', 'funcName', 'created', 'msecs', 'relativeCreated',
    'thread', 'threadName', 'processName', 'process', 'taskName', 'message',
    'asctime', 'exc_info', 'exc_text', 'stack_info',
})

# Fields computed from the error itself by ``rest_error_log_fields``
_REST_ERROR_FIELDS = frozenset({'status_code', 'error_code', 'cause'})


class StructuredFormatter(logging.Formatter):
    """Custom formatter for structured JSON logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as structured JSON."""
        log_entry = {
            'timestamp': datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z'),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno
        }

        context = request_context.get()
        if context:
            log_entry['request_context'] = context

        # Extra fields passed through ``extra=``; names taken by the entry
        # itself are kept under a ``field_`` prefix
        for key, value in record.__dict__.items():
            if key in _RESERVED_ATTRS:
                continue
            if key in log_entry:
                key = f"field_{key}"
            log_entry[key] = value

        if record.exc_info:
            log_entry['exception'] = {
                'type': record.exc_info[0].__name__ if record.exc_info[0] else None,
                'message': str(record.exc_info[1]) if record.exc_info[1] else None,
                'traceback': self.formatException(record.exc_info)
            }

        return json.dumps(log_entry, default=str, ensure_ascii=False)


class RequestTrackingFilter(logging.Filter):
    """Filter to add request tracking information to log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        """Add request context to log record.

        Attributes already set on the record through ``extra=`` win.
        """
        for key, value in request_context.get().items():
            if key not in _RESERVED_ATTRS and not hasattr(record, key):
                setattr(record, key, value)

        return True


def setup_logging(
    log_level: Optional[str] = None,
    structured: Optional[bool] = None,
    enable_request_tracking: bool = True
) -> None:
    """
    Set up application logging configuration.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        structured: Whether to use structured JSON logging
        enable_request_tracking: Whether to enable request tracking
    """
    if log_level is None:
        log_level = settings.monitoring.log_level.value
    if structured is None:
        structured = settings.monitoring.structured_logging

    level = getattr(logging, log_level.upper())

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)

    if structured:
        formatter = StructuredFormatter()
    else:
        formatter = logging.Formatter(settings.monitoring.log_format)

    console_handler.setFormatter(formatter)

    if enable_request_tracking:
        console_handler.addFilter(RequestTrackingFilter())

    root_logger.addHandler(console_handler)

    configure_logger_levels()


def configure_logger_levels():
    """Configure specific logger levels to reduce noise."""
    logging.getLogger('urllib3').setLevel(logging.WARNING)
    logging.getLogger('httpx').setLevel(logging.WARNING)
    logging.getLogger('asyncio').setLevel(logging.WARNING)
    logging.getLogger('uvicorn.access').setLevel(logging.WARNING)

    logging.getLogger('connect_proxy').setLevel(logging.DEBUG if settings.debug else logging.INFO)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance with the specified name.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)


def set_request_context(**kwargs):
    """
    Set request context for logging.

    Args:
        **kwargs: Context key-value pairs
    """
    current_context = dict(request_context.get())
    current_context.update(kwargs)
    request_context.set(current_context)


def clear_request_context():
    """Clear the current request context."""
    request_context.set({})


def get_request_context() -> Dict[str, Any]:
    """Get the current request context."""
    return dict(request_context.get())


def rest_error_log_fields(error: RestError, **context) -> Dict[str, Any]:
    """Build the ``extra`` payload for logging a REST error.

    Diagnostic field names that collide with LogRecord attributes or with
    the computed ``status_code``/``error_code``/``cause`` fields are
    prefixed with ``field_``.
    """
    fields = {
        'status_code': error.status_code,
        'error_code': error.error_code.value,
    }
    if error.cause is not None:
        fields['cause'] = str(error.cause)

    for key, value in {**error.log_fields, **context}.items():
        if key in _RESERVED_ATTRS or key in _REST_ERROR_FIELDS:
            key = f"field_{key}"
        fields[key] = value

    return fields


def log_rest_error(logger: logging.Logger, error: RestError, **context) -> bool:
    """
    Log a REST error with its diagnostic fields.

    Server errors are logged at ERROR, everything else at WARNING. Silent
    errors are skipped.

    Args:
        logger: Logger to emit on
        error: The error to log
        **context: Additional context such as the request id

    Returns:
        True if a record was emitted
    """
    if error.silent:
        return False

    if error.status_code >= 500:
        level = logging.ERROR
    else:
        level = logging.WARNING

    logger.log(
        level,
        f"{error.message}: {error.cause}" if error.cause else error.message,
        extra=rest_error_log_fields(error, **context),
        stacklevel=2
    )
    return True


# Initialize logging on module import
if not logging.getLogger().handlers:
    setup_logging()
