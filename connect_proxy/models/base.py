"""Base response models for the Connect Proxy."""

from typing import Any, Dict, Optional
from datetime import datetime, timezone
from pydantic import BaseModel, Field


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class BaseResponse(BaseModel):
    """Base response model with common fields."""

    timestamp: datetime = Field(default_factory=_utcnow)
    request_id: Optional[str] = None


class ErrorResponse(BaseResponse):
    """Standard error response format."""
    error: str = Field(..., description="Error code")
    message: str = Field(..., description="Human-readable error message")
    details: Optional[Dict[str, Any]] = Field(None, description="Additional error details")
