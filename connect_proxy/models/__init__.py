"""Data models package for Connect Proxy."""

# Base models
from .base import BaseResponse, ErrorResponse

# Connect cluster models
from .connect import ConnectClusterConfig, ClientWithConfig

__all__ = [
    "BaseResponse",
    "ErrorResponse",
    "ConnectClusterConfig",
    "ClientWithConfig",
]
