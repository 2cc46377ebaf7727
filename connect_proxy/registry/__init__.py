"""
Connect cluster registry components.
"""

from .cluster_registry import ClusterRegistry, ClusterLookup
from .exceptions import ClusterNotFoundError, ClientNotFoundError

__all__ = [
    "ClusterRegistry",
    "ClusterLookup",
    "ClusterNotFoundError",
    "ClientNotFoundError"
]
