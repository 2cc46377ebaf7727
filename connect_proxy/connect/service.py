"""
Service that resolves connect cluster names to their clients.
"""

from typing import Optional, Tuple

from ..models.connect import ClientWithConfig
from ..registry.cluster_registry import ClusterLookup, ClusterRegistry
from ..registry.exceptions import ClusterNotFoundError
from ..utils.logging import get_logger

logger = get_logger(__name__)


class ConnectService:
    """Entry point for operations against the configured connect clusters."""

    def __init__(self, registry: Optional[ClusterLookup] = None):
        """Initialize the service.

        Args:
            registry: Snapshot of the configured clusters (empty if None)
        """
        self._registry: ClusterLookup = registry if registry is not None else ClusterRegistry()

    @property
    def registry(self) -> ClusterLookup:
        return self._registry

    def swap_registry(self, registry: ClusterLookup) -> None:
        """Publish a new registry snapshot.

        Lookups already running keep the snapshot they started with.
        """
        self._registry = registry
        logger.info("Connect cluster registry replaced", extra={'registry': repr(registry)})

    def get_connect_cluster_by_name(
        self, cluster_name: str
    ) -> Tuple[Optional[ClientWithConfig], Optional[ClusterNotFoundError]]:
        """Resolve a cluster name to its client.

        Args:
            cluster_name: Name as supplied by the caller, not normalized

        Returns:
            ``(client, None)`` if the cluster is configured, otherwise
            ``(None, ClusterNotFoundError)``. The error is returned, not raised;
            the calling layer decides how to render and log it.
        """
        client = self._registry.lookup(cluster_name)
        if client is None:
            return None, ClusterNotFoundError(cluster_name)

        return client, None
