"""
Read-only registry of connect cluster clients.
"""

from types import MappingProxyType
from typing import Iterator, List, Mapping, Optional, Protocol

from ..models.connect import ClientWithConfig


class ClusterLookup(Protocol):
    """Anything that can resolve a cluster name to its client handle."""

    def lookup(self, cluster_name: str) -> Optional[ClientWithConfig]:
        ...


class ClusterRegistry:
    """Immutable snapshot mapping cluster names to client handles.

    The snapshot copies the mapping it is given, so later changes to the
    caller's dict are not visible here. Refreshing means building a new
    registry and swapping the reference held by the service.
    """

    def __init__(self, clients: Optional[Mapping[str, ClientWithConfig]] = None):
        """Initialize the snapshot.

        Args:
            clients: Mapping from cluster name to an already constructed client

        Raises:
            ValueError: If any cluster name maps to None
        """
        clients = dict(clients or {})
        missing = [name for name, client in clients.items() if client is None]
        if missing:
            raise ValueError(f"Clusters without a client handle: {', '.join(missing)}")

        self._clients: Mapping[str, ClientWithConfig] = MappingProxyType(clients)

    def lookup(self, cluster_name: str) -> Optional[ClientWithConfig]:
        """Return the client registered under ``cluster_name`` or None."""
        return self._clients.get(cluster_name)

    @property
    def clients(self) -> Mapping[str, ClientWithConfig]:
        """Read-only view of the underlying mapping."""
        return self._clients

    def cluster_names(self) -> List[str]:
        return list(self._clients)

    def __contains__(self, cluster_name: object) -> bool:
        return cluster_name in self._clients

    def __len__(self) -> int:
        return len(self._clients)

    def __iter__(self) -> Iterator[str]:
        return iter(self._clients)

    def __repr__(self) -> str:
        return f"ClusterRegistry(clusters={self.cluster_names()!r})"
