"""Data models describing connect clusters and their client handles."""

from dataclasses import dataclass
from typing import Any, Optional
from pydantic import BaseModel, Field


class ConnectClusterConfig(BaseModel):
    """Configuration a connect cluster client was built from."""

    name: str = Field(..., description="Unique cluster name used for lookups")
    url: str = Field(..., description="Base URL of the connect cluster REST API")
    username: Optional[str] = Field(None, description="Basic auth username")
    tls_enabled: bool = Field(False, description="Whether the client talks TLS")


@dataclass(eq=False)
class ClientWithConfig:
    """Pre-constructed connect client paired with its cluster configuration.

    Instances are shared between all callers that resolve the same cluster
    name and compare by identity.
    """

    client: Any
    config: ConnectClusterConfig

    @property
    def cluster_name(self) -> str:
        return self.config.name
