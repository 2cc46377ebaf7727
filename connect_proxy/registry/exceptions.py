"""
Exceptions for connect cluster registry lookups.
"""

from http import HTTPStatus

from ..exceptions import RestError, ErrorCode


class ClientNotFoundError(LookupError):
    """Internal diagnostic: no client is registered under the requested name."""

    def __init__(self):
        super().__init__("a client for the given cluster name does not exist")


class ClusterNotFoundError(RestError):
    """Returned when a cluster name is not configured in the registry."""

    MESSAGE = "There's no configured cluster with the given connect cluster name"

    def __init__(self, cluster_name: str):
        super().__init__(
            message=self.MESSAGE,
            status_code=HTTPStatus.NOT_FOUND,
            cause=ClientNotFoundError(),
            log_fields={"cluster_name": cluster_name},
            silent=False,
            error_code=ErrorCode.NOT_FOUND
        )
        self.cluster_name = cluster_name
