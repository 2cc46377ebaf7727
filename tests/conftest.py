"""
Pytest configuration and shared fixtures
"""

import pytest
from unittest.mock import Mock

from connect_proxy.connect.service import ConnectService
from connect_proxy.models.connect import ClientWithConfig, ConnectClusterConfig
from connect_proxy.registry.cluster_registry import ClusterRegistry
from connect_proxy.utils.logging import clear_request_context


def make_client(name: str, url: str) -> ClientWithConfig:
    """Client handle backed by a mock connect client."""
    return ClientWithConfig(
        client=Mock(name=f"connect-client-{name}"),
        config=ConnectClusterConfig(name=name, url=url)
    )


@pytest.fixture
def prod_client():
    """Client handle for the production cluster"""
    return make_client("prod", "http://connect-prod:8083")


@pytest.fixture
def staging_client():
    """Client handle for the staging cluster"""
    return make_client("staging", "http://connect-staging:8083")


@pytest.fixture
def cluster_registry(prod_client, staging_client):
    """Registry with a prod and a staging cluster"""
    return ClusterRegistry({"prod": prod_client, "staging": staging_client})


@pytest.fixture
def empty_registry():
    """Registry without any configured cluster"""
    return ClusterRegistry({})


@pytest.fixture
def connect_service(cluster_registry):
    """Connect service backed by the prod/staging registry"""
    return ConnectService(cluster_registry)


@pytest.fixture(autouse=True)
def reset_request_context():
    """Make sure request context does not leak between tests"""
    clear_request_context()
    yield
    clear_request_context()
