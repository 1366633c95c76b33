"""Shared fixtures for integration tests."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from play_developer_mcp.config.server import ServerConfig
from play_developer_mcp.core.publisher import PublisherClient
from play_developer_mcp.server import create_server


@pytest.fixture
def test_config():
    """Create a standard test server configuration."""
    return ServerConfig(
        server_name="google-play-developer-test",
        server_version="0.1.0",
        credentials_path=Path("/keys/service-account.json"),
        log_level="WARNING",
    )


@pytest.fixture
def client_factory(service):
    return MagicMock(side_effect=lambda path: PublisherClient(service))


@pytest.fixture
def mcp_server(test_config, client_factory):
    """Create a test MCP server instance."""
    return create_server(test_config, client_factory=client_factory)
