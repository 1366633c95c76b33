"""Fixtures for tool handler tests: a server wired to the mocked service."""

from pathlib import Path

import pytest
from mcp.server.fastmcp import FastMCP

from play_developer_mcp.config import ServerConfig
from play_developer_mcp.core.publisher import PublisherClient
from play_developer_mcp.tools import register_publisher_tools


@pytest.fixture
def tool_config():
    return ServerConfig(credentials_path=Path("/keys/service-account.json"), log_level="WARNING")


@pytest.fixture
def client_factory(service):
    """Records requested credential paths and returns clients over the mocked service."""
    requested = []

    def factory(path):
        requested.append(path)
        return PublisherClient(service)

    factory.requested = requested
    return factory


@pytest.fixture
def mcp(tool_config, client_factory):
    server = FastMCP("test")
    register_publisher_tools(server, tool_config, client_factory=client_factory)
    return server


@pytest.fixture
def call(mcp):
    """Invoke a registered handler directly: ``await call("get-review", packageName=...)``."""

    async def _call(name, **kwargs):
        return await mcp._tool_manager._tools[name].fn(**kwargs)

    return _call
