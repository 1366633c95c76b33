"""
Smoke tests for MCP server creation, tool registration and argument validation.

Argument validation runs in the FastMCP dispatcher: rejected calls never
reach the publisher client.
"""

import pytest
from mcp.server.fastmcp.exceptions import ToolError

from play_developer_mcp.config import ServerConfig
from play_developer_mcp.server import create_server
from play_developer_mcp.tools import TOOL_NAMES


class TestMCPServerCreation:
    """Tests for MCP server creation."""

    def test_server_has_name(self, mcp_server, test_config):
        assert mcp_server.name == test_config.server_name

    def test_all_tools_registered(self, mcp_server):
        tools = mcp_server._tool_manager._tools
        assert set(TOOL_NAMES) <= set(tools)
        assert len(tools) == 5

    def test_disabled_tools_not_registered(self, client_factory):
        config = ServerConfig(disabled_tools=["get-review", "get-bundle-details"])
        server = create_server(config, client_factory=client_factory)

        tools = server._tool_manager._tools
        assert "get-review" not in tools
        assert "get-bundle-details" not in tools
        assert "get-reviews" in tools

    def test_descriptions_from_docstrings(self, mcp_server):
        tool = mcp_server._tool_manager._tools["get-bundle-details"]
        assert tool.description == "Get details about uploaded app bundles and APKs."


class TestToolInputSchemas:
    """Tests for the generated JSON schemas."""

    def test_package_name_required_everywhere(self, mcp_server):
        for name in TOOL_NAMES:
            tool = mcp_server._tool_manager._tools[name]
            assert "packageName" in tool.parameters["required"], name

    def test_max_results_range_and_default(self, mcp_server):
        props = mcp_server._tool_manager._tools["get-reviews"].parameters["properties"]
        max_results = props["maxResults"]

        assert max_results["type"] == "integer"
        assert max_results["minimum"] == 1
        assert max_results["maximum"] == 100
        assert max_results["default"] == 20

    def test_track_is_optional_enum(self, mcp_server):
        params = mcp_server._tool_manager._tools["get-release-tracks"].parameters

        assert params["required"] == ["packageName"]
        variants = params["properties"]["track"]["anyOf"]
        enums = [v["enum"] for v in variants if "enum" in v]
        assert enums == [["internal", "alpha", "beta", "production"]]

    def test_review_id_required(self, mcp_server):
        params = mcp_server._tool_manager._tools["get-review"].parameters
        assert set(params["required"]) == {"packageName", "reviewId"}


class TestArgumentValidation:
    """Invalid arguments are rejected before any handler runs."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("max_results", [0, 101, -5])
    async def test_max_results_out_of_range(self, mcp_server, client_factory, max_results):
        with pytest.raises(ToolError):
            await mcp_server.call_tool(
                "get-reviews", {"packageName": "com.example.app", "maxResults": max_results}
            )
        client_factory.assert_not_called()

    @pytest.mark.asyncio
    async def test_missing_required_field(self, mcp_server, client_factory):
        with pytest.raises(ToolError):
            await mcp_server.call_tool("get-review", {"packageName": "com.example.app"})
        client_factory.assert_not_called()

    @pytest.mark.asyncio
    async def test_wrong_type(self, mcp_server, client_factory):
        with pytest.raises(ToolError):
            await mcp_server.call_tool("get-app-details", {"packageName": 123})
        client_factory.assert_not_called()

    @pytest.mark.asyncio
    async def test_unknown_track(self, mcp_server, client_factory):
        with pytest.raises(ToolError):
            await mcp_server.call_tool(
                "get-release-tracks", {"packageName": "com.example.app", "track": "staging"}
            )
        client_factory.assert_not_called()

    @pytest.mark.asyncio
    async def test_unknown_tool(self, mcp_server, client_factory):
        with pytest.raises(ToolError, match="Unknown tool"):
            await mcp_server.call_tool("publish-release", {"packageName": "com.example.app"})
        client_factory.assert_not_called()

    @pytest.mark.asyncio
    async def test_max_results_defaults_to_20(self, mcp_server, service):
        service.reviews.return_value.list.return_value.execute.return_value = {"reviews": []}

        await mcp_server.call_tool("get-reviews", {"packageName": "com.example.app"})

        service.reviews.return_value.list.assert_called_once_with(
            packageName="com.example.app", maxResults=20
        )
