"""MCP tool registrations for play-developer-mcp."""

from play_developer_mcp.tools.publisher import (  # noqa: F401
    TOOL_NAMES,
    register_publisher_tools,
)
