"""
Response builder functions for MCP tool operations.

Provides success_response() and error_response(), the two constructors
every tool uses to build its ``CallToolResult``.
"""

import json
from typing import Any

from mcp.types import CallToolResult, TextContent

from play_developer_mcp.core.responses.types import ERROR_PREFIX


def success_response(data: Any) -> CallToolResult:
    """Create a success result whose text is *data* as pretty-printed JSON.

    Args:
        data: JSON-serializable payload (mapping or list).

    Example:
        >>> success_response({"totalReviews": 0, "reviews": []})
    """
    text = json.dumps(data, indent=2, ensure_ascii=False)
    return CallToolResult(content=[TextContent(type="text", text=text)])


def error_response(message: str) -> CallToolResult:
    """Create an error result with ``isError`` set.

    Args:
        message: Human-readable description of the failure. It is prefixed
            with ``"Error: "`` in the returned text.

    Example:
        >>> error_response("Package not found: com.example.app")
    """
    return CallToolResult(
        content=[TextContent(type="text", text=f"{ERROR_PREFIX}{message}")],
        isError=True,
    )
