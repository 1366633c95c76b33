"""
Standard response contracts for MCP tool operations.

Sub-modules:
    types     - ErrorType, ERROR_PREFIX
    builders  - success_response, error_response
"""

from play_developer_mcp.core.responses.builders import (  # noqa: F401
    error_response,
    success_response,
)
from play_developer_mcp.core.responses.types import (  # noqa: F401
    ERROR_PREFIX,
    ErrorType,
)
