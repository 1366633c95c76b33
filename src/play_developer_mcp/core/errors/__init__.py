"""Error hierarchy for play-developer-mcp.

Usage:
    from play_developer_mcp.core.errors import ConfigurationError, classify_error
"""

from play_developer_mcp.core.errors.base import (
    ERROR_MAPPINGS,
    classify_error,
    is_expected_error,
)
from play_developer_mcp.core.errors.publisher import (
    ConfigurationError,
    CredentialsError,
    PublisherApiError,
    PublisherError,
)

__all__ = [
    # Base / Registry
    "ERROR_MAPPINGS",
    "classify_error",
    "is_expected_error",
    # Publisher errors
    "PublisherError",
    "ConfigurationError",
    "CredentialsError",
    "PublisherApiError",
]
