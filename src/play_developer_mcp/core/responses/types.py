"""
Core types for MCP tool response contracts.

Defines the error categories used to classify failures and the text
prefix every error result carries.
"""

from enum import Enum

ERROR_PREFIX = "Error: "


class ErrorType(str, Enum):
    """Error categories for logging and client-side handling.

    Each type corresponds to an HTTP status code analog. None of them are
    retried by this server; the category only tells the caller (and the
    logs) what kind of failure happened.
    """

    VALIDATION = "validation"  # 400 - fix input
    CONFIGURATION = "configuration"  # missing server configuration
    AUTHENTICATION = "authentication"  # 401 - check key material
    AUTHORIZATION = "authorization"  # 403 - check account permissions
    NOT_FOUND = "not_found"  # 404
    RATE_LIMIT = "rate_limit"  # 429 - quota exhausted
    INTERNAL = "internal"  # 500
    UNAVAILABLE = "unavailable"  # 503 - remote service failure
