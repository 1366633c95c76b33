"""Error-to-ErrorType mapping registry.

Provides a centralized mapping from exception types to ErrorType values so
tool handlers can classify failures consistently when logging them.

Usage:
    from play_developer_mcp.core.errors.base import classify_error

    error_type = classify_error(exc)
"""

from __future__ import annotations

from typing import Dict, Type

from play_developer_mcp.core.errors.publisher import (
    ConfigurationError,
    CredentialsError,
    PublisherApiError,
)
from play_developer_mcp.core.responses.types import ErrorType

ERROR_MAPPINGS: Dict[Type[Exception], ErrorType] = {
    ConfigurationError: ErrorType.CONFIGURATION,
    CredentialsError: ErrorType.AUTHENTICATION,
    PublisherApiError: ErrorType.UNAVAILABLE,
}

_STATUS_MAPPINGS: Dict[int, ErrorType] = {
    400: ErrorType.VALIDATION,
    401: ErrorType.AUTHENTICATION,
    403: ErrorType.AUTHORIZATION,
    404: ErrorType.NOT_FOUND,
    429: ErrorType.RATE_LIMIT,
}


def classify_error(exc: Exception) -> ErrorType:
    """Return the ErrorType for *exc*.

    API errors are classified by HTTP status when one is known; other
    registered exceptions use their exact type. Anything unregistered is
    ``ErrorType.INTERNAL``.
    """
    if isinstance(exc, PublisherApiError) and exc.status is not None:
        if exc.status in _STATUS_MAPPINGS:
            return _STATUS_MAPPINGS[exc.status]
        if exc.status >= 500:
            return ErrorType.UNAVAILABLE
    return ERROR_MAPPINGS.get(type(exc), ErrorType.INTERNAL)


def is_expected_error(exc: Exception) -> bool:
    """Whether *exc* is a registered failure rather than a programming error."""
    return type(exc) in ERROR_MAPPINGS
