"""Publisher facade error classes.

Raised while building credentials or talking to the Android Publisher API.
Tool handlers turn every one of these into an error result.
"""

from typing import Optional


class PublisherError(RuntimeError):
    """Base exception for publisher facade errors."""


class ConfigurationError(PublisherError):
    """Raised when required configuration (the credential path) is missing."""


class CredentialsError(PublisherError):
    """Raised when service account key material cannot be loaded."""

    def __init__(self, message: str, *, path: Optional[str] = None):
        self.path = path
        super().__init__(message)


class PublisherApiError(PublisherError):
    """Raised when the remote API answers with an HTTP error.

    Attributes:
        status: HTTP status code returned by the API (if known)
        reason: Reason string extracted from the API error payload
    """

    def __init__(
        self,
        message: str,
        *,
        status: Optional[int] = None,
        reason: Optional[str] = None,
    ):
        super().__init__(message)
        self.status = status
        self.reason = reason
