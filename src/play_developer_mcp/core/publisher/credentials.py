"""Service account credential loading for the Android Publisher API."""

import logging
import os
from pathlib import Path
from typing import Optional, Union

from google.oauth2 import service_account

from play_developer_mcp.core.errors.publisher import ConfigurationError, CredentialsError

logger = logging.getLogger(__name__)

ANDROID_PUBLISHER_SCOPE = "https://www.googleapis.com/auth/androidpublisher"
CREDENTIALS_ENV_VAR = "GOOGLE_SERVICE_ACCOUNT_KEY"


def resolve_credentials_path(configured: Optional[Union[str, Path]] = None) -> str:
    """Return the service account key path, reading the environment if none is configured.

    Args:
        configured: Explicit path (usually ``ServerConfig.credentials_path``)

    Raises:
        ConfigurationError: If neither the argument nor the environment supplies a path
    """
    if configured:
        return str(configured)
    path = os.environ.get(CREDENTIALS_ENV_VAR)
    if not path:
        raise ConfigurationError(
            f"{CREDENTIALS_ENV_VAR} environment variable is required. "
            "Set it to the path of your Google Cloud service account JSON key file."
        )
    return path


def load_credentials(path: Union[str, Path]) -> service_account.Credentials:
    """Load service account credentials scoped to the Android Publisher API.

    Raises:
        CredentialsError: If the key file is unreadable or not valid key material
    """
    try:
        credentials = service_account.Credentials.from_service_account_file(
            str(path),
            scopes=[ANDROID_PUBLISHER_SCOPE],
        )
    except (OSError, ValueError) as e:
        raise CredentialsError(
            f"Could not load service account key from {path}: {e}",
            path=str(path),
        ) from e

    logger.debug(f"Loaded service account credentials for {credentials.service_account_email}")
    return credentials
