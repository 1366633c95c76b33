"""Android Publisher API facade.

Sub-modules:
    credentials  - service account key loading
    client       - PublisherClient and build_publisher_client
"""

from play_developer_mcp.core.publisher.client import (  # noqa: F401
    PublisherClient,
    build_publisher_client,
)
from play_developer_mcp.core.publisher.credentials import (  # noqa: F401
    ANDROID_PUBLISHER_SCOPE,
    CREDENTIALS_ENV_VAR,
    load_credentials,
    resolve_credentials_path,
)
