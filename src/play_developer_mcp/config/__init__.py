"""Configuration package for play-developer-mcp.

Sub-modules:
    parsing    - boolean and list parsing helpers
    server     - ServerConfig dataclass, get_config/set_config globals
    loader     - ServerConfig loading/validation mixin (_ServerConfigLoader)
"""

from play_developer_mcp.config.server import (  # noqa: F401
    _PACKAGE_VERSION,
    ServerConfig,
    get_config,
    set_config,
)
