"""ServerConfig loading and validation logic.

Provides ``_ServerConfigLoader``, a mixin class whose methods are inherited by
``ServerConfig`` (defined in ``server.py``).  Splitting loading/validation
logic into its own module keeps ``server.py`` focused on field definitions and
simple accessor methods.
"""

from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path
from typing import TYPE_CHECKING, Any, List, Optional, cast

if TYPE_CHECKING:
    from play_developer_mcp.config.server import ServerConfig

from play_developer_mcp.config.parsing import _parse_bool, _parse_list
from play_developer_mcp.core.publisher.credentials import CREDENTIALS_ENV_VAR

logger = logging.getLogger(__name__)

CONFIG_FILE_ENV_VAR = "PLAY_DEVELOPER_MCP_CONFIG_FILE"
CONFIG_FILE_NAME = "play-developer-mcp.toml"


class _ServerConfigLoader:
    """Mixin providing config-loading methods for ``ServerConfig``.

    At runtime ``self`` is always a ``ServerConfig`` instance.
    """

    if TYPE_CHECKING:
        credentials_path: Optional[Path]
        log_level: str
        structured_logging: bool
        server_name: str
        server_version: str
        disabled_tools: List[str]

        def _add_startup_warning(self, warning: str) -> None: ...

    @classmethod
    def from_env(cls, config_file: Optional[str] = None) -> "ServerConfig":
        """
        Create configuration from environment variables and optional TOML file.

        Priority (highest to lowest):
        1. Environment variables
        2. Project TOML config (./play-developer-mcp.toml)
        3. User TOML config (~/.play-developer-mcp.toml)
        4. XDG config (~/.config/play-developer-mcp/config.toml)
        5. Default values
        """
        config = cls()

        toml_path = config_file or os.environ.get(CONFIG_FILE_ENV_VAR)
        if toml_path:
            config._load_toml(Path(toml_path))
        else:
            # Lowest to highest priority
            xdg_config_home = os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config")
            xdg_config = Path(xdg_config_home) / "play-developer-mcp" / "config.toml"
            if xdg_config.exists():
                config._load_toml(xdg_config)
                logger.debug(f"Loaded XDG config from {xdg_config}")

            home_config = Path.home() / f".{CONFIG_FILE_NAME}"
            if home_config.exists():
                config._load_toml(home_config)
                logger.debug(f"Loaded user config from {home_config}")

            project_config = Path(CONFIG_FILE_NAME)
            if project_config.exists():
                config._load_toml(project_config)
                logger.debug(f"Loaded project config from {project_config}")

        config._load_env()
        config._validate_startup_configuration()

        return cast("ServerConfig", config)

    def _load_toml(self, path: Path) -> None:
        """Load configuration from TOML file."""
        if not path.exists():
            logger.warning(f"Config file not found: {path}")
            return

        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            logger.error(f"Error loading config file {path}: {e}")
            return

        if "google" in data:
            google = data["google"]
            if "credentials_path" in google:
                self.credentials_path = Path(google["credentials_path"]).expanduser()

        if "logging" in data:
            log = data["logging"]
            if "level" in log:
                self.log_level = str(log["level"]).upper()
            if "structured" in log:
                self.structured_logging = _parse_bool(log["structured"])

        if "server" in data:
            srv = data["server"]
            if "name" in srv:
                self.server_name = srv["name"]
            if "version" in srv:
                self.server_version = srv["version"]

        if "tools" in data:
            tools_cfg = data["tools"]
            if "disabled_tools" in tools_cfg:
                self.disabled_tools = _parse_list(tools_cfg["disabled_tools"])

    def _load_env(self) -> None:
        """Load configuration from environment variables."""
        if credentials := os.environ.get(CREDENTIALS_ENV_VAR):
            self.credentials_path = Path(credentials).expanduser()

        if level := os.environ.get("PLAY_DEVELOPER_MCP_LOG_LEVEL"):
            self.log_level = level.upper()

        if structured := os.environ.get("PLAY_DEVELOPER_MCP_STRUCTURED_LOGGING"):
            self.structured_logging = _parse_bool(structured)

        if disabled := os.environ.get("PLAY_DEVELOPER_MCP_DISABLED_TOOLS"):
            self.disabled_tools = _parse_list(disabled)

    def _validate_startup_configuration(self) -> None:
        """Record warnings for settings that will fail on first use."""
        if self.credentials_path is not None and not self.credentials_path.exists():
            self._add_startup_warning(f"Service account key file not found: {self.credentials_path}")
        if self.log_level not in logging.getLevelNamesMapping():
            self._add_startup_warning(f"Unknown log level '{self.log_level}', using INFO")
