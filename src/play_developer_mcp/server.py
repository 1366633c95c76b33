"""
MCP server entry point for play-developer-mcp.

Builds a FastMCP server exposing the Google Play Developer tools and runs it
over stdio.
"""

import logging
from typing import Optional

import click
from mcp.server.fastmcp import FastMCP

from play_developer_mcp.config import ServerConfig, set_config
from play_developer_mcp.core.publisher import build_publisher_client
from play_developer_mcp.tools.publisher import ClientFactory, register_publisher_tools

logger = logging.getLogger(__name__)


def create_server(
    config: Optional[ServerConfig] = None,
    client_factory: ClientFactory = build_publisher_client,
) -> FastMCP:
    """Create the FastMCP server with all tools registered.

    Args:
        config: Server configuration (loaded from env/TOML when omitted)
        client_factory: Builds the publisher client for each tool call
    """
    config = config or ServerConfig.from_env()
    set_config(config)

    mcp = FastMCP(config.server_name)
    register_publisher_tools(mcp, config, client_factory=client_factory)

    for warning in config.startup_warnings:
        logger.warning(warning)

    logger.debug(f"Created {config.server_name} {config.server_version}")
    return mcp


@click.command("play-developer-mcp")
@click.option(
    "--config",
    "config_file",
    type=click.Path(dir_okay=False),
    default=None,
    help="Path to a play-developer-mcp TOML config file.",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Override the configured log level.",
)
def main(config_file: Optional[str], log_level: Optional[str]) -> None:
    """Run the Google Play Developer MCP server over stdio."""
    config = ServerConfig.from_env(config_file)
    if log_level:
        config.log_level = log_level.upper()
    config.setup_logging()

    server = create_server(config)
    logger.info(f"Starting {config.server_name} {config.server_version} on stdio")
    server.run(transport="stdio")


if __name__ == "__main__":
    main()
