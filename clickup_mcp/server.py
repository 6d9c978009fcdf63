"""FastMCP server initialization for ClickUp MCP."""

import logging
import sys

from mcp.server.fastmcp import FastMCP

from clickup_mcp.config import load_settings
from clickup_mcp.errors import ConfigurationError

logger = logging.getLogger("clickup-mcp")

# Initialize the MCP server
mcp = FastMCP("clickup_mcp")


def _configure_logging() -> None:
    # stdout carries the MCP stdio stream, so logs go to stderr
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
        force=True,
    )


def run() -> None:
    """Run the MCP server, exiting with status 1 if the API token is missing."""
    _configure_logging()

    try:
        load_settings()
    except ConfigurationError as e:
        logger.error("Error: %s", e)
        sys.exit(1)

    logger.info("ClickUp MCP server starting")
    mcp.run()
