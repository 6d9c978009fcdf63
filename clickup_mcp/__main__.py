"""Entry point for ``python -m clickup_mcp``."""

from clickup_mcp.server import run

run()
