"""Environment configuration for ClickUp MCP."""

import os
from collections.abc import Mapping

from pydantic import BaseModel, Field

from clickup_mcp.errors import ConfigurationError

API_TOKEN_ENV = "CLICKUP_API_TOKEN"


class Settings(BaseModel):
    """Runtime settings. The API token is the only one."""

    api_token: str = Field(..., min_length=1, description="ClickUp personal API token")


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """
    Read settings from the environment.

    Args:
        environ: Mapping to read from (defaults to ``os.environ``)

    Returns:
        Settings instance

    Raises:
        ConfigurationError: If CLICKUP_API_TOKEN is unset or blank
    """
    env = os.environ if environ is None else environ
    token = (env.get(API_TOKEN_ENV) or "").strip()
    if not token:
        raise ConfigurationError(f"{API_TOKEN_ENV} environment variable is required")
    return Settings(api_token=token)
