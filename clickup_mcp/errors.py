"""Exception types raised by the ClickUp client and tools."""

import json
from typing import Any


class ClickUpError(Exception):
    """Base class for every error raised by clickup_mcp."""


class ConfigurationError(ClickUpError):
    """Required configuration (the API token) is missing."""


class ValidationError(ClickUpError):
    """Tool arguments are inconsistent; raised before any request is sent."""


class ApiError(ClickUpError):
    """ClickUp answered with a non-2xx status.

    The parsed response body is kept as-is so the caller sees the backend's
    own diagnostic (e.g. ``{"err": "Task not found", "ECODE": "ITEM_013"}``).
    """

    def __init__(self, status_code: int, status_text: str, body: Any):
        self.status_code = status_code
        self.status_text = status_text
        self.body = body
        super().__init__(f"ClickUp API error: {status_code} {status_text}\n{_render_body(body)}")


class TransportError(ClickUpError):
    """The request never produced an HTTP response (DNS, refused, reset)."""


def _render_body(body: Any) -> str:
    if isinstance(body, str):
        return body
    return json.dumps(body, indent=2)
