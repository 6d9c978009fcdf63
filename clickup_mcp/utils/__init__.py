"""Utility functions for ClickUp MCP."""

from clickup_mcp.utils.formatters import (
    _format_comments_markdown,
    _format_dependencies_markdown,
    _format_json,
    _format_task_markdown,
    _format_tasks_markdown,
    _format_workspace_markdown,
)
from clickup_mcp.utils.parsers import _parse_comments, _parse_task, _parse_tasks, _summarize_dependencies

__all__ = [
    "_parse_task",
    "_parse_tasks",
    "_parse_comments",
    "_summarize_dependencies",
    "_format_json",
    "_format_task_markdown",
    "_format_tasks_markdown",
    "_format_comments_markdown",
    "_format_dependencies_markdown",
    "_format_workspace_markdown",
]
