"""MCP tool definitions for ClickUp."""

# Import all tools to register them with the MCP server
from clickup_mcp.tools.comments import (
    clickup_add_comment,
    clickup_delete_comment,
    clickup_list_comments,
    clickup_update_comment,
)
from clickup_mcp.tools.dependencies import (
    clickup_add_dependency,
    clickup_list_dependencies,
    clickup_remove_dependency,
)
from clickup_mcp.tools.tasks import (
    clickup_create_task,
    clickup_delete_task,
    clickup_get_task,
    clickup_list_tasks,
    clickup_search_tasks,
    clickup_update_task,
)
from clickup_mcp.tools.workspace import clickup_get_workspace_structure

__all__ = [
    # Task tools
    "clickup_create_task",
    "clickup_get_task",
    "clickup_update_task",
    "clickup_delete_task",
    "clickup_list_tasks",
    "clickup_search_tasks",
    # Comment tools
    "clickup_add_comment",
    "clickup_list_comments",
    "clickup_update_comment",
    "clickup_delete_comment",
    # Dependency tools
    "clickup_add_dependency",
    "clickup_remove_dependency",
    "clickup_list_dependencies",
    # Workspace tools
    "clickup_get_workspace_structure",
]
