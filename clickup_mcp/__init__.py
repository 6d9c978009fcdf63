"""
MCP Server for ClickUp.

This server exposes the ClickUp REST API as MCP tools, enabling task
management operations including creating, updating, searching and deleting
tasks, commenting, managing dependencies and discovering the workspace
hierarchy.
"""

# Re-export client and errors
from clickup_mcp.client import CLICKUP_API_BASE_URL, ClickUpClient, create_client, encode_query_params
from clickup_mcp.config import Settings, load_settings

# Re-export enums
from clickup_mcp.enums import ResponseFormat, SearchScope, TaskPriority, ToolName
from clickup_mcp.errors import ApiError, ClickUpError, ConfigurationError, TransportError, ValidationError

# Re-export models
from clickup_mcp.models import (
    AddCommentInput,
    AddDependencyInput,
    Blocking,
    CommentModel,
    CreateTaskInput,
    DeleteCommentInput,
    DeleteTaskInput,
    Dependency,
    FolderNode,
    GetTaskInput,
    ListCommentsInput,
    ListDependenciesInput,
    ListRef,
    ListTasksInput,
    RemoveDependencyInput,
    SearchTasksInput,
    SpaceNode,
    TaskModel,
    TeamNode,
    UpdateCommentInput,
    UpdateTaskInput,
    WaitingOn,
    WorkspaceStructure,
    WorkspaceStructureInput,
)

# Re-export MCP server instance
from clickup_mcp.server import mcp

# Re-export tools
from clickup_mcp.tools import (
    clickup_add_comment,
    clickup_add_dependency,
    clickup_create_task,
    clickup_delete_comment,
    clickup_delete_task,
    clickup_get_task,
    clickup_get_workspace_structure,
    clickup_list_comments,
    clickup_list_dependencies,
    clickup_list_tasks,
    clickup_remove_dependency,
    clickup_search_tasks,
    clickup_update_comment,
    clickup_update_task,
)

__all__ = [
    # Client
    "CLICKUP_API_BASE_URL",
    "ClickUpClient",
    "create_client",
    "encode_query_params",
    # Config
    "Settings",
    "load_settings",
    # Errors
    "ClickUpError",
    "ConfigurationError",
    "ValidationError",
    "ApiError",
    "TransportError",
    # Enums
    "ResponseFormat",
    "SearchScope",
    "TaskPriority",
    "ToolName",
    # Models
    "TaskModel",
    "CommentModel",
    "WaitingOn",
    "Blocking",
    "Dependency",
    "ListRef",
    "FolderNode",
    "SpaceNode",
    "TeamNode",
    "WorkspaceStructure",
    # Input models
    "CreateTaskInput",
    "GetTaskInput",
    "UpdateTaskInput",
    "DeleteTaskInput",
    "ListTasksInput",
    "SearchTasksInput",
    "AddCommentInput",
    "ListCommentsInput",
    "UpdateCommentInput",
    "DeleteCommentInput",
    "AddDependencyInput",
    "RemoveDependencyInput",
    "ListDependenciesInput",
    "WorkspaceStructureInput",
    # Tools
    "clickup_create_task",
    "clickup_get_task",
    "clickup_update_task",
    "clickup_delete_task",
    "clickup_list_tasks",
    "clickup_search_tasks",
    "clickup_add_comment",
    "clickup_list_comments",
    "clickup_update_comment",
    "clickup_delete_comment",
    "clickup_add_dependency",
    "clickup_remove_dependency",
    "clickup_list_dependencies",
    "clickup_get_workspace_structure",
    # MCP server instance
    "mcp",
]
