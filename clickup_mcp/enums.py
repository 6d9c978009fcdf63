"""Enums for ClickUp MCP."""

from enum import Enum, IntEnum


class ResponseFormat(str, Enum):
    """Output format for tool responses."""

    JSON = "json"  # Raw API payload (default)
    MARKDOWN = "markdown"  # Human-readable


class SearchScope(str, Enum):
    """Area a task search is narrowed to."""

    WORKSPACE = "workspace"
    SPACE = "space"
    FOLDER = "folder"
    LIST = "list"


class TaskPriority(IntEnum):
    """ClickUp priority ordinals (lower is more urgent)."""

    URGENT = 1
    HIGH = 2
    NORMAL = 3
    LOW = 4


class ToolName(str, Enum):
    """Names of every tool the server advertises."""

    CREATE_TASK = "clickup_create_task"
    GET_TASK = "clickup_get_task"
    UPDATE_TASK = "clickup_update_task"
    DELETE_TASK = "clickup_delete_task"
    LIST_TASKS = "clickup_list_tasks"
    SEARCH_TASKS = "clickup_search_tasks"
    ADD_COMMENT = "clickup_add_comment"
    LIST_COMMENTS = "clickup_list_comments"
    UPDATE_COMMENT = "clickup_update_comment"
    DELETE_COMMENT = "clickup_delete_comment"
    ADD_DEPENDENCY = "clickup_add_dependency"
    REMOVE_DEPENDENCY = "clickup_remove_dependency"
    LIST_DEPENDENCIES = "clickup_list_dependencies"
    GET_WORKSPACE_STRUCTURE = "clickup_get_workspace_structure"
