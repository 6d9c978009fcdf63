"""Task MCP tool definitions for ClickUp."""

import logging
from typing import Any

from mcp.types import ToolAnnotations

from clickup_mcp.client import create_client
from clickup_mcp.enums import ResponseFormat, SearchScope, ToolName
from clickup_mcp.errors import ValidationError
from clickup_mcp.models.inputs import (
    CreateTaskInput,
    DeleteTaskInput,
    GetTaskInput,
    ListTasksInput,
    SearchTasksInput,
    UpdateTaskInput,
)
from clickup_mcp.server import mcp
from clickup_mcp.utils.formatters import _format_json, _format_task_markdown, _format_tasks_markdown
from clickup_mcp.utils.parsers import _parse_task, _parse_tasks

logger = logging.getLogger("clickup-mcp.tools")

_ADD_REM_FIELDS = {"assignees_add", "assignees_rem", "tags_add", "tags_rem"}

_FILTER_FIELDS = {
    "page",
    "archived",
    "include_closed",
    "subtasks",
    "order_by",
    "reverse",
    "assignees",
    "statuses",
    "tags",
    "due_date_gt",
    "due_date_lt",
}

# scope -> (input field holding the id, query parameter narrowing the search)
_SCOPE_FIELDS = {
    SearchScope.SPACE: ("space_id", "space_ids"),
    SearchScope.FOLDER: ("folder_id", "folder_ids"),
    SearchScope.LIST: ("list_id", "list_ids"),
}


def _add_rem(add: list | None, rem: list | None) -> dict[str, list] | None:
    if add is None and rem is None:
        return None
    change: dict[str, list] = {}
    if add is not None:
        change["add"] = add
    if rem is not None:
        change["rem"] = rem
    return change


def _build_task_updates(params: UpdateTaskInput) -> dict[str, Any]:
    """
    Build a partial update body from the fields the caller supplied.

    Unsupplied fields are left out entirely so ClickUp keeps their current
    values. ``*_add``/``*_rem`` pairs collapse into ``{"add": ..., "rem": ...}``.
    """
    updates = params.model_dump(
        mode="json",
        exclude_unset=True,
        exclude_none=True,
        exclude={"task_id"} | _ADD_REM_FIELDS,
    )
    if assignees := _add_rem(params.assignees_add, params.assignees_rem):
        updates["assignees"] = assignees
    if tags := _add_rem(params.tags_add, params.tags_rem):
        updates["tags"] = tags
    return updates


def _build_search_request(params: SearchTasksInput) -> tuple[str, dict[str, Any]]:
    """
    Resolve the team and query filters for a scoped search.

    Raises:
        ValidationError: If the identifier the scope needs is missing
    """
    scope_filter: dict[str, list[str]] = {}
    if params.scope in _SCOPE_FIELDS:
        id_field, query_field = _SCOPE_FIELDS[params.scope]
        scope_id = getattr(params, id_field)
        if not scope_id:
            raise ValidationError(f"{id_field} is required for {params.scope.value} scope")
        scope_filter[query_field] = [scope_id]

    if not params.team_id:
        raise ValidationError(f"team_id is required for {params.scope.value} scope")

    filters = params.model_dump(mode="json", exclude_none=True, include=_FILTER_FIELDS | {"query"})
    filters.update(scope_filter)
    return params.team_id, filters


@mcp.tool(
    name=ToolName.CREATE_TASK.value,
    annotations=ToolAnnotations(
        title="Create Task",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=False,
        openWorldHint=True,
    ),
)
async def clickup_create_task(params: CreateTaskInput) -> str:
    """
    Create a new task in a ClickUp list.

    USAGE GUIDELINES:
    - ALWAYS specify a list_id - tasks must belong to a list
    - Prefer markdown_description over plain description for rich formatting
    - Priority: 1=Urgent, 2=High, 3=Normal, 4=Low (default to 3 unless urgency is indicated)
    - Dates and time_estimate are in milliseconds (Unix epoch for dates)
    - Add assignees (user IDs) if users are mentioned

    COMMON PATTERNS:
    - Bug report → priority 2, tag "bug"
    - Feature request → priority 3, tag "feature"
    - Urgent fix → priority 1
    - Subtask → set parent to the parent task ID

    ERROR HANDLING:
    - List not found → ask the user for the correct list, or look it up with clickup_get_workspace_structure
    - Invalid status → status must match the statuses configured on the list

    Args:
        params: CreateTaskInput containing list_id, name and optional attributes

    Returns:
        The created task as JSON

    Examples:
        - Simple task: params with list_id="901234567", name="Write release notes"
        - Urgent bug: params with list_id="901234567", name="Fix login", priority=1, tags=["bug"]
    """
    fields = params.model_dump(mode="json", exclude_none=True, exclude={"list_id"})
    logger.info("Creating task in list %s", params.list_id)

    async with create_client() as clickup:
        task = await clickup.create_task(params.list_id, fields)

    return _format_json(task)


@mcp.tool(
    name=ToolName.GET_TASK.value,
    annotations=ToolAnnotations(
        title="Get Task Details",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True,
    ),
)
async def clickup_get_task(params: GetTaskInput) -> str:
    """
    Retrieve detailed information about a specific task.

    Returns name, description, status, priority, assignees, creator, dates,
    dependencies, linked tasks, checklists and the space/folder/list hierarchy.

    USE THIS WHEN:
    - Viewing a task before updating it
    - Checking status and assignees
    - Reviewing dependencies before marking a task complete
    - Getting the task URL for sharing

    Args:
        params: GetTaskInput containing task_id and response_format

    Returns:
        Task details (JSON or markdown based on response_format)
    """
    async with create_client() as clickup:
        task = await clickup.get_task(params.task_id)

    if params.response_format == ResponseFormat.MARKDOWN:
        return _format_task_markdown(_parse_task(task))
    return _format_json(task)


@mcp.tool(
    name=ToolName.UPDATE_TASK.value,
    annotations=ToolAnnotations(
        title="Update Task",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=False,
        openWorldHint=True,
    ),
)
async def clickup_update_task(params: UpdateTaskInput) -> str:
    """
    Update an existing task's properties.

    UPDATE BEHAVIOR:
    - Only include fields you want to change; omitted fields remain unchanged
    - Assignees and tags are changed incrementally with *_add / *_rem lists
    - status must match a status available in the task's list
    - archived: true to archive, false to unarchive
    - Custom fields cannot be updated here

    COMMON UPDATES:
    - Mark complete → set status to the list's closed status
    - Reassign → assignees_add=[new], assignees_rem=[old]
    - Reprioritize → priority=1..4
    - Reschedule → due_date in Unix milliseconds

    Args:
        params: UpdateTaskInput containing task_id and the fields to change

    Returns:
        The updated task as JSON
    """
    updates = _build_task_updates(params)
    logger.info("Updating task %s fields=%s", params.task_id, sorted(updates))

    async with create_client() as clickup:
        task = await clickup.update_task(params.task_id, updates)

    return _format_json(task)


@mcp.tool(
    name=ToolName.DELETE_TASK.value,
    annotations=ToolAnnotations(
        title="Delete Task",
        readOnlyHint=False,
        destructiveHint=True,
        idempotentHint=True,
        openWorldHint=True,
    ),
)
async def clickup_delete_task(params: DeleteTaskInput) -> str:
    """
    Delete a task permanently from ClickUp.

    WARNING:
    - This cannot be undone and removes comments and attachments too
    - Consider clickup_update_task with archived=true for a recoverable removal
    - Confirm with the user and check dependencies before deleting

    Args:
        params: DeleteTaskInput containing the task_id to delete

    Returns:
        Confirmation message
    """
    logger.info("Deleting task %s", params.task_id)

    async with create_client() as clickup:
        await clickup.delete_task(params.task_id)

    return f"Task {params.task_id} has been deleted successfully."


@mcp.tool(
    name=ToolName.LIST_TASKS.value,
    annotations=ToolAnnotations(
        title="List Tasks",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True,
    ),
)
async def clickup_list_tasks(params: ListTasksInput) -> str:
    """
    List tasks from a specific list, one page at a time.

    LIMITATIONS:
    - Maximum 100 tasks per page
    - Only returns tasks whose home is this list (tasks added from other lists are not included)

    PAGINATION:
    - page is 0-based; the response includes last_page
    - Request following pages until last_page is true

    FILTERING:
    - archived / include_closed (both default to false)
    - statuses, assignees (user IDs), tags
    - due_date_gt / due_date_lt in Unix milliseconds
    - order_by with reverse=true for descending order

    Args:
        params: ListTasksInput containing list_id, filters and response_format

    Returns:
        One page of tasks (JSON or markdown based on response_format)
    """
    filters = params.model_dump(mode="json", exclude_none=True, include=_FILTER_FIELDS)

    async with create_client() as clickup:
        response = await clickup.list_tasks(params.list_id, filters)

    if params.response_format == ResponseFormat.MARKDOWN:
        return _format_tasks_markdown(
            _parse_tasks(response.get("tasks", [])),
            title=f"Tasks in list {params.list_id}",
            last_page=response.get("last_page"),
        )
    return _format_json(response)


@mcp.tool(
    name=ToolName.SEARCH_TASKS.value,
    annotations=ToolAnnotations(
        title="Search Tasks",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True,
    ),
)
async def clickup_search_tasks(params: SearchTasksInput) -> str:
    """
    Search for tasks with flexible scope control.

    SCOPE CONTROLS THE SEARCH AREA (team_id is always required):
    - "workspace": entire workspace (slowest, broadest)
    - "space": within a space (space_id required)
    - "folder": within a folder (folder_id required)
    - "list": within a list (list_id required)

    PERFORMANCE TIPS:
    - Narrower scope = faster results; use workspace scope only when needed
    - Maximum 100 results per page

    SMART DEFAULTS:
    - If the user mentions a specific list/space, narrow the scope
    - "My tasks" → workspace scope with the user's ID in assignees

    EXAMPLES:
    - "Find bugs in the API project" → scope="list", query="bug", list_id of the API project list
    - "Show all my overdue tasks" → scope="workspace", assignees=[me], due_date_lt=now

    PAGINATION:
    - page is 0-based; iterate until last_page is true

    Args:
        params: SearchTasksInput containing query, scope, scope IDs and filters

    Returns:
        One page of matching tasks (JSON or markdown based on response_format)
    """
    team_id, filters = _build_search_request(params)
    logger.info("Searching tasks in team %s (scope=%s)", team_id, params.scope.value)

    async with create_client() as clickup:
        response = await clickup.search_tasks(team_id, filters)

    if params.response_format == ResponseFormat.MARKDOWN:
        return _format_tasks_markdown(
            _parse_tasks(response.get("tasks", [])),
            title=f"Tasks matching '{params.query}' ({params.scope.value})",
            last_page=response.get("last_page"),
        )
    return _format_json(response)
