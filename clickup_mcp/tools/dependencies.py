"""Dependency MCP tool definitions for ClickUp."""

import logging

from mcp.types import ToolAnnotations

from clickup_mcp.client import create_client
from clickup_mcp.enums import ResponseFormat, ToolName
from clickup_mcp.models.dependency import WaitingOn
from clickup_mcp.models.inputs import AddDependencyInput, ListDependenciesInput, RemoveDependencyInput
from clickup_mcp.server import mcp
from clickup_mcp.utils.formatters import _format_dependencies_markdown, _format_json
from clickup_mcp.utils.parsers import _summarize_dependencies

logger = logging.getLogger("clickup-mcp.tools")


@mcp.tool(
    name=ToolName.ADD_DEPENDENCY.value,
    annotations=ToolAnnotations(
        title="Add Dependency",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True,
    ),
)
async def clickup_add_dependency(params: AddDependencyInput) -> str:
    """
    Create a dependency relationship between two tasks.

    DEPENDENCY TYPES (give exactly one):
    - depends_on: task_id WAITS ON the other task
    - dependency_of: task_id BLOCKS the other task

    USAGE PATTERNS:
    - "Task A blocks Task B" → task_id=A, dependency_of=B
    - "Task C waits on Task D" → task_id=C, depends_on=D

    BEST PRACTICES:
    - Verify both tasks exist first
    - Circular dependencies are rejected by ClickUp
    - Record why the dependency exists in a comment

    Args:
        params: AddDependencyInput containing task_id and one direction field

    Returns:
        ClickUp's response as JSON
    """
    dependency = params.dependency
    logger.info("Adding dependency on task %s: %s %s", params.task_id, dependency.kind, dependency.task_id)

    async with create_client() as clickup:
        result = await clickup.add_dependency(params.task_id, dependency)

    return _format_json(result)


@mcp.tool(
    name=ToolName.REMOVE_DEPENDENCY.value,
    annotations=ToolAnnotations(
        title="Remove Dependency",
        readOnlyHint=False,
        destructiveHint=True,
        idempotentHint=True,
        openWorldHint=True,
    ),
)
async def clickup_remove_dependency(params: RemoveDependencyInput) -> str:
    """
    Remove a dependency relationship between two tasks.

    SPECIFY EXACTLY ONE OF:
    - depends_on: remove "task_id waits on depends_on"
    - dependency_of: remove "task_id blocks dependency_of"

    USAGE:
    - Remove "Task A waits on Task B" → task_id=A, depends_on=B
    - Remove "Task C blocks Task D" → task_id=C, dependency_of=D

    Args:
        params: RemoveDependencyInput containing task_id and one direction field

    Returns:
        Confirmation message
    """
    dependency = params.dependency
    logger.info("Removing dependency on task %s: %s %s", params.task_id, dependency.kind, dependency.task_id)

    async with create_client() as clickup:
        await clickup.delete_dependency(params.task_id, dependency)

    relation = "waiting on" if isinstance(dependency, WaitingOn) else "blocking"
    return f"Dependency removed successfully from task {params.task_id} ({relation} {dependency.task_id})"


@mcp.tool(
    name=ToolName.LIST_DEPENDENCIES.value,
    annotations=ToolAnnotations(
        title="List Dependencies",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True,
    ),
)
async def clickup_list_dependencies(params: ListDependenciesInput) -> str:
    """
    View all dependency relationships for a task.

    RETURNS:
    - dependencies: every edge touching the task. An edge whose task_id is this
      task means it is waiting on depends_on; an edge whose depends_on is this
      task means it is blocking task_id
    - linked_tasks: non-blocking relationships

    USE CASES:
    - Check what is blocking completion
    - See the impact of delaying a task

    Args:
        params: ListDependenciesInput containing task_id and response_format

    Returns:
        {task_id, task_name, dependencies, linked_tasks} (JSON or markdown)
    """
    async with create_client() as clickup:
        task = await clickup.get_task(params.task_id)

    summary = _summarize_dependencies(task)

    if params.response_format == ResponseFormat.MARKDOWN:
        return _format_dependencies_markdown(summary)
    return _format_json(summary)
