"""Parser helpers for ClickUp payloads."""

from datetime import datetime, timezone
from typing import Any

from clickup_mcp.models.task import CommentModel, TaskModel


def _parse_task(task_dict: dict[str, Any]) -> TaskModel:
    """
    Parse a task dictionary into a TaskModel.

    Args:
        task_dict: Task object as returned by ClickUp

    Returns:
        TaskModel instance with validated data
    """
    return TaskModel.model_validate(task_dict)


def _parse_tasks(tasks: list[dict[str, Any]]) -> list[TaskModel]:
    """Parse a list of task dictionaries into TaskModel instances."""
    return [TaskModel.model_validate(t) for t in tasks]


def _parse_comments(comments: list[dict[str, Any]]) -> list[CommentModel]:
    """Parse a list of comment dictionaries into CommentModel instances."""
    return [CommentModel.model_validate(c) for c in comments]


def _summarize_dependencies(task: dict[str, Any]) -> dict[str, Any]:
    """
    Reduce a full task payload to its dependency information.

    Returns:
        Dict with task_id, task_name, dependencies and linked_tasks
    """
    return {
        "task_id": task.get("id"),
        "task_name": task.get("name"),
        "dependencies": task.get("dependencies") or [],
        "linked_tasks": task.get("linked_tasks") or [],
    }


def _format_timestamp(value: str | int | None) -> str | None:
    """Render an epoch-millisecond timestamp as YYYY-MM-DD (UTC)."""
    if value in (None, ""):
        return None
    try:
        millis = int(value)
    except (TypeError, ValueError):
        return str(value)
    return datetime.fromtimestamp(millis / 1000, tz=timezone.utc).strftime("%Y-%m-%d")
