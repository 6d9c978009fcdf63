"""Formatting utilities for tool output."""

import json
from typing import Any

from clickup_mcp.models.task import CommentModel, DependencyRecord, TaskModel
from clickup_mcp.models.workspace import WorkspaceStructure
from clickup_mcp.utils.parsers import _format_timestamp

PRIORITY_LABELS = {"1": "Urgent", "2": "High", "3": "Normal", "4": "Low"}


def _format_json(data: Any) -> str:
    """Pretty-print an API payload."""
    return json.dumps(data, indent=2)


def _format_task_markdown(task: TaskModel) -> str:
    """Format a single task as markdown."""
    lines = []

    status = task.status.status if task.status else "unknown"
    lines.append(f"### [{task.id}] {task.name or 'Untitled'} ({status})")

    details = []
    if task.priority and task.priority.id:
        details.append(f"**Priority**: {PRIORITY_LABELS.get(task.priority.id, task.priority.priority)}")
    if due := _format_timestamp(task.due_date):
        details.append(f"**Due**: {due}")
    if start := _format_timestamp(task.start_date):
        details.append(f"**Start**: {start}")
    if task.assignees:
        details.append(f"**Assignees**: {', '.join(u.username or u.id or '?' for u in task.assignees)}")
    if task.tags:
        details.append(f"**Tags**: {', '.join(t.name for t in task.tags)}")

    if details:
        lines.append(" | ".join(details))

    location = [ref.name for ref in (task.space, task.folder, task.home_list) if ref and ref.name]
    if location:
        lines.append(f"**Location**: {' / '.join(location)}")
    if task.parent:
        lines.append(f"**Parent**: {task.parent}")

    if task.dependencies:
        lines.append("**Dependencies:**")
        for dep in task.dependencies:
            lines.append(f"  - {_describe_dependency(dep, task.id)}")

    description = task.text_content or task.description
    if description:
        lines.append("")
        lines.append(description)

    if task.url:
        lines.append(f"\n{task.url}")

    return "\n".join(lines)


def _format_tasks_markdown(tasks: list[TaskModel], title: str = "Tasks", last_page: bool | None = None) -> str:
    """Format a page of tasks as markdown."""
    if not tasks:
        return f"# {title}\n\nNo tasks found."

    lines = [f"# {title}", f"*{len(tasks)} task(s)*", ""]

    for task in tasks:
        lines.append(_format_task_markdown(task))
        lines.append("")

    if last_page is False:
        lines.append("*More results available: request the next page.*")

    return "\n".join(lines)


def _format_comments_markdown(comments: list[CommentModel], task_id: str) -> str:
    """Format task comments as markdown, in the order ClickUp returned them."""
    if not comments:
        return f"# Comments on {task_id}\n\nNo comments."

    lines = [f"# Comments on {task_id}", f"*{len(comments)} comment(s)*", ""]
    for comment in comments:
        author = comment.user.username if comment.user and comment.user.username else "unknown"
        when = _format_timestamp(comment.date) or "?"
        flags = []
        if comment.resolved:
            flags.append("resolved")
        if comment.assignee:
            flags.append(f"assigned to {comment.assignee.username or comment.assignee.id}")
        suffix = f" ({', '.join(flags)})" if flags else ""
        lines.append(f"- **{author}** [{when}]{suffix}: {comment.comment_text}")

    return "\n".join(lines)


def _describe_dependency(dep: DependencyRecord, task_id: str) -> str:
    if dep.task_id == task_id:
        return f"waiting on {dep.depends_on}"
    if dep.depends_on == task_id:
        return f"blocking {dep.task_id}"
    return f"{dep.task_id} waits on {dep.depends_on}"


def _format_dependencies_markdown(summary: dict[str, Any]) -> str:
    """Format the dependency summary of a task."""
    task_id = str(summary["task_id"])
    lines = [f"# Dependencies of [{task_id}] {summary.get('task_name') or ''}".rstrip()]

    records = [DependencyRecord.model_validate(d) for d in summary["dependencies"]]
    waiting = [r for r in records if r.task_id == task_id]
    blocking = [r for r in records if r.depends_on == task_id]

    lines.append("")
    lines.append("**Waiting on:** " + (", ".join(r.depends_on for r in waiting) or "none"))
    lines.append("**Blocking:** " + (", ".join(r.task_id for r in blocking) or "none"))

    # a link lists this task as task_id and the other one as link_id
    linked = [
        str(link.get("link_id") if str(link.get("task_id")) == task_id else link.get("task_id"))
        for link in summary["linked_tasks"]
    ]
    lines.append("**Linked:** " + (", ".join(linked) or "none"))

    return "\n".join(lines)


def _format_workspace_markdown(structure: WorkspaceStructure) -> str:
    """Render the workspace hierarchy as an indented tree."""
    if not structure.teams:
        return "# Workspace\n\nNo teams available for this token."

    lines = ["# Workspace"]
    for team in structure.teams:
        lines.append("")
        lines.append(f"## {team.name} (team {team.id})")
        for space in team.spaces:
            lines.append(f"- Space: {space.name} ({space.id})")
            for folder in space.folders:
                lines.append(f"  - Folder: {folder.name} ({folder.id})")
                for lst in folder.lists:
                    lines.append(f"    - List: {lst.name} ({lst.id})")
            for lst in space.lists:
                lines.append(f"  - List: {lst.name} ({lst.id})")

    return "\n".join(lines)
