"""Input models for ClickUp MCP tools."""

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from clickup_mcp.enums import ResponseFormat, SearchScope, TaskPriority
from clickup_mcp.models.dependency import Blocking, Dependency, WaitingOn

_RESPONSE_FORMAT_DESCRIPTION = "Output format: 'json' for the raw API payload or 'markdown' for human-readable"

# ============================================================================
# Task Input Models
# ============================================================================


class CreateTaskInput(BaseModel):
    """Input model for creating a task."""

    model_config = ConfigDict(str_strip_whitespace=True)

    list_id: str = Field(..., description="The list ID where the task will be created", min_length=1)
    name: str = Field(..., description="The task name/title", min_length=1)
    description: str | None = Field(
        default=None, description="Plain text description (use markdown_description for formatting)"
    )
    markdown_description: str | None = Field(
        default=None, description="Markdown formatted description (preferred over plain description)"
    )
    assignees: list[int] | None = Field(default=None, description="Array of user IDs to assign to the task")
    tags: list[str] | None = Field(default=None, description="Tags for categorization")
    status: str | None = Field(default=None, description="Task status (must match list statuses)")
    priority: TaskPriority | None = Field(default=None, description="1=Urgent, 2=High, 3=Normal, 4=Low")
    due_date: int | None = Field(default=None, description="Due date as Unix timestamp in milliseconds")
    time_estimate: int | None = Field(default=None, description="Time estimate in milliseconds", ge=0)
    start_date: int | None = Field(default=None, description="Start date as Unix timestamp in milliseconds")
    notify_all: bool | None = Field(default=None, description="Whether to notify all assignees")
    parent: str | None = Field(default=None, description="Parent task ID for subtasks")


class GetTaskInput(BaseModel):
    """Input model for getting a single task."""

    model_config = ConfigDict(str_strip_whitespace=True)

    task_id: str = Field(..., description="The task ID to retrieve", min_length=1)
    response_format: ResponseFormat = Field(default=ResponseFormat.JSON, description=_RESPONSE_FORMAT_DESCRIPTION)


class UpdateTaskInput(BaseModel):
    """Input model for a partial task update.

    Only fields the caller actually sends end up in the update body.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    task_id: str = Field(..., description="The task ID to update", min_length=1)
    name: str | None = Field(default=None, description="New task name")
    description: str | None = Field(default=None, description="New plain text description")
    markdown_description: str | None = Field(default=None, description="New markdown description")
    assignees_add: list[int] | None = Field(default=None, description="User IDs to add as assignees")
    assignees_rem: list[int] | None = Field(default=None, description="User IDs to remove from assignees")
    tags_add: list[str] | None = Field(default=None, description="Tags to add")
    tags_rem: list[str] | None = Field(default=None, description="Tags to remove")
    status: str | None = Field(default=None, description="New status")
    priority: TaskPriority | None = Field(default=None, description="New priority (1-4)")
    due_date: int | None = Field(default=None, description="New due date timestamp")
    start_date: int | None = Field(default=None, description="New start date timestamp")
    time_estimate: int | None = Field(default=None, description="New time estimate in ms", ge=0)
    archived: bool | None = Field(default=None, description="Archive/unarchive the task")


class DeleteTaskInput(BaseModel):
    """Input model for deleting a task."""

    model_config = ConfigDict(str_strip_whitespace=True)

    task_id: str = Field(..., description="The task ID to delete", min_length=1)


class ListTasksInput(BaseModel):
    """Input model for listing the tasks of one list."""

    model_config = ConfigDict(str_strip_whitespace=True)

    list_id: str = Field(..., description="The list ID to get tasks from", min_length=1)
    page: int | None = Field(default=None, description="Page number (0-based)", ge=0)
    archived: bool | None = Field(default=None, description="Include archived tasks")
    include_closed: bool | None = Field(default=None, description="Include closed tasks")
    subtasks: bool | None = Field(default=None, description="Include subtasks")
    order_by: str | None = Field(
        default=None, description="Field to sort by: id, created, updated or due_date"
    )
    reverse: bool | None = Field(default=None, description="Reverse the sort order")
    assignees: list[str] | None = Field(default=None, description="Filter by assignee user IDs")
    statuses: list[str] | None = Field(default=None, description="Filter by status names")
    tags: list[str] | None = Field(default=None, description="Filter by tags")
    due_date_gt: int | None = Field(default=None, description="Tasks due after this timestamp")
    due_date_lt: int | None = Field(default=None, description="Tasks due before this timestamp")
    response_format: ResponseFormat = Field(default=ResponseFormat.JSON, description=_RESPONSE_FORMAT_DESCRIPTION)


class SearchTasksInput(BaseModel):
    """Input model for scoped task search."""

    model_config = ConfigDict(str_strip_whitespace=True)

    query: str = Field(..., description="Search query text", min_length=1)
    scope: SearchScope = Field(..., description="Search scope - narrower is faster")
    team_id: str | None = Field(default=None, description="Team/Workspace ID (required for every scope)")
    space_id: str | None = Field(default=None, description="Space ID (required for space scope)")
    folder_id: str | None = Field(default=None, description="Folder ID (required for folder scope)")
    list_id: str | None = Field(default=None, description="List ID (required for list scope)")
    page: int | None = Field(default=None, description="Page number (0-based)", ge=0)
    include_closed: bool | None = Field(default=None, description="Include closed tasks in results")
    order_by: str | None = Field(
        default=None, description="Field to sort by: id, created, updated or due_date"
    )
    reverse: bool | None = Field(default=None, description="Reverse the sort order")
    assignees: list[str] | None = Field(default=None, description="Filter by assignee user IDs")
    statuses: list[str] | None = Field(default=None, description="Filter by status names")
    tags: list[str] | None = Field(default=None, description="Filter by tags")
    due_date_gt: int | None = Field(default=None, description="Tasks due after this timestamp")
    due_date_lt: int | None = Field(default=None, description="Tasks due before this timestamp")
    response_format: ResponseFormat = Field(default=ResponseFormat.JSON, description=_RESPONSE_FORMAT_DESCRIPTION)


# ============================================================================
# Comment Input Models
# ============================================================================


class AddCommentInput(BaseModel):
    """Input model for commenting on a task."""

    model_config = ConfigDict(str_strip_whitespace=True)

    task_id: str = Field(..., description="The task ID to comment on", min_length=1)
    comment_text: str = Field(..., description="The comment text content", min_length=1)
    assignee: int | None = Field(default=None, description="User ID to assign the comment to")
    notify_all: bool | None = Field(default=None, description="Notify all task watchers")

    @field_validator("comment_text")
    @classmethod
    def validate_comment_text(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Comment text cannot be empty")
        return v


class ListCommentsInput(BaseModel):
    """Input model for listing task comments."""

    model_config = ConfigDict(str_strip_whitespace=True)

    task_id: str = Field(..., description="The task ID to get comments for", min_length=1)
    response_format: ResponseFormat = Field(default=ResponseFormat.JSON, description=_RESPONSE_FORMAT_DESCRIPTION)


class UpdateCommentInput(BaseModel):
    """Input model for editing or resolving a comment."""

    model_config = ConfigDict(str_strip_whitespace=True)

    comment_id: str = Field(..., description="The comment ID to update", min_length=1)
    comment_text: str = Field(..., description="The new comment text", min_length=1)
    resolved: bool | None = Field(default=None, description="Mark the comment resolved or unresolved")


class DeleteCommentInput(BaseModel):
    """Input model for deleting a comment."""

    model_config = ConfigDict(str_strip_whitespace=True)

    comment_id: str = Field(..., description="The comment ID to delete", min_length=1)


# ============================================================================
# Dependency Input Models
# ============================================================================


class _DependencyInput(BaseModel):
    """Shared shape of add/remove dependency inputs.

    Exactly one of ``depends_on`` and ``dependency_of`` must be given.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    task_id: str = Field(..., min_length=1)
    depends_on: str | None = Field(default=None, min_length=1)
    dependency_of: str | None = Field(default=None, min_length=1)

    @model_validator(mode="after")
    def validate_direction(self):
        if self.depends_on is None and self.dependency_of is None:
            raise ValueError("Specify one of depends_on (waiting on) or dependency_of (blocking)")
        if self.depends_on is not None and self.dependency_of is not None:
            raise ValueError("Specify only one of depends_on or dependency_of, not both")
        return self

    @property
    def dependency(self) -> Dependency:
        if self.depends_on is not None:
            return WaitingOn(task_id=self.depends_on)
        return Blocking(task_id=self.dependency_of)


class AddDependencyInput(_DependencyInput):
    """Input model for adding a dependency."""

    task_id: str = Field(..., description="The task ID to add dependency to", min_length=1)
    depends_on: str | None = Field(default=None, description="Task ID that this task waits for", min_length=1)
    dependency_of: str | None = Field(default=None, description="Task ID that this task blocks", min_length=1)


class RemoveDependencyInput(_DependencyInput):
    """Input model for removing a dependency."""

    task_id: str = Field(..., description="The task ID to remove dependency from", min_length=1)
    depends_on: str | None = Field(default=None, description="Remove waiting on this task ID", min_length=1)
    dependency_of: str | None = Field(default=None, description="Remove blocking this task ID", min_length=1)


class ListDependenciesInput(BaseModel):
    """Input model for viewing a task's dependencies."""

    model_config = ConfigDict(str_strip_whitespace=True)

    task_id: str = Field(..., description="The task ID to get dependencies for", min_length=1)
    response_format: ResponseFormat = Field(default=ResponseFormat.JSON, description=_RESPONSE_FORMAT_DESCRIPTION)


# ============================================================================
# Workspace Input Models
# ============================================================================


class WorkspaceStructureInput(BaseModel):
    """Input model for workspace discovery."""

    model_config = ConfigDict(str_strip_whitespace=True)

    response_format: ResponseFormat = Field(default=ResponseFormat.JSON, description=_RESPONSE_FORMAT_DESCRIPTION)
