"""Partial views of ClickUp task and comment payloads."""

from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field


def _normalize_id(value: Any) -> Any:
    """ClickUp returns some identifiers as numbers and others as strings."""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(int(value))
    if isinstance(value, str):
        return value.strip()
    return value


ClickUpId = Annotated[str, BeforeValidator(_normalize_id)]


class UserModel(BaseModel):
    """A ClickUp user as embedded in tasks and comments."""

    model_config = ConfigDict(extra="allow")

    id: ClickUpId | None = None
    username: str | None = None
    email: str | None = None


class StatusModel(BaseModel):
    """Task status (name plus display metadata)."""

    model_config = ConfigDict(extra="allow")

    status: str = ""
    color: str | None = None
    type: str | None = None
    orderindex: int | str | None = None


class PriorityModel(BaseModel):
    """Task priority; ``id`` is the ordinal 1 (urgent) to 4 (low)."""

    model_config = ConfigDict(extra="allow")

    id: ClickUpId | None = None
    priority: str | None = None
    color: str | None = None


class TagModel(BaseModel):
    """A task tag."""

    model_config = ConfigDict(extra="allow")

    name: str


class ContainerRef(BaseModel):
    """Reference to the list, folder or space holding a task."""

    model_config = ConfigDict(extra="allow")

    id: ClickUpId
    name: str | None = None


class DependencyRecord(BaseModel):
    """One dependency edge: ``task_id`` waits on ``depends_on``."""

    model_config = ConfigDict(extra="allow")

    task_id: ClickUpId
    depends_on: ClickUpId
    type: int | None = None


class TaskModel(BaseModel):
    """Model representing a ClickUp task with the attributes the tools read."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: ClickUpId
    custom_id: str | None = None
    name: str = ""
    description: str | None = None
    text_content: str | None = None
    status: StatusModel | None = None
    priority: PriorityModel | None = None
    assignees: list[UserModel] = Field(default_factory=list)
    tags: list[TagModel] = Field(default_factory=list)
    due_date: str | None = None
    start_date: str | None = None
    date_created: str | None = None
    parent: ClickUpId | None = None
    dependencies: list[DependencyRecord] = Field(default_factory=list)
    linked_tasks: list[dict[str, Any]] = Field(default_factory=list)
    team_id: ClickUpId | None = None
    url: str | None = None

    # "list" would shadow the builtin inside the class body
    home_list: ContainerRef | None = Field(default=None, alias="list")
    folder: ContainerRef | None = None
    space: ContainerRef | None = None


class CommentModel(BaseModel):
    """A task comment."""

    model_config = ConfigDict(extra="allow")

    id: ClickUpId
    comment_text: str = ""
    user: UserModel | None = None
    assignee: UserModel | None = None
    resolved: bool = False
    date: str | None = None
