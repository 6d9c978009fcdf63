"""Pydantic models for ClickUp MCP."""

from clickup_mcp.models.dependency import Blocking, Dependency, WaitingOn
from clickup_mcp.models.inputs import (
    AddCommentInput,
    AddDependencyInput,
    CreateTaskInput,
    DeleteCommentInput,
    DeleteTaskInput,
    GetTaskInput,
    ListCommentsInput,
    ListDependenciesInput,
    ListTasksInput,
    RemoveDependencyInput,
    SearchTasksInput,
    UpdateCommentInput,
    UpdateTaskInput,
    WorkspaceStructureInput,
)
from clickup_mcp.models.task import (
    CommentModel,
    ContainerRef,
    DependencyRecord,
    PriorityModel,
    StatusModel,
    TagModel,
    TaskModel,
    UserModel,
)
from clickup_mcp.models.workspace import FolderNode, ListRef, SpaceNode, TeamNode, WorkspaceStructure

__all__ = [
    # Task models
    "TaskModel",
    "StatusModel",
    "PriorityModel",
    "UserModel",
    "TagModel",
    "ContainerRef",
    "DependencyRecord",
    "CommentModel",
    # Dependency direction
    "WaitingOn",
    "Blocking",
    "Dependency",
    # Workspace models
    "ListRef",
    "FolderNode",
    "SpaceNode",
    "TeamNode",
    "WorkspaceStructure",
    # Task input models
    "CreateTaskInput",
    "GetTaskInput",
    "UpdateTaskInput",
    "DeleteTaskInput",
    "ListTasksInput",
    "SearchTasksInput",
    # Comment input models
    "AddCommentInput",
    "ListCommentsInput",
    "UpdateCommentInput",
    "DeleteCommentInput",
    # Dependency input models
    "AddDependencyInput",
    "RemoveDependencyInput",
    "ListDependenciesInput",
    # Workspace input models
    "WorkspaceStructureInput",
]
