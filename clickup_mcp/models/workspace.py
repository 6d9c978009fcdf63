"""Workspace hierarchy models: team -> space -> folder -> list."""

from pydantic import BaseModel, ConfigDict, Field

from clickup_mcp.models.task import ClickUpId


class ListRef(BaseModel):
    """A list, either inside a folder or directly in a space."""

    model_config = ConfigDict(extra="allow")

    id: ClickUpId
    name: str = ""


class FolderNode(BaseModel):
    """A folder with the lists embedded in the folder response."""

    id: ClickUpId
    name: str = ""
    lists: list[ListRef] = Field(default_factory=list)


class SpaceNode(BaseModel):
    """A space with its folders and its folderless lists."""

    model_config = ConfigDict(extra="allow")

    id: ClickUpId
    name: str = ""
    folders: list[FolderNode] = Field(default_factory=list)
    lists: list[ListRef] = Field(default_factory=list)


class TeamNode(BaseModel):
    """A team (workspace) with its spaces."""

    model_config = ConfigDict(extra="allow")

    id: ClickUpId
    name: str = ""
    spaces: list[SpaceNode] = Field(default_factory=list)


class WorkspaceStructure(BaseModel):
    """Every team the token can see, fully expanded."""

    teams: list[TeamNode] = Field(default_factory=list)
