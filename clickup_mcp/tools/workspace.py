"""Workspace discovery MCP tool for ClickUp."""

import logging

from mcp.types import ToolAnnotations

from clickup_mcp.client import create_client
from clickup_mcp.enums import ResponseFormat, ToolName
from clickup_mcp.models.inputs import WorkspaceStructureInput
from clickup_mcp.server import mcp
from clickup_mcp.utils.formatters import _format_json, _format_workspace_markdown

logger = logging.getLogger("clickup-mcp.tools")


@mcp.tool(
    name=ToolName.GET_WORKSPACE_STRUCTURE.value,
    annotations=ToolAnnotations(
        title="Get Workspace Structure",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True,
    ),
)
async def clickup_get_workspace_structure(params: WorkspaceStructureInput) -> str:
    """
    Discover the workspace hierarchy: teams, spaces, folders and lists.

    RETURNS HIERARCHICAL STRUCTURE:
    - Teams (workspaces) the token can access
    - Spaces within each team
    - Folders within each space, with their lists
    - Folderless lists directly under each space

    USE THIS TO:
    - Find the list_id for task creation
    - Find team_id/space_id/folder_id/list_id for clickup_search_tasks
    - Show the user available spaces and lists

    BEST PRACTICES:
    - The structure rarely changes; reuse it within a conversation instead of calling again

    Args:
        params: WorkspaceStructureInput containing response_format

    Returns:
        The hierarchy (JSON or markdown tree)
    """
    logger.info("Fetching workspace structure")
    async with create_client() as clickup:
        structure = await clickup.get_workspace_structure()
    logger.info(
        "Workspace structure: %d team(s), %d space(s)",
        len(structure.teams),
        sum(len(team.spaces) for team in structure.teams),
    )

    if params.response_format == ResponseFormat.MARKDOWN:
        return _format_workspace_markdown(structure)
    return _format_json(structure.model_dump())
