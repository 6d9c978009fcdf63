"""Comment MCP tool definitions for ClickUp."""

import logging

from mcp.types import ToolAnnotations

from clickup_mcp.client import create_client
from clickup_mcp.enums import ResponseFormat, ToolName
from clickup_mcp.models.inputs import AddCommentInput, DeleteCommentInput, ListCommentsInput, UpdateCommentInput
from clickup_mcp.server import mcp
from clickup_mcp.utils.formatters import _format_comments_markdown, _format_json
from clickup_mcp.utils.parsers import _parse_comments

logger = logging.getLogger("clickup-mcp.tools")


@mcp.tool(
    name=ToolName.ADD_COMMENT.value,
    annotations=ToolAnnotations(
        title="Add Comment",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=False,
        openWorldHint=True,
    ),
)
async def clickup_add_comment(params: AddCommentInput) -> str:
    """
    Add a comment to a task.

    COMMENT FEATURES:
    - Plain text only (HTML/Markdown is shown literally)
    - Assign the comment to a user to create an action item
    - notify_all notifies every task watcher; use it sparingly

    USE CASES:
    - Progress updates, questions, decisions, meeting notes

    Args:
        params: AddCommentInput containing task_id, comment_text and optional assignee/notify_all

    Returns:
        The created comment as JSON
    """
    comment = params.model_dump(mode="json", exclude_none=True, exclude={"task_id"})
    logger.info("Commenting on task %s", params.task_id)

    async with create_client() as clickup:
        result = await clickup.create_comment(params.task_id, comment)

    return _format_json(result)


@mcp.tool(
    name=ToolName.LIST_COMMENTS.value,
    annotations=ToolAnnotations(
        title="List Comments",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True,
    ),
)
async def clickup_list_comments(params: ListCommentsInput) -> str:
    """
    Retrieve all comments for a task.

    RETURNS:
    - Comment text with author and date
    - Resolved status and assignee, when set

    USE CASES:
    - Review discussion history, find decisions, check for unresolved questions

    Args:
        params: ListCommentsInput containing task_id and response_format

    Returns:
        The task's comments (JSON or markdown based on response_format)
    """
    async with create_client() as clickup:
        response = await clickup.get_comments(params.task_id)

    if params.response_format == ResponseFormat.MARKDOWN:
        return _format_comments_markdown(_parse_comments(response.get("comments", [])), params.task_id)
    return _format_json(response)


@mcp.tool(
    name=ToolName.UPDATE_COMMENT.value,
    annotations=ToolAnnotations(
        title="Update Comment",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True,
    ),
)
async def clickup_update_comment(params: UpdateCommentInput) -> str:
    """
    Replace a comment's text and optionally mark it resolved.

    Comment IDs come from clickup_list_comments.

    Args:
        params: UpdateCommentInput containing comment_id, comment_text and optional resolved

    Returns:
        Confirmation message
    """
    logger.info("Updating comment %s", params.comment_id)

    async with create_client() as clickup:
        await clickup.update_comment(params.comment_id, params.comment_text, params.resolved)

    return f"Comment {params.comment_id} updated successfully."


@mcp.tool(
    name=ToolName.DELETE_COMMENT.value,
    annotations=ToolAnnotations(
        title="Delete Comment",
        readOnlyHint=False,
        destructiveHint=True,
        idempotentHint=True,
        openWorldHint=True,
    ),
)
async def clickup_delete_comment(params: DeleteCommentInput) -> str:
    """
    Delete a comment permanently.

    Args:
        params: DeleteCommentInput containing the comment_id to delete

    Returns:
        Confirmation message
    """
    logger.info("Deleting comment %s", params.comment_id)

    async with create_client() as clickup:
        await clickup.delete_comment(params.comment_id)

    return f"Comment {params.comment_id} has been deleted successfully."
