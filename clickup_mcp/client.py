"""Async HTTP client for the ClickUp REST API v2."""

import asyncio
import logging
from collections.abc import Awaitable, Mapping
from enum import Enum
from typing import Any

import httpx

from clickup_mcp.config import load_settings
from clickup_mcp.errors import ApiError, ClickUpError, ConfigurationError, TransportError
from clickup_mcp.models.dependency import Dependency
from clickup_mcp.models.workspace import FolderNode, ListRef, SpaceNode, TeamNode, WorkspaceStructure

logger = logging.getLogger("clickup-mcp.client")

CLICKUP_API_BASE_URL = "https://api.clickup.com/api/v2"


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def encode_query_params(params: Mapping[str, Any] | None) -> list[tuple[str, str]]:
    """
    Flatten query parameters into ordered key/value pairs.

    Arrays become one pair per element using the bare key, which is what
    ClickUp expects (``assignees=1&assignees=2``, never ``assignees[]=`` or
    ``assignees=1,2``). ``None`` values are dropped.

    Args:
        params: Mapping of parameter names to scalars or lists

    Returns:
        List of (key, value) string pairs in insertion order
    """
    pairs: list[tuple[str, str]] = []
    for key, value in (params or {}).items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            pairs.extend((key, _query_value(item)) for item in value if item is not None)
        else:
            pairs.append((key, _query_value(value)))
    return pairs


def _with_defaults(filters: Mapping[str, Any] | None, **defaults: Any) -> dict[str, Any]:
    query = dict(filters or {})
    for key, default in defaults.items():
        if query.get(key) is None:
            query[key] = default
    return query


async def _gather(*aws: Awaitable[Any]) -> list[Any]:
    """
    Run awaitables concurrently and return their results in argument order.

    The first failure cancels the siblings and waits for them to finish
    before the error is re-raised.
    """
    tasks = [asyncio.ensure_future(aw) for aw in aws]
    try:
        return list(await asyncio.gather(*tasks))
    except BaseException:
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise


def _parse_body(response: httpx.Response) -> Any:
    if not response.content:
        return {}
    try:
        return response.json()
    except ValueError:
        return response.text


class ClickUpClient:
    """
    Thin typed wrapper over the ClickUp REST API.

    Each public method maps to one endpoint, except get_workspace_structure
    which fans out over teams and spaces. Use it as an async context manager
    so the underlying connection pool is closed when the tool call ends.
    """

    def __init__(
        self,
        api_token: str | None,
        base_url: str = CLICKUP_API_BASE_URL,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        if not api_token or not api_token.strip():
            raise ConfigurationError("ClickUp API token is required")
        self._http = httpx.AsyncClient(
            base_url=base_url,
            headers={"Authorization": api_token, "Content-Type": "application/json"},
            timeout=None,
            transport=transport,
        )

    async def __aenter__(self) -> "ClickUpClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    @property
    def is_closed(self) -> bool:
        return self._http.is_closed

    async def aclose(self) -> None:
        await self._http.aclose()

    async def request(
        self,
        method: str,
        path: str,
        body: Any = None,
        query_params: Mapping[str, Any] | None = None,
    ) -> Any:
        """
        Send one request and return the parsed JSON body.

        Args:
            method: HTTP method
            path: Path relative to the API base URL (e.g. "/task/abc")
            body: JSON body, sent only when not None
            query_params: Query parameters, see encode_query_params

        Returns:
            Parsed response body

        Raises:
            ApiError: If ClickUp answers with a non-2xx status
            TransportError: If no response was received or the client is closed
        """
        if self._http.is_closed:
            raise TransportError(f"ClickUp client is closed ({method} {path})")

        params = encode_query_params(query_params)
        logger.debug("%s %s params=%s", method, path, params)

        try:
            response = await self._http.request(method, path, json=body, params=params or None)
        except httpx.TransportError as e:
            logger.warning("Transport failure on %s %s: %s", method, path, e)
            raise TransportError(f"Could not reach ClickUp ({method} {path}): {type(e).__name__}: {e}") from e

        data = _parse_body(response)
        if not response.is_success:
            logger.warning("ClickUp returned %s for %s %s", response.status_code, method, path)
            raise ApiError(response.status_code, response.reason_phrase, data)
        return data

    # ------------------------------------------------------------------
    # Tasks
    # ------------------------------------------------------------------

    async def create_task(self, list_id: str, task: Mapping[str, Any]) -> dict[str, Any]:
        return await self.request("POST", f"/list/{list_id}/task", dict(task))

    async def get_task(self, task_id: str) -> dict[str, Any]:
        return await self.request("GET", f"/task/{task_id}")

    async def update_task(self, task_id: str, updates: Mapping[str, Any]) -> dict[str, Any]:
        return await self.request("PUT", f"/task/{task_id}", dict(updates))

    async def delete_task(self, task_id: str) -> Any:
        return await self.request("DELETE", f"/task/{task_id}")

    async def list_tasks(self, list_id: str, filters: Mapping[str, Any] | None = None) -> dict[str, Any]:
        """Tasks whose home is ``list_id``; one page (max 100) per call."""
        query = _with_defaults(filters, archived=False, page=0, include_closed=False)
        return await self.request("GET", f"/list/{list_id}/task", query_params=query)

    async def search_tasks(self, team_id: str, filters: Mapping[str, Any] | None = None) -> dict[str, Any]:
        """Filtered team-wide task search, narrowed by space_ids/folder_ids/list_ids."""
        query = _with_defaults(filters, page=0, include_closed=False)
        return await self.request("GET", f"/team/{team_id}/task", query_params=query)

    # ------------------------------------------------------------------
    # Comments
    # ------------------------------------------------------------------

    async def create_comment(self, task_id: str, comment: Mapping[str, Any]) -> dict[str, Any]:
        return await self.request("POST", f"/task/{task_id}/comment", dict(comment))

    async def get_comments(self, task_id: str) -> dict[str, Any]:
        return await self.request("GET", f"/task/{task_id}/comment")

    async def update_comment(self, comment_id: str, comment_text: str, resolved: bool | None = None) -> Any:
        body: dict[str, Any] = {"comment_text": comment_text}
        if resolved is not None:
            body["resolved"] = resolved
        return await self.request("PUT", f"/comment/{comment_id}", body)

    async def delete_comment(self, comment_id: str) -> Any:
        return await self.request("DELETE", f"/comment/{comment_id}")

    # ------------------------------------------------------------------
    # Dependencies
    # ------------------------------------------------------------------

    async def add_dependency(self, task_id: str, dependency: Dependency) -> Any:
        return await self.request("POST", f"/task/{task_id}/dependency", dependency.to_request_fields())

    async def delete_dependency(self, task_id: str, dependency: Dependency) -> Any:
        return await self.request(
            "DELETE", f"/task/{task_id}/dependency", query_params=dependency.to_request_fields()
        )

    # ------------------------------------------------------------------
    # Workspace hierarchy
    # ------------------------------------------------------------------

    async def get_authorized_teams(self) -> dict[str, Any]:
        return await self.request("GET", "/team")

    async def get_spaces(self, team_id: str) -> dict[str, Any]:
        return await self.request("GET", f"/team/{team_id}/space")

    async def get_folders(self, space_id: str, archived: bool = False) -> dict[str, Any]:
        """
        Folders of a space, each embedding its lists.

        Spaces with the folder feature disabled answer with an error; any
        ClickUp or transport failure here is reported as "no folders".
        """
        try:
            return await self.request("GET", f"/space/{space_id}/folder", query_params={"archived": archived})
        except ClickUpError as e:
            logger.info("No folders for space %s: %s", space_id, e)
            return {"folders": []}

    async def get_lists(self, space_id: str) -> dict[str, Any]:
        return await self.request("GET", f"/space/{space_id}/list")

    async def get_workspace_structure(self) -> WorkspaceStructure:
        """
        Build the team -> space -> folder -> list tree.

        Teams are expanded concurrently, and so are the spaces of each team.
        Results keep the order ClickUp listed them in. If any propagating
        fetch fails, the outstanding ones are cancelled.
        """
        teams = (await self.get_authorized_teams()).get("teams", [])
        team_nodes = await _gather(*(self._build_team(team) for team in teams))
        return WorkspaceStructure(teams=team_nodes)

    async def _build_team(self, team: dict[str, Any]) -> TeamNode:
        spaces = (await self.get_spaces(team["id"])).get("spaces", [])
        space_nodes = await _gather(*(self._build_space(space) for space in spaces))
        return TeamNode.model_validate({**team, "spaces": space_nodes})

    async def _build_space(self, space: dict[str, Any]) -> SpaceNode:
        folders_response, lists_response = await _gather(
            self.get_folders(space["id"]),
            self.get_lists(space["id"]),
        )

        folders = [
            FolderNode(
                id=folder["id"],
                name=folder.get("name", ""),
                lists=[ListRef(id=lst["id"], name=lst.get("name", "")) for lst in folder.get("lists") or []],
            )
            for folder in folders_response.get("folders", [])
        ]

        # ListRef normalizes ids, so numeric and string ids compare equal
        in_folders = {lst.id for folder in folders for lst in folder.lists}
        space_lists = [ListRef.model_validate(lst) for lst in lists_response.get("lists", [])]
        folderless = [lst for lst in space_lists if lst.id not in in_folders]

        return SpaceNode.model_validate({**space, "folders": folders, "lists": folderless})


def create_client(transport: httpx.AsyncBaseTransport | None = None) -> ClickUpClient:
    """
    Create a client from the environment.

    Raises:
        ConfigurationError: If CLICKUP_API_TOKEN is not set
    """
    settings = load_settings()
    return ClickUpClient(settings.api_token, transport=transport)
