"""Tests for the ClickUp HTTP client and domain operations."""

import asyncio
import json

import httpx
import pytest

from clickup_mcp import (
    ApiError,
    Blocking,
    ClickUpClient,
    ConfigurationError,
    TransportError,
    WaitingOn,
    create_client,
    encode_query_params,
    load_settings,
)
from conftest import FakeClickUp

# ============================================================================
# Query Parameter Encoding
# ============================================================================


class TestEncodeQueryParams:
    """Tests for encode_query_params."""

    def test_array_expands_to_repeated_keys(self):
        """Each element becomes its own pair, in order, without brackets."""
        assert encode_query_params({"assignees": [123, 456]}) == [("assignees", "123"), ("assignees", "456")]

    def test_scalars_and_none(self):
        """Scalars are kept once and None values are dropped."""
        pairs = encode_query_params({"page": 0, "order_by": None, "query": "bug"})
        assert pairs == [("page", "0"), ("query", "bug")]

    def test_booleans_are_lowercase(self):
        """Booleans render the way ClickUp expects."""
        assert encode_query_params({"archived": False, "subtasks": True}) == [
            ("archived", "false"),
            ("subtasks", "true"),
        ]

    def test_empty_array_adds_nothing(self):
        """An empty array contributes no pairs."""
        assert encode_query_params({"tags": []}) == []

    def test_none_mapping(self):
        """No parameters at all."""
        assert encode_query_params(None) == []


# ============================================================================
# Client Construction and Configuration
# ============================================================================


class TestClientConfiguration:
    """Tests for token handling."""

    @pytest.mark.parametrize("token", [None, "", "   "])
    def test_missing_token_fails_fast(self, token):
        """An empty token is rejected at construction."""
        with pytest.raises(ConfigurationError):
            ClickUpClient(token)

    def test_load_settings_reads_environment(self):
        """The token comes from CLICKUP_API_TOKEN."""
        settings = load_settings({"CLICKUP_API_TOKEN": " pk_123 "})
        assert settings.api_token == "pk_123"

    def test_load_settings_missing_token(self):
        """A missing token raises ConfigurationError."""
        with pytest.raises(ConfigurationError) as exc_info:
            load_settings({})
        assert "CLICKUP_API_TOKEN" in str(exc_info.value)

    def test_create_client_without_env(self, monkeypatch):
        """create_client refuses to build a client without a token."""
        monkeypatch.delenv("CLICKUP_API_TOKEN", raising=False)
        with pytest.raises(ConfigurationError):
            create_client()

    def test_create_client_with_env(self, api_token):
        """create_client uses the environment token."""
        client = create_client()
        assert isinstance(client, ClickUpClient)


# ============================================================================
# Request Behavior
# ============================================================================


class TestRequest:
    """Tests for ClickUpClient.request."""

    @pytest.mark.asyncio
    async def test_headers_and_base_url(self):
        """Requests carry the raw token and target the v2 base URL."""
        fake = FakeClickUp()
        fake.add("GET", "/task/abc", json={"id": "abc"})
        async with fake.client() as clickup:
            result = await clickup.request("GET", "/task/abc")

        assert result == {"id": "abc"}
        request = fake.requests[0]
        assert str(request.url) == "https://api.clickup.com/api/v2/task/abc"
        assert request.headers["Authorization"] == "pk_test_token"
        assert request.headers["Content-Type"] == "application/json"

    @pytest.mark.asyncio
    async def test_array_query_string(self):
        """Array parameters appear as repeated keys in the query string."""
        fake = FakeClickUp()
        fake.add("GET", "/list/1/task", json={"tasks": []})
        async with fake.client() as clickup:
            await clickup.request("GET", "/list/1/task", query_params={"assignees": [123, 456]})

        query = fake.requests[0].url.query.decode()
        assert query == "assignees=123&assignees=456"
        assert "[]" not in query and "%5B" not in query

    @pytest.mark.asyncio
    async def test_body_only_when_provided(self):
        """GET sends no body; POST sends the JSON body."""
        fake = FakeClickUp()
        fake.add("GET", "/team", json={"teams": []})
        fake.add("POST", "/list/1/task", json={"id": "t1"})
        async with fake.client() as clickup:
            await clickup.request("GET", "/team")
            await clickup.request("POST", "/list/1/task", {"name": "New"})

        assert fake.requests[0].content == b""
        assert json.loads(fake.requests[1].content) == {"name": "New"}

    @pytest.mark.asyncio
    async def test_non_success_raises_api_error(self):
        """A 404 surfaces status and body verbatim."""
        fake = FakeClickUp()
        fake.add("GET", "/task/missing", json={"err": "Task not found"}, status_code=404)
        async with fake.client() as clickup:
            with pytest.raises(ApiError) as exc_info:
                await clickup.get_task("missing")

        error = exc_info.value
        assert error.status_code == 404
        assert error.status_text == "Not Found"
        assert error.body == {"err": "Task not found"}
        assert "404" in str(error)
        assert '"err": "Task not found"' in str(error)

    @pytest.mark.asyncio
    async def test_non_json_error_body_kept_as_text(self):
        """A plain-text error body is passed through as text."""

        def handler(request):
            return httpx.Response(502, text="Bad Gateway from upstream")

        async with ClickUpClient("pk", transport=httpx.MockTransport(handler)) as clickup:
            with pytest.raises(ApiError) as exc_info:
                await clickup.get_task("abc")

        assert exc_info.value.body == "Bad Gateway from upstream"
        assert "Bad Gateway from upstream" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_empty_success_body(self):
        """An empty 2xx body parses as an empty object."""

        def handler(request):
            return httpx.Response(204)

        async with ClickUpClient("pk", transport=httpx.MockTransport(handler)) as clickup:
            assert await clickup.delete_task("abc") == {}

    @pytest.mark.asyncio
    async def test_transport_failure(self):
        """Connection failures raise TransportError, not ApiError."""
        fake = FakeClickUp()
        fake.add("GET", "/task/abc", error=httpx.ConnectError("connection refused"))
        async with fake.client() as clickup:
            with pytest.raises(TransportError) as exc_info:
                await clickup.get_task("abc")

        assert not isinstance(exc_info.value, ApiError)
        assert "ConnectError" in str(exc_info.value)


# ============================================================================
# Domain Operations
# ============================================================================


class TestTaskOperations:
    """Tests for task endpoints and defaults."""

    @pytest.mark.asyncio
    async def test_list_tasks_defaults(self):
        """Unset archived/page/include_closed default to false/0/false."""
        fake = FakeClickUp()
        fake.add("GET", "/list/901/task", json={"tasks": [], "last_page": True})
        async with fake.client() as clickup:
            await clickup.list_tasks("901", {"statuses": ["open", "review"]})

        params = fake.requests[0].url.params
        assert params.get_list("statuses") == ["open", "review"]
        assert params["archived"] == "false"
        assert params["page"] == "0"
        assert params["include_closed"] == "false"

    @pytest.mark.asyncio
    async def test_list_tasks_explicit_values_win(self):
        """Caller-supplied values are not overwritten by defaults."""
        fake = FakeClickUp()
        fake.add("GET", "/list/901/task", json={"tasks": []})
        async with fake.client() as clickup:
            await clickup.list_tasks("901", {"page": 3, "archived": True})

        params = fake.requests[0].url.params
        assert params["page"] == "3"
        assert params["archived"] == "true"

    @pytest.mark.asyncio
    async def test_search_tasks_defaults(self):
        """Search defaults page and include_closed."""
        fake = FakeClickUp()
        fake.add("GET", "/team/9001/task", json={"tasks": []})
        async with fake.client() as clickup:
            await clickup.search_tasks("9001", {"query": "bug", "list_ids": ["901234567"]})

        params = fake.requests[0].url.params
        assert params["query"] == "bug"
        assert params.get_list("list_ids") == ["901234567"]
        assert params["page"] == "0"
        assert params["include_closed"] == "false"

    @pytest.mark.asyncio
    async def test_update_comment_omits_unset_resolved(self):
        """resolved is only sent when given."""
        fake = FakeClickUp()
        fake.add("PUT", "/comment/55", json={})
        async with fake.client() as clickup:
            await clickup.update_comment("55", "edited")
            await clickup.update_comment("55", "done", resolved=True)

        assert json.loads(fake.requests[0].content) == {"comment_text": "edited"}
        assert json.loads(fake.requests[1].content) == {"comment_text": "done", "resolved": True}


class TestDependencyOperations:
    """Tests for translating dependency direction at the HTTP boundary."""

    @pytest.mark.asyncio
    async def test_add_waiting_on(self):
        """WaitingOn becomes depends_on in the body."""
        fake = FakeClickUp()
        fake.add("POST", "/task/A/dependency", json={})
        async with fake.client() as clickup:
            await clickup.add_dependency("A", WaitingOn(task_id="B"))

        assert json.loads(fake.requests[0].content) == {"depends_on": "B"}

    @pytest.mark.asyncio
    async def test_add_blocking(self):
        """Blocking becomes dependency_of in the body."""
        fake = FakeClickUp()
        fake.add("POST", "/task/A/dependency", json={})
        async with fake.client() as clickup:
            await clickup.add_dependency("A", Blocking(task_id="B"))

        assert json.loads(fake.requests[0].content) == {"dependency_of": "B"}

    @pytest.mark.asyncio
    async def test_delete_uses_query_params(self):
        """Removal sends the direction as a query parameter."""
        fake = FakeClickUp()
        fake.add("DELETE", "/task/C/dependency", json={})
        async with fake.client() as clickup:
            await clickup.delete_dependency("C", Blocking(task_id="D"))

        request = fake.requests[0]
        assert request.url.query.decode() == "dependency_of=D"
        assert request.content == b""


# ============================================================================
# Workspace Structure
# ============================================================================


def _workspace_fake(delays=None):
    """Two teams, each with one space holding folder F (list L1) and folderless list L2."""
    delays = delays or {}
    routes = {
        "/team": {"teams": [{"id": "T1", "name": "Team 1"}, {"id": "T2", "name": "Team 2"}]},
        "/space/S1/folder": {"folders": [{"id": "F1", "name": "F", "lists": [{"id": "L1", "name": "L1"}]}]},
        "/space/S2/folder": {"folders": [{"id": "F2", "name": "F", "lists": [{"id": 201, "name": "L1"}]}]},
        "/space/S1/list": {"lists": [{"id": "L1", "name": "L1"}, {"id": "L2", "name": "L2", "task_count": 4}]},
        "/space/S2/list": {"lists": [{"id": "201", "name": "L1"}, {"id": "202", "name": "L2"}]},
        "/team/T1/space": {"spaces": [{"id": "S1", "name": "S", "private": False}]},
        "/team/T2/space": {"spaces": [{"id": "S2", "name": "S", "private": False}]},
    }
    requests = []

    async def handler(request):
        path = request.url.path.removeprefix("/api/v2")
        requests.append(path)
        await asyncio.sleep(delays.get(path, 0))
        return httpx.Response(200, json=routes[path])

    return ClickUpClient("pk", transport=httpx.MockTransport(handler)), requests


class TestWorkspaceStructure:
    """Tests for get_workspace_structure."""

    @pytest.mark.asyncio
    async def test_folder_and_folderless_lists(self):
        """L1 sits under folder F, L2 directly under the space, for both teams."""
        client, _ = _workspace_fake()
        async with client as clickup:
            structure = await clickup.get_workspace_structure()

        assert [team.id for team in structure.teams] == ["T1", "T2"]
        for team in structure.teams:
            (space,) = team.spaces
            (folder,) = space.folders
            assert folder.name == "F"
            assert [lst.name for lst in folder.lists] == ["L1"]
            assert [lst.name for lst in space.lists] == ["L2"]

    @pytest.mark.asyncio
    async def test_order_independent_of_completion(self):
        """A slow first team still comes first in the result."""
        client, _ = _workspace_fake(delays={"/team/T1/space": 0.05, "/space/S1/list": 0.05})
        async with client as clickup:
            structure = await clickup.get_workspace_structure()

        assert [team.name for team in structure.teams] == ["Team 1", "Team 2"]
        assert structure.teams[0].spaces[0].lists[0].id == "L2"
        assert structure.teams[1].spaces[0].lists[0].id == "202"

    @pytest.mark.asyncio
    async def test_numeric_and_string_ids_compare_equal(self):
        """A folder list id given as a number still removes its string twin."""
        client, _ = _workspace_fake()
        async with client as clickup:
            structure = await clickup.get_workspace_structure()

        space = structure.teams[1].spaces[0]
        assert space.folders[0].lists[0].id == "201"
        assert [lst.id for lst in space.lists] == ["202"]

    @pytest.mark.asyncio
    async def test_keeps_team_and_space_fields(self):
        """Extra team/space fields survive; folder lists are reduced to id/name."""
        client, _ = _workspace_fake()
        async with client as clickup:
            data = (await clickup.get_workspace_structure()).model_dump()

        space = data["teams"][0]["spaces"][0]
        assert space["private"] is False
        assert space["lists"][0]["task_count"] == 4
        assert space["folders"][0]["lists"][0] == {"id": "L1", "name": "L1"}

    @pytest.mark.asyncio
    async def test_folder_failure_means_no_folders(self):
        """A failing folder fetch is absorbed; every space list is folderless."""
        fake = FakeClickUp()
        fake.add("GET", "/space/S1/folder", json={"err": "Folders disabled"}, status_code=400)
        fake.add("GET", "/space/S1/list", json={"lists": [{"id": "L1", "name": "L1"}]})
        async with fake.client() as clickup:
            assert await clickup.get_folders("S1") == {"folders": []}

        fake.add("GET", "/team", json={"teams": [{"id": "T1", "name": "Team"}]})
        fake.add("GET", "/team/T1/space", json={"spaces": [{"id": "S1", "name": "S"}]})
        async with fake.client() as clickup:
            structure = await clickup.get_workspace_structure()

        space = structure.teams[0].spaces[0]
        assert space.folders == []
        assert [lst.id for lst in space.lists] == ["L1"]

    @pytest.mark.asyncio
    async def test_folder_transport_failure_absorbed(self):
        """Transport failures on the folder fetch are absorbed too."""
        fake = FakeClickUp()
        fake.add("GET", "/space/S1/folder", error=httpx.ReadError("reset"))
        async with fake.client() as clickup:
            assert await clickup.get_folders("S1") == {"folders": []}

    @pytest.mark.asyncio
    async def test_list_failure_propagates(self):
        """A failing list fetch is not absorbed."""
        fake = FakeClickUp()
        fake.add("GET", "/team", json={"teams": [{"id": "T1", "name": "Team"}]})
        fake.add("GET", "/team/T1/space", json={"spaces": [{"id": "S1", "name": "S"}]})
        fake.add("GET", "/space/S1/folder", json={"folders": []})
        fake.add("GET", "/space/S1/list", json={"err": "Oops"}, status_code=500)
        async with fake.client() as clickup:
            with pytest.raises(ApiError) as exc_info:
                await clickup.get_workspace_structure()

        assert exc_info.value.status_code == 500

    @pytest.mark.asyncio
    async def test_list_failure_cancels_outstanding_fetches(self, monkeypatch):
        """After a list fetch fails, no further request is sent and every http client is closed."""
        created = []
        original_init = httpx.AsyncClient.__init__

        def tracking_init(self, *args, **kwargs):
            original_init(self, *args, **kwargs)
            created.append(self)

        monkeypatch.setattr(httpx.AsyncClient, "__init__", tracking_init)

        routes = {
            "/team": (200, {"teams": [{"id": "T1", "name": "Team 1"}, {"id": "T2", "name": "Team 2"}]}),
            "/team/T1/space": (200, {"spaces": [{"id": "S1", "name": "S"}]}),
            "/team/T2/space": (200, {"spaces": [{"id": "S2", "name": "S"}]}),
            "/space/S1/folder": (200, {"folders": []}),
            "/space/S1/list": (500, {"err": "Oops"}),
            "/space/S2/folder": (200, {"folders": []}),
            "/space/S2/list": (200, {"lists": []}),
        }
        requests = []

        async def handler(request):
            path = request.url.path.removeprefix("/api/v2")
            requests.append(path)
            if path == "/team/T2/space":
                await asyncio.sleep(0.05)
            status_code, body = routes[path]
            return httpx.Response(status_code, json=body)

        async with ClickUpClient("pk", transport=httpx.MockTransport(handler)) as clickup:
            with pytest.raises(ApiError):
                await clickup.get_workspace_structure()
            sent_before_error = list(requests)

        await asyncio.sleep(0.2)

        assert requests == sent_before_error
        assert "/space/S2/folder" not in requests
        assert "/space/S2/list" not in requests
        assert len(created) == 1
        assert all(client.is_closed for client in created)
        assert clickup.is_closed

    @pytest.mark.asyncio
    async def test_request_after_close_raises(self):
        """A closed client refuses to send instead of opening a new connection pool."""
        fake = FakeClickUp()
        fake.add("GET", "/team", json={"teams": []})
        async with fake.client() as clickup:
            pass

        with pytest.raises(TransportError):
            await clickup.get_authorized_teams()
        assert fake.requests == []

    @pytest.mark.asyncio
    async def test_folder_request_excludes_archived(self):
        """Folders are requested with archived=false."""
        fake = FakeClickUp()
        fake.add("GET", "/space/S1/folder", json={"folders": []})
        async with fake.client() as clickup:
            await clickup.get_folders("S1")

        assert fake.requests[0].url.params["archived"] == "false"
