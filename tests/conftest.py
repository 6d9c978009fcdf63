"""Pytest configuration and fixtures for clickup-mcp tests."""

from contextlib import ExitStack
from unittest.mock import patch

import httpx
import pytest

from clickup_mcp.client import ClickUpClient

API_PREFIX = "/api/v2"

TOOL_MODULES = [
    "clickup_mcp.tools.tasks",
    "clickup_mcp.tools.comments",
    "clickup_mcp.tools.dependencies",
    "clickup_mcp.tools.workspace",
]


class FakeClickUp:
    """Answers ClickUp requests from a (method, path) route table and records them."""

    def __init__(self):
        self.routes = {}
        self.requests: list[httpx.Request] = []

    def add(self, method, path, json=None, status_code=200, error=None):
        """Register a response (or a transport error to raise) for a route."""
        self.routes[(method, path)] = (status_code, {} if json is None else json, error)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path.removeprefix(API_PREFIX)
        route = self.routes.get((request.method, path))
        if route is None:
            return httpx.Response(404, json={"err": f"No route for {request.method} {path}"})
        status_code, body, error = route
        if error is not None:
            raise error
        return httpx.Response(status_code, json=body)

    def client(self) -> ClickUpClient:
        return ClickUpClient("pk_test_token", transport=httpx.MockTransport(self.handler))

    def paths(self) -> list[tuple[str, str]]:
        return [(r.method, r.url.path.removeprefix(API_PREFIX)) for r in self.requests]


@pytest.fixture
def fake_clickup():
    """Route every tool's ClickUp client to an in-memory fake."""
    fake = FakeClickUp()
    with ExitStack() as stack:
        for module in TOOL_MODULES:
            stack.enter_context(patch(f"{module}.create_client", side_effect=fake.client))
        yield fake


@pytest.fixture
def api_token(monkeypatch):
    """Provide a ClickUp token through the environment."""
    monkeypatch.setenv("CLICKUP_API_TOKEN", "pk_env_token")
    return "pk_env_token"


@pytest.fixture
def sample_task():
    """A ClickUp task payload as returned by GET /task/{id}."""
    return {
        "id": "86abc123",
        "custom_id": None,
        "name": "Fix login redirect",
        "text_content": "Users land on a blank page after login.",
        "description": "Users land on a blank page after login.",
        "status": {"status": "in progress", "color": "#4194f6", "type": "custom", "orderindex": 1},
        "priority": {"id": "2", "priority": "high", "color": "#ffcc00"},
        "assignees": [{"id": 123, "username": "ana", "email": "ana@example.com"}],
        "tags": [{"name": "bug", "tag_fg": "#fff", "tag_bg": "#f00"}],
        "due_date": "1767225600000",
        "start_date": None,
        "parent": None,
        "dependencies": [
            {"task_id": "86abc123", "depends_on": "86def456", "type": 1, "userid": "123"},
            {"task_id": "86ghi789", "depends_on": "86abc123", "type": 1, "userid": "123"},
        ],
        "linked_tasks": [{"task_id": "86abc123", "link_id": "86zzz000", "userid": "123"}],
        "team_id": "9001",
        "url": "https://app.clickup.com/t/86abc123",
        "list": {"id": "901234567", "name": "Backlog", "access": True},
        "folder": {"id": "90150", "name": "Web", "hidden": False, "access": True},
        "space": {"id": "90160"},
    }
