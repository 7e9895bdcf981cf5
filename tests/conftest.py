import json

import httpx
import pytest

from clockify_mcp_server.api.client import ClockifyApiClient
from clockify_mcp_server.clockify_mcp_server import create_mcp_server
from clockify_mcp_server.config import Settings

API_PREFIX = "/api/v1"


class FakeClockify:
    """Records every request and answers from a (method, path) route table."""

    def __init__(self):
        self.routes = {}
        self.requests = []

    def add(self, method, path, status=200, json=None, text=None):
        self.routes[(method, API_PREFIX + path)] = (status, json, text)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(404, text=f"no fake route for {request.method} {request.url.path}")
        status, body, text = route
        if body is not None:
            return httpx.Response(status, json=body)
        return httpx.Response(status, text=text or "")

    def paths(self):
        return [(r.method, r.url.path[len(API_PREFIX):]) for r in self.requests]

    def body(self, index=-1):
        return json.loads(self.requests[index].content)

    @property
    def transport(self):
        return httpx.MockTransport(self.handler)


@pytest.fixture
def fake():
    return FakeClockify()


@pytest.fixture
def api_client(fake):
    return ClockifyApiClient(api_key="test-key", transport=fake.transport)


@pytest.fixture
def settings():
    return Settings(_env_file=None, clockify_api_key="test-key")


@pytest.fixture
def mcp(api_client, settings):
    return create_mcp_server(api_client=api_client, settings=settings)


async def call_tool(mcp, name, arguments=None):
    """Call a tool through FastMCP and return the text of its content block."""
    result = await mcp.call_tool(name, arguments or {})
    # Newer mcp releases return (content, structured_output)
    if isinstance(result, tuple):
        result = result[0]
    return result[0].text


@pytest.fixture
def call(mcp):
    async def _call(name, arguments=None):
        return await call_tool(mcp, name, arguments)

    return _call
