"""
Pytest configuration and shared fixtures for the updown client tests.

Requests go through an httpx.MockTransport that routes by path relative to
the API root, so no test touches the network.
"""
import json
from typing import Any, Callable, Dict, List

import httpx
import pytest
import pytest_asyncio

from updown import Client

BASE_URL = "https://updown.test/api/"
API_PREFIX = "/api/"

Handler = Callable[[httpx.Request], httpx.Response]


def json_response(status: int, body: Any) -> httpx.Response:
    """Build a JSON response from a string or a JSON-able value."""
    if not isinstance(body, str):
        body = json.dumps(body)
    return httpx.Response(
        status,
        content=body.encode(),
        headers={"Content-Type": "application/json"},
    )


def relative_path(request: httpx.Request) -> str:
    """Path below the API root, still percent-encoded and without the query."""
    path = request.url.raw_path.decode().split("?", 1)[0]
    if path.startswith(API_PREFIX):
        path = path[len(API_PREFIX):]
    return path


class StubServer:
    """Fake updown API: routes requests by relative path and records them."""

    def __init__(self):
        self.routes: Dict[str, Handler] = {}
        self.requests: List[httpx.Request] = []

    def route(self, path: str, handler: Handler):
        self.routes[path] = handler

    def reply(self, path: str, status: int, body: Any = ""):
        """Answer every request on path with a fixed JSON response."""
        self.route(path, lambda request: json_response(status, body))

    def calls(self, path: str) -> List[httpx.Request]:
        return [r for r in self.requests if relative_path(r) == path]

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = relative_path(request)
        handler = self.routes.get(path)
        if handler is None:
            return json_response(404, {"error": f"no route for {path}"})
        return handler(request)


@pytest.fixture
def server() -> StubServer:
    """Provide an empty stub server."""
    return StubServer()


@pytest_asyncio.fixture
async def client(server: StubServer):
    """Provide a Client wired to the stub server."""
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(server))
    api = Client("test-api-key", http_client, base_url=BASE_URL)
    yield api
    await http_client.aclose()
