"""Shared fixtures: a scripted fake Canvas upstream and a clean anonymizer."""

import json
from typing import Any, Callable, Dict, List, Tuple, Union

import httpx
import pytest

from mcp_servers.servers.canvas import app
from mcp_servers.servers.canvas.client import CanvasClient

BASE_URL = "https://canvas.test"
TOKEN = "test-token"

Route = Union[Any, Callable[[httpx.Request], Any]]


def paged(records: List[Any]) -> Callable[[httpx.Request], Any]:
    """Serve ``records`` the way Canvas does, honouring page/per_page."""

    def handler(request: httpx.Request):
        page = int(request.url.params.get("page", "1"))
        per_page = int(request.url.params.get("per_page", "10"))
        start = (page - 1) * per_page
        return records[start:start + per_page]

    return handler


class FakeCanvas:
    """
    Scripted Canvas upstream behind httpx.MockTransport.

    Routes are keyed by (method, path). A route is either a JSON-able value,
    an httpx.Response, or a callable taking the request and returning one of
    those. Unknown routes answer 404 with a Canvas-style ``errors`` body.
    Every request is recorded in ``requests``.
    """

    def __init__(self):
        self.routes: Dict[Tuple[str, str], Route] = {}
        self.requests: List[httpx.Request] = []

    def on(self, method: str, path: str, route: Route):
        self.routes[(method, path)] = route
        return self

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(
                404, json={"errors": [{"message": "The specified resource does not exist."}]}
            )
        result = route(request) if callable(route) else route
        if isinstance(result, httpx.Response):
            return result
        return httpx.Response(200, json=result)

    def client(self, per_page: int = 100) -> CanvasClient:
        return CanvasClient(
            BASE_URL,
            TOKEN,
            per_page=per_page,
            transport=httpx.MockTransport(self.handle),
        )

    # ── Inspection ─────────────────────────────────────────────────────

    def calls(self, method: str, path: str) -> List[httpx.Request]:
        return [r for r in self.requests if r.method == method and r.url.path == path]

    @property
    def writes(self) -> List[httpx.Request]:
        return [r for r in self.requests if r.method != "GET"]

    @staticmethod
    def body(request: httpx.Request) -> Any:
        return json.loads(request.content)


@pytest.fixture(autouse=True)
def fresh_anonymizer():
    """Each test starts with an empty pseudonym mapping."""
    app.anonymizer.reset()
    yield app.anonymizer
    app.anonymizer.reset()


@pytest.fixture
def fake_canvas():
    """Point the tools at a fresh FakeCanvas."""
    fake = FakeCanvas()
    app.set_canvas(fake.client())
    yield fake
    app.set_canvas(None)
