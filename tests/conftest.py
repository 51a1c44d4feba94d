"""
Pytest configuration and shared fixtures.

Provides a stub backend built on httpx.MockTransport that records every
request it receives, an in-memory token store and a ready client.
"""

import json
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

import httpx
import pytest
import pytest_asyncio

from dionysus.shared.clients import DionysusAPIClient
from dionysus.shared.stores import InMemoryTokenStore

BASE_URL = "http://localhost:8000"

Handler = Callable[[httpx.Request], httpx.Response]


class StubBackend:
    """Routes (method, path) to canned responses and records requests"""

    def __init__(self):
        self.routes: Dict[Tuple[str, str], Union[httpx.Response, Handler]] = {}
        self.requests: List[httpx.Request] = []

    def add(
        self,
        method: str,
        path: str,
        status_code: int = 200,
        json_body: Any = None,
        content: Optional[bytes] = None
    ) -> None:
        if json_body is not None:
            content = json.dumps(json_body).encode("utf-8")
        self.routes[(method, path)] = httpx.Response(status_code, content=content or b"")

    def add_handler(self, method: str, path: str, handler: Handler) -> None:
        self.routes[(method, path)] = handler

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(404, json={"detail": "Not found."})
        if callable(route):
            return route(request)
        return httpx.Response(route.status_code, content=route.content)

    @property
    def call_count(self) -> int:
        return len(self.requests)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def backend() -> StubBackend:
    """Stub backend with no routes"""
    return StubBackend()


@pytest.fixture
def token_store() -> InMemoryTokenStore:
    """Empty in-memory token store"""
    return InMemoryTokenStore()


@pytest.fixture
def sample_login_json() -> Dict[str, Any]:
    return {"token": "tok123", "expiry": "2024-01-01T00:00:00.000+00:00"}


@pytest.fixture
def sample_profile_json() -> Dict[str, Any]:
    return {
        "id": 7,
        "username": "dionysus",
        "email": "wine@example.com",
        "first_name": "Dio",
        "last_name": "Nysus",
        "date_joined": "2023-05-01T12:30:00.000+02:00"
    }


@pytest.fixture
def sample_additions_json() -> Dict[str, Any]:
    return {
        "count": 1,
        "next": None,
        "previous": None,
        "results": [
            {"id": 1, "name": "Lemon", "created_at": "2024-02-03T10:11:12.345+00:00"}
        ]
    }


@pytest_asyncio.fixture
async def api_client(backend, token_store):
    """Client wired to the stub backend"""
    async with DionysusAPIClient(
        token_store,
        base_url=BASE_URL,
        transport=httpx.MockTransport(backend)
    ) as client:
        yield client
