"""Shared test fixtures."""

from __future__ import annotations

import json
from typing import Any, Callable
from unittest.mock import MagicMock

import httpx
import pytest
import pytest_asyncio

BASE_URL = "http://analyzer.test:8082"


@pytest.fixture(autouse=True)
def _env_setup(monkeypatch):
    """Set environment variables for tests."""
    monkeypatch.setenv("TOPOLOGY_API_URL", BASE_URL)
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("LOG_FORMAT", "console")
    monkeypatch.delenv("HTTP_TIMEOUT", raising=False)


@pytest.fixture
def settings():
    from topoclient.config import Settings

    return Settings(TOPOLOGY_API_URL=BASE_URL + "/")


@pytest.fixture
def notifier() -> MagicMock:
    mock = MagicMock()
    mock.notify_success = MagicMock()
    mock.notify_error = MagicMock()
    return mock


class RecordingServer:
    """Canned analyzer responses keyed by (method, path); records requests."""

    def __init__(self) -> None:
        self.routes: dict[tuple[str, str], httpx.Response | Callable[[httpx.Request], httpx.Response]] = {}
        self.requests: list[httpx.Request] = []

    def on(self, method: str, path: str, response: Any) -> None:
        self.routes[(method, path)] = response

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(404, text="not found")
        if callable(route):
            return route(request)
        return route

    @property
    def last_json(self) -> Any:
        return json.loads(self.requests[-1].content)


@pytest.fixture
def server() -> RecordingServer:
    return RecordingServer()


@pytest_asyncio.fixture
async def http_client(server):
    async with httpx.AsyncClient(
        base_url=BASE_URL,
        transport=httpx.MockTransport(server.handler),
    ) as client:
        yield client


@pytest.fixture
def api_client(http_client, notifier):
    from topoclient.api.client import TopologyApiClient

    return TopologyApiClient(http_client, notifier)
