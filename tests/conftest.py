"""Conftest: serve canned Holiday and Event API responses from a local server.

Each test registers the routes it needs on a ``StubApi`` and starts it via
pytest-aiohttp's ``aiohttp_server`` fixture. Requests that reach the server
are recorded so tests can assert on query strings and headers.
"""

from __future__ import annotations

import asyncio
import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Awaitable, Callable, Mapping

import pytest
from aiohttp import web

FIXTURES = Path(__file__).parent / "fixtures"


def load_fixture(name: str) -> str:
    """Return the raw text of a JSON fixture file."""
    return (FIXTURES / name).read_text(encoding="utf-8")


@dataclass
class RecordedRequest:
    """A request as seen by the stub server."""

    path: str
    query: dict[str, str]
    headers: Mapping[str, str]


class StubApi:
    """Minimal stand-in for the remote API."""

    def __init__(self, server_factory: Callable[[web.Application], Awaitable[Any]]) -> None:
        self._server_factory = server_factory
        self._app = web.Application()
        self.requests: list[RecordedRequest] = []

    def add(
        self,
        path: str,
        *,
        fixture: str | None = None,
        body: str | None = None,
        status: int = 200,
        headers: dict[str, str] | None = None,
        delay: float = 0.0,
    ) -> None:
        """Register a GET route answering with a fixture file or a raw body."""
        text = load_fixture(fixture) if fixture is not None else body

        async def handler(request: web.Request) -> web.Response:
            self.requests.append(
                RecordedRequest(
                    path=request.path,
                    query=dict(request.query),
                    headers=request.headers.copy(),
                )
            )
            if delay:
                await asyncio.sleep(delay)
            if text is None:
                return web.Response(status=status, headers=headers)
            return web.Response(
                status=status,
                text=text,
                content_type="application/json",
                headers=headers,
            )

        self._app.router.add_get(path, handler)

    async def start(self) -> str:
        """Start serving and return the base URL."""
        server = await self._server_factory(self._app)
        return str(server.make_url("/"))


@pytest.fixture
def stub_api(aiohttp_server) -> StubApi:
    return StubApi(aiohttp_server)


@pytest.fixture
def fixture_json() -> Callable[[str], dict[str, Any]]:
    return lambda name: json.loads(load_fixture(name))
