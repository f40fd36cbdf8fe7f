"""Unit test conftest with a fake Neo4j driver for API testing."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest
from neo4j.exceptions import ServiceUnavailable

from movie_graph.adapters.neo4j.store import Neo4jMovieStore
from movie_graph.settings import Neo4jSettings, Settings

if TYPE_CHECKING:
    from collections.abc import AsyncIterator, Awaitable, Callable

    from fastapi import FastAPI
    from fastapi.testclient import TestClient


class FakeResult:
    """Async iterable of records, like ``neo4j.AsyncResult``."""

    def __init__(self, records: list[dict[str, Any]]) -> None:
        self._records = records

    async def __aiter__(self) -> AsyncIterator[dict[str, Any]]:
        for record in self._records:
            yield record

    async def consume(self) -> None:
        self._records = []


class FakeSession:
    """Fake Neo4j session that records every query it runs."""

    def __init__(self, driver: FakeDriver) -> None:
        self._driver = driver
        self.calls: list[tuple[str, dict[str, Any]]] = []
        self.close_calls = 0

    async def __aenter__(self) -> FakeSession:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()

    async def run(
        self,
        query: str,
        parameters: dict[str, Any] | None = None,
        **kwargs: Any,
    ) -> FakeResult:
        params = dict(parameters or {})
        self.calls.append((query, params))
        if not self._driver.reachable:
            msg = "Couldn't connect to localhost:7687"
            raise ServiceUnavailable(msg)
        movies = self._driver.graph.get(params.get("director_id"), [])
        return FakeResult([{"m": movie} for movie in movies])

    async def close(self) -> None:
        self.close_calls += 1
        self._driver.events.append("session_close")


class FakeDriver:
    """Fake AsyncDriver that counts sessions opened and closed."""

    def __init__(
        self,
        graph: dict[str, list[dict[str, Any]]] | None = None,
        *,
        reachable: bool = True,
    ) -> None:
        self.graph = graph or {}
        self.reachable = reachable
        self.sessions: list[FakeSession] = []
        self.databases: list[str | None] = []
        # Ordered lifecycle log shared with tests that record response events
        self.events: list[str] = []
        self.closed = False

    def session(self, database: str | None = None) -> FakeSession:
        session = FakeSession(self)
        self.sessions.append(session)
        self.databases.append(database)
        return session

    @property
    def opened(self) -> int:
        return len(self.sessions)

    @property
    def closed_sessions(self) -> int:
        return sum(s.close_calls for s in self.sessions)

    @property
    def queries(self) -> list[tuple[str, dict[str, Any]]]:
        return [call for s in self.sessions for call in s.calls]

    async def close(self) -> None:
        self.closed = True


def build_app(driver: FakeDriver, settings: Settings | None = None) -> FastAPI:
    """Build the API without lifespan, wiring a store over the fake driver."""
    from fastapi import FastAPI
    from fastapi.responses import ORJSONResponse

    from movie_graph.api.middleware import register_middleware
    from movie_graph.api.routes.health import router as health_router
    from movie_graph.api.routes.movies import router as movies_router

    app = FastAPI(default_response_class=ORJSONResponse)
    register_middleware(app)
    app.include_router(movies_router, prefix="/api")
    app.include_router(health_router, prefix="/api")

    app.state.settings = settings or Settings()
    app.state.movie_store = Neo4jMovieStore(Neo4jSettings(), driver=driver)  # type: ignore[arg-type]
    return app



def record_response_start(app: FastAPI, events: list[str]) -> Callable[..., Awaitable[None]]:
    """Wrap an ASGI app so the start of every HTTP response lands in *events*."""

    async def _app(scope: Any, receive: Any, send: Any) -> None:
        async def _send(message: dict[str, Any]) -> None:
            if message["type"] == "http.response.start":
                events.append("response_start")
            await send(message)

        await app(scope, receive, _send)

    return _app


@pytest.fixture()
def fake_driver(sample_graph: dict[str, list[dict[str, Any]]]) -> FakeDriver:
    """Return a reachable fake driver over the sample graph."""
    return FakeDriver(sample_graph)


@pytest.fixture()
def unreachable_driver() -> FakeDriver:
    """Return a fake driver whose every query fails with ServiceUnavailable."""
    return FakeDriver(reachable=False)


@pytest.fixture()
def test_client(fake_driver: FakeDriver) -> TestClient:
    """FastAPI TestClient over the fake driver (no Neo4j needed)."""
    from fastapi.testclient import TestClient as _TestClient

    return _TestClient(build_app(fake_driver))
