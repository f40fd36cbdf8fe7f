"""FastAPI dependency injection helpers.

Extracts shared resources from ``app.state`` so route handlers can
declare them via ``Depends()``, and scopes one database session to
each request.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog
from fastapi import Request  # noqa: TCH002 — runtime: FastAPI dependency injection

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from movie_graph.adapters.neo4j.store import Neo4jMovieStore
    from movie_graph.ports.movie_store import GraphSession
    from movie_graph.settings import Settings

logger = structlog.get_logger(__name__)


def get_settings(request: Request) -> Settings:
    """Return the application settings from app state."""
    return request.app.state.settings  # type: ignore[no-any-return]


def get_movie_store(request: Request) -> Neo4jMovieStore:
    """Return the Neo4j movie store from app state."""
    return request.app.state.movie_store  # type: ignore[no-any-return]


async def get_session(request: Request) -> AsyncIterator[GraphSession]:
    """Yield one session for the request and always close it afterwards.

    The close runs on every exit path: success, query failure, or a
    failure while rendering the response.
    """
    session = get_movie_store(request).session()
    logger.debug("session_opened", path=request.url.path)
    try:
        yield session
    finally:
        await session.close()
        logger.debug("session_closed", path=request.url.path)
