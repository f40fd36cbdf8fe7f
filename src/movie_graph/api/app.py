"""FastAPI application factory.

Creates and configures the movie graph API with lifespan management
for the process-wide Neo4j driver.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

import structlog
from fastapi import FastAPI
from fastapi.responses import ORJSONResponse

from movie_graph import __version__
from movie_graph.adapters.neo4j.store import Neo4jMovieStore
from movie_graph.api.middleware import register_middleware
from movie_graph.api.routes.health import router as health_router
from movie_graph.api.routes.movies import router as movies_router
from movie_graph.settings import Settings

if TYPE_CHECKING:
    from collections.abc import AsyncIterator, Callable
    from contextlib import AbstractAsyncContextManager

    from movie_graph.ports.movie_store import MovieStore

logger = structlog.get_logger(__name__)


def _build_lifespan(
    settings: Settings,
    movie_store: MovieStore | None,
) -> Callable[[FastAPI], AbstractAsyncContextManager[None]]:
    """Bind settings and an optional injected store into a lifespan."""

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        # -- Startup: one driver per process, attached to app state --------
        store = movie_store if movie_store is not None else Neo4jMovieStore(settings.neo4j)

        app.state.settings = settings
        app.state.movie_store = store

        logger.info("app_started", neo4j_uri=settings.neo4j.uri)

        yield

        # -- Shutdown: release connections ---------------------------------
        await store.close()
        logger.info("app_stopped")

    return lifespan


def create_app(
    settings: Settings | None = None,
    movie_store: MovieStore | None = None,
) -> FastAPI:
    """Build and return the configured FastAPI application."""
    settings = settings or Settings()
    app = FastAPI(
        title=settings.app_name,
        description="Movies by director, served from a Neo4j graph",
        version=__version__,
        debug=settings.debug,
        default_response_class=ORJSONResponse,
        lifespan=_build_lifespan(settings, movie_store),
    )

    register_middleware(app)

    app.include_router(movies_router, prefix="/api")
    app.include_router(health_router, prefix="/api")

    return app
