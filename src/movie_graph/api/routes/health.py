"""Health check endpoint.

GET /api/health — reports whether Neo4j is reachable.
"""

from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, Depends

from movie_graph import __version__
from movie_graph.adapters.neo4j.store import Neo4jMovieStore  # noqa: TCH001 — runtime: Depends()
from movie_graph.api.dependencies import get_movie_store

router = APIRouter(tags=["health"])

MovieStoreDep = Annotated[Neo4jMovieStore, Depends(get_movie_store)]


@router.get("/health")
async def health_check(movie_store: MovieStoreDep) -> dict[str, Any]:
    """Service health check. Always 200; the body carries the verdict."""
    neo4j_ok = await movie_store.ping()
    return {
        "status": "healthy" if neo4j_ok else "unhealthy",
        "neo4j": neo4j_ok,
        "version": __version__,
    }
