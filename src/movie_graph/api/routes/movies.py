"""Movie endpoints.

GET /api/movies/{director_id} — movies DIRECTED_BY the given director.
"""

from __future__ import annotations

from typing import Annotated

import structlog
from fastapi import APIRouter, Depends
from fastapi.responses import ORJSONResponse

from movie_graph.adapters.neo4j import queries
from movie_graph.api.dependencies import get_session, get_settings
from movie_graph.api.middleware import query_error_response
from movie_graph.domain.errors import MovieQueryError
from movie_graph.ports.movie_store import GraphSession  # noqa: TCH001 — runtime: Depends()
from movie_graph.settings import Settings  # noqa: TCH001 — runtime: Depends()

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/movies", tags=["movies"])

SessionDep = Annotated[GraphSession, Depends(get_session)]
SettingsDep = Annotated[Settings, Depends(get_settings)]


@router.get("/{director_id}")
async def get_movies_by_director(
    director_id: str,
    session: SessionDep,
    settings: SettingsDep,
) -> ORJSONResponse:
    """Return the property maps of every movie by a director.

    The id is opaque: an unknown id gives an empty list, not a 404.
    A failed query is answered here with a 500, so the session is
    released after the response on both paths.
    """
    try:
        movies = await queries.find_movies_by_director(session, director_id)
    except MovieQueryError as exc:
        return query_error_response(exc, expose_details=settings.expose_error_details)
    return ORJSONResponse(content=movies)
