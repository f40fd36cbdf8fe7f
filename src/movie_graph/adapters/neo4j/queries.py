"""Cypher query templates and read helpers for the movie graph.

Every value supplied by a caller travels as a bound parameter so the
query text stays constant across calls.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import structlog
from neo4j.exceptions import DriverError, Neo4jError
from neo4j.spatial import Point
from neo4j.time import Date, DateTime, Duration, Time

from movie_graph.domain.errors import MovieQueryError

if TYPE_CHECKING:
    from movie_graph.ports.movie_store import GraphSession

log = structlog.get_logger(__name__)

# ---------------------------------------------------------------------------
# Cypher Templates
# ---------------------------------------------------------------------------

MOVIES_BY_DIRECTOR = """
MATCH (m:Movie)-[:DIRECTED_BY]->(d:Director {id: $director_id})
RETURN m
""".strip()

PING = "RETURN 1"

# Record key the movie node is bound to in MOVIES_BY_DIRECTOR
MOVIE_KEY = "m"

_TEMPORAL_TYPES = (Date, DateTime, Time, Duration)


# ---------------------------------------------------------------------------
# Projection
# ---------------------------------------------------------------------------


def _to_json_value(value: Any) -> Any:
    """Map driver-only property types onto JSON; pass everything else through.

    Temporals become ISO 8601 strings, points become their SRID plus
    coordinates, byte arrays become lists of ints.
    """
    if isinstance(value, _TEMPORAL_TYPES):
        return value.iso_format()
    if isinstance(value, Point):
        return {"srid": value.srid, "coordinates": list(value)}
    if isinstance(value, (bytes, bytearray)):
        return list(value)
    if isinstance(value, list):
        return [_to_json_value(v) for v in value]
    return value


def project_properties(node: Any) -> dict[str, Any]:
    """Return the property map of a node as a plain dict."""
    return {key: _to_json_value(value) for key, value in dict(node).items()}


# ---------------------------------------------------------------------------
# Reads
# ---------------------------------------------------------------------------


async def find_movies_by_director(
    session: GraphSession,
    director_id: str,
) -> list[dict[str, Any]]:
    """Return the property maps of all movies DIRECTED_BY the given director.

    Order follows the database's return order. An unknown director yields
    an empty list. Any driver or server failure is raised as
    MovieQueryError.
    """
    try:
        result = await session.run(MOVIES_BY_DIRECTOR, {"director_id": director_id})
        records = [record async for record in result]
    except (Neo4jError, DriverError) as exc:
        log.warning(
            "movies_by_director_failed",
            director_id=director_id,
            error_type=type(exc).__name__,
        )
        raise MovieQueryError(director_id, exc) from exc

    movies = [project_properties(record[MOVIE_KEY]) for record in records]
    log.debug("movies_by_director", director_id=director_id, count=len(movies))
    return movies
