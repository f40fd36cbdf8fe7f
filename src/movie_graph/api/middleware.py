"""Error responses and per-request timing for the movie API.

Failed movie queries are answered by the route itself through
``query_error_response`` so the response goes out while the request's
session is still open. Anything else that escapes a route falls through
to the catch-all handler registered here.
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING, Any

import structlog
from fastapi.responses import ORJSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

if TYPE_CHECKING:
    from fastapi import FastAPI, Request, Response

    from movie_graph.domain.errors import MovieQueryError

logger = structlog.get_logger(__name__)


# ---------------------------------------------------------------------------
# Error bodies
# ---------------------------------------------------------------------------


def query_error_response(exc: MovieQueryError, *, expose_details: bool) -> ORJSONResponse:
    """Build the 500 for a failed movie query.

    With ``expose_details`` the driver's message and Neo4j code are
    included verbatim; otherwise only the error class is reported.
    """
    logger.error(
        "movie_query_failed",
        director_id=exc.director_id,
        error_type=exc.error_type,
        code=exc.code,
    )
    if expose_details:
        content: dict[str, Any] = {"detail": exc.message, "type": exc.error_type, "code": exc.code}
    else:
        content = {"detail": "Query failed", "type": exc.error_type}
    return ORJSONResponse(status_code=500, content=content)


async def _unhandled_error(
    _request: Request,
    exc: Exception,
) -> ORJSONResponse:
    """Last resort: log with traceback, answer 500 without internals."""
    logger.error("unhandled_exception", exc_info=exc)
    return ORJSONResponse(
        status_code=500,
        content={"detail": "Internal server error", "type": type(exc).__name__},
    )


# ---------------------------------------------------------------------------
# Timing
# ---------------------------------------------------------------------------


class RequestTimingMiddleware(BaseHTTPMiddleware):
    """Stamp each response with X-Request-Time-Ms (wall time spent in the app)."""

    async def dispatch(self, request: Request, call_next: Any) -> Response:
        started = time.monotonic()
        response: Response = await call_next(request)
        response.headers["X-Request-Time-Ms"] = f"{(time.monotonic() - started) * 1000:.1f}"
        return response


def register_middleware(app: FastAPI) -> None:
    """Install the catch-all error handler and the timing middleware."""
    app.add_exception_handler(Exception, _unhandled_error)
    app.add_middleware(RequestTimingMiddleware)
