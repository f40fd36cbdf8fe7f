"""Movie store port interface.

Uses typing.Protocol for structural subtyping (not ABCs).
The Neo4j adapter implements these protocols; unit tests supply fakes.
"""

from __future__ import annotations

from typing import Any, Protocol


class GraphSession(Protocol):
    """The narrow slice of a driver session the API depends on."""

    async def run(self, query: str, parameters: dict[str, Any] | None = None) -> Any:
        """Run a query with bound parameters and return an async result."""
        ...

    async def close(self) -> None:
        """Release the session back to the pool."""
        ...


class MovieStore(Protocol):
    """Protocol for the process-wide driver holder."""

    def session(self) -> GraphSession:
        """Open a new session against the configured database."""
        ...

    async def ping(self) -> bool:
        """Return True when the database answers a trivial query."""
        ...

    async def close(self) -> None:
        """Release connections."""
        ...
