"""Neo4j MovieStore adapter.

Holds the process-wide async driver. The driver owns the connection
pool and is safe for concurrent use; request handlers draw one session
each and never share it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog
from neo4j import AsyncGraphDatabase
from neo4j.exceptions import DriverError, Neo4jError

from movie_graph.adapters.neo4j import queries

if TYPE_CHECKING:
    from neo4j import AsyncDriver, AsyncSession

    from movie_graph.settings import Neo4jSettings

logger = structlog.get_logger(__name__)


class Neo4jMovieStore:
    """Neo4j implementation of the MovieStore protocol.

    Created once at startup. Pass ``driver`` to inject an already built
    (or fake) driver instead of connecting from settings.
    """

    def __init__(
        self,
        settings: Neo4jSettings,
        driver: AsyncDriver | None = None,
    ) -> None:
        self._settings = settings
        if driver is None:
            driver = AsyncGraphDatabase.driver(
                settings.uri,
                auth=(settings.username, settings.password),
                max_connection_pool_size=settings.max_connection_pool_size,
            )
        self._driver: AsyncDriver = driver
        self._database = settings.database

    def session(self) -> AsyncSession:
        """Open a new session against the configured database."""
        return self._driver.session(database=self._database)

    async def ping(self) -> bool:
        """Return True when Neo4j answers ``RETURN 1``."""
        try:
            async with self.session() as session:
                result = await session.run(queries.PING)
                await result.consume()
        except (Neo4jError, DriverError, OSError):
            logger.warning("neo4j_ping_failed", uri=self._settings.uri)
            return False
        return True

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def close(self) -> None:
        """Release connections."""
        await self._driver.close()
        logger.info("neo4j_driver_closed")
