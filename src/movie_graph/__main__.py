"""Process entry point: ``python -m movie_graph``."""

from __future__ import annotations

import structlog
import uvicorn

from movie_graph.api.app import create_app
from movie_graph.logging_config import configure_logging
from movie_graph.settings import Settings

logger = structlog.get_logger(__name__)


def main() -> None:
    """Load settings, configure logging and serve the API."""
    settings = Settings()
    configure_logging(settings.log_level, debug=settings.debug)

    app = create_app(settings)

    logger.info("listening", host=settings.server.host, port=settings.server.port)
    uvicorn.run(
        app,
        host=settings.server.host,
        port=settings.server.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
