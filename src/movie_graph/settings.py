"""Application settings via Pydantic BaseSettings.

All configuration uses the MOVIES_ environment variable prefix.
Nested groups carry their own prefix (MOVIES_NEO4J_, MOVIES_SERVER_).
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings


class Neo4jSettings(BaseSettings):
    """Neo4j connection settings."""

    model_config = {"env_prefix": "MOVIES_NEO4J_"}

    uri: str = "bolt://localhost:7687"
    username: str = "neo4j"
    password: str = "neo"
    database: str = "neo4j"
    max_connection_pool_size: int = 50


class ServerSettings(BaseSettings):
    """HTTP listener settings."""

    model_config = {"env_prefix": "MOVIES_SERVER_"}

    host: str = "0.0.0.0"  # noqa: S104
    port: int = 8080


class Settings(BaseSettings):
    """Root application settings."""

    model_config = {"env_prefix": "MOVIES_"}

    app_name: str = "Movie Graph API"
    debug: bool = False
    log_level: str = "INFO"

    # Raw driver error text is returned in 500 bodies unless disabled
    expose_error_details: bool = True

    neo4j: Neo4jSettings = Field(default_factory=Neo4jSettings)
    server: ServerSettings = Field(default_factory=ServerSettings)
