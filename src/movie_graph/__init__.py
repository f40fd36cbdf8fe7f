"""Movie graph API: movies by director, served from Neo4j."""

__version__ = "0.1.0"
