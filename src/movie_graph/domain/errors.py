"""Domain errors.

Pure Python — zero framework imports. A single error category covers
every failure while running a movie query: connectivity loss, malformed
query, or a database-reported error.
"""

from __future__ import annotations


class MovieQueryError(Exception):
    """Raised when a query or its session fails.

    Keeps the original driver exception so the API layer can decide how
    much of it to expose.
    """

    def __init__(self, director_id: str, cause: BaseException) -> None:
        self.director_id = director_id
        self.cause = cause
        self.error_type = type(cause).__name__
        self.code: str | None = getattr(cause, "code", None)
        self.message = str(cause) or self.error_type
        super().__init__(f"movies for director {director_id!r}: {self.message}")
