"""
PostgreSQL dialect implementation.
"""

from __future__ import annotations

from typing import Final

from .base import Dialect, DialectId, url_scheme


class PostgresDialect:
    """
    PostgreSQL dialect; auto increment columns use the serial types.
    """

    id: Final[str] = DialectId.POSTGRESQL.value
    name: Final[str] = "postgresql"
    url_schemes: Final[tuple[str, ...]] = ("postgresql", "postgres", "psql")

    def matches_url(self, url: str) -> bool:
        return url_scheme(url) in self.url_schemes


def get_postgres_dialect() -> Dialect:
    return PostgresDialect()
