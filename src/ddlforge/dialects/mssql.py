"""
Microsoft SQL Server dialect implementation.
"""

from __future__ import annotations

from typing import Final

from .base import Dialect, DialectId, url_scheme


class MsSqlDialect:
    """
    SQL Server dialect; auto increment columns use an IDENTITY clause.
    """

    id: Final[str] = DialectId.MSSQL.value
    name: Final[str] = "mssql"
    url_schemes: Final[tuple[str, ...]] = ("mssql", "sqlserver", "jtds")

    def matches_url(self, url: str) -> bool:
        return url_scheme(url) in self.url_schemes


def get_mssql_dialect() -> Dialect:
    return MsSqlDialect()
