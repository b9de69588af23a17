"""
MySQL dialect implementation.
"""

from __future__ import annotations

from typing import Final

from .base import Dialect, DialectId, url_scheme


class MySQLDialect:
    """
    MySQL dialect. Tables are created with the InnoDB engine and a binary
    utf8 collation.
    """

    id: Final[str] = DialectId.MYSQL.value
    name: Final[str] = "mysql"
    url_schemes: Final[tuple[str, ...]] = ("mysql", "mariadb")

    def matches_url(self, url: str) -> bool:
        return url_scheme(url) in self.url_schemes


def get_mysql_dialect() -> Dialect:
    return MySQLDialect()
