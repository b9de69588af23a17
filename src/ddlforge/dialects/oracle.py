"""
Oracle dialect implementation.
"""

from __future__ import annotations

from typing import Final

from .base import Dialect, DialectId, url_scheme


class OracleDialect:
    """
    Oracle dialect. There is no native auto increment, so tables with one get
    a sequence and a trigger alongside.
    """

    id: Final[str] = DialectId.ORACLE.value
    name: Final[str] = "oracle"
    url_schemes: Final[tuple[str, ...]] = ("oracle",)

    def matches_url(self, url: str) -> bool:
        return url_scheme(url) in self.url_schemes


def get_oracle_dialect() -> Dialect:
    return OracleDialect()
