"""
Dialect strategy interfaces and the closed set of supported backends.
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol

from ..validation.errors import UnsupportedDialectError


class DialectId(str, Enum):
    """
    Stable identifiers of the supported backends.

    Rendering code dispatches on these members through tables that must cover
    every one of them.
    """

    H2 = "H2"
    MYSQL = "MYSQL"
    POSTGRESQL = "POSTGRESQL"
    MSSQL = "MSSQL"
    ORACLE = "ORACLE"


class Dialect(Protocol):
    """
    Strategy interface consumed by column definitions and table builders.
    """

    @property
    def id(self) -> str: ...

    @property
    def name(self) -> str: ...

    @property
    def url_schemes(self) -> tuple[str, ...]: ...

    def matches_url(self, url: str) -> bool: ...


def dialect_id_of(dialect: Dialect) -> DialectId:
    """
    Return the :class:`DialectId` of ``dialect``.

    Raises :class:`UnsupportedDialectError` when the dialect reports an id
    outside the supported set.
    """
    raw_id = getattr(dialect, "id", None)
    try:
        return DialectId(raw_id)
    except ValueError:
        raise UnsupportedDialectError(raw_id) from None


def url_scheme(url: str) -> str:
    """
    Extract the backend scheme from a JDBC URL or a DSN.

    ``jdbc:oracle:thin:@host`` gives ``oracle``, ``mssql+pyodbc://host`` gives
    ``mssql``.
    """
    value = url.strip().lower()
    if value.startswith("jdbc:"):
        value = value[len("jdbc:"):]
    scheme = value.split(":", 1)[0]
    return scheme.split("+", 1)[0]
