"""
Resolution of dialects from identifiers, connection URLs and environment.
"""

from __future__ import annotations

import os
from typing import Callable, Final, Mapping

from ..utils import get_logger
from ..validation.errors import DialectConfigurationError
from .base import Dialect, DialectId
from .h2 import get_h2_dialect
from .mssql import get_mssql_dialect
from .mysql import get_mysql_dialect
from .oracle import get_oracle_dialect
from .postgres import get_postgres_dialect

DEFAULT_ENV_VAR: Final[str] = "DDLFORGE_DIALECT"

_FACTORIES: Final[Mapping[DialectId, Callable[[], Dialect]]] = {
    DialectId.H2: get_h2_dialect,
    DialectId.MYSQL: get_mysql_dialect,
    DialectId.POSTGRESQL: get_postgres_dialect,
    DialectId.MSSQL: get_mssql_dialect,
    DialectId.ORACLE: get_oracle_dialect,
}

_ALIASES: Final[Mapping[str, DialectId]] = {
    "h2": DialectId.H2,
    "mysql": DialectId.MYSQL,
    "mariadb": DialectId.MYSQL,
    "postgresql": DialectId.POSTGRESQL,
    "postgres": DialectId.POSTGRESQL,
    "mssql": DialectId.MSSQL,
    "sqlserver": DialectId.MSSQL,
    "oracle": DialectId.ORACLE,
}

logger = get_logger("dialects.registry")


def supported_dialects() -> list[Dialect]:
    return [_FACTORIES[dialect_id]() for dialect_id in DialectId]


def get_dialect(identifier: DialectId | str) -> Dialect:
    """
    Return a dialect for a :class:`DialectId`, an id such as ``"ORACLE"`` or a
    lower case alias such as ``"postgres"``.
    """
    if isinstance(identifier, DialectId):
        return _FACTORIES[identifier]()
    key = identifier.strip()
    if key in DialectId.__members__:
        return _FACTORIES[DialectId(key)]()
    dialect_id = _ALIASES.get(key.lower())
    if dialect_id is None:
        raise DialectConfigurationError(f"Unsupported dialect '{identifier}'")
    return _FACTORIES[dialect_id]()


def find_dialect_for_url(url: str) -> Dialect:
    """
    Return the dialect matching a JDBC URL or DSN, e.g.
    ``jdbc:postgresql://localhost/sonar`` or ``mssql+pyodbc://host/db``.
    """
    for dialect in supported_dialects():
        if dialect.matches_url(url):
            logger.debug("Resolved dialect %s from connection URL", dialect.id)
            return dialect
    raise DialectConfigurationError(f"Can't find a dialect for URL '{url}'")


def dialect_from_env(env_var: str = DEFAULT_ENV_VAR) -> Dialect:
    """
    Resolve the dialect named by an environment variable.

    The variable holds either a dialect identifier/alias or a connection URL.
    """
    value = os.getenv(env_var)
    if not value or not value.strip():
        raise DialectConfigurationError(f"Environment variable {env_var} is not set")
    if ":" in value:
        return find_dialect_for_url(value)
    dialect = get_dialect(value)
    logger.debug("Resolved dialect %s from %s", dialect.id, env_var)
    return dialect
