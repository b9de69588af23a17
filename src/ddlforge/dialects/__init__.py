"""
Dialect strategy registry.
"""

from .base import Dialect, DialectId, dialect_id_of
from .h2 import H2Dialect
from .mssql import MsSqlDialect
from .mysql import MySQLDialect
from .oracle import OracleDialect
from .postgres import PostgresDialect
from .registry import dialect_from_env, find_dialect_for_url, get_dialect, supported_dialects

__all__ = [
    "Dialect",
    "DialectId",
    "dialect_id_of",
    "H2Dialect",
    "MySQLDialect",
    "PostgresDialect",
    "MsSqlDialect",
    "OracleDialect",
    "get_dialect",
    "find_dialect_for_url",
    "dialect_from_env",
    "supported_dialects",
]
