"""
ddlforge public package initialization.

Declare a table once and render CREATE TABLE statements for H2, MySQL,
PostgreSQL, SQL Server and Oracle.
"""

from .core import (
    BigIntegerColumnDef,
    BlobColumnDef,
    BooleanColumnDef,
    ClobColumnDef,
    ColumnDef,
    DecimalColumnDef,
    IntegerColumnDef,
    TinyIntColumnDef,
    VarcharColumnDef,
)  # noqa: F401
from .dialects import (
    Dialect,
    DialectId,
    H2Dialect,
    MsSqlDialect,
    MySQLDialect,
    OracleDialect,
    PostgresDialect,
    dialect_from_env,
    find_dialect_for_url,
    get_dialect,
)  # noqa: F401
from .schema import ColumnFlag, CreateTableBuilder  # noqa: F401
from .validation import (
    DDLForgeError,
    DuplicateAutoIncrementError,
    EmptyTableError,
    InvalidAutoIncrementError,
    InvalidIdentifierError,
    NullArgumentError,
    UnsupportedDialectError,
)  # noqa: F401

__all__ = [
    "ColumnDef",
    "IntegerColumnDef",
    "BigIntegerColumnDef",
    "TinyIntColumnDef",
    "BooleanColumnDef",
    "VarcharColumnDef",
    "DecimalColumnDef",
    "ClobColumnDef",
    "BlobColumnDef",
    "Dialect",
    "DialectId",
    "H2Dialect",
    "MySQLDialect",
    "PostgresDialect",
    "MsSqlDialect",
    "OracleDialect",
    "get_dialect",
    "find_dialect_for_url",
    "dialect_from_env",
    "ColumnFlag",
    "CreateTableBuilder",
    "DDLForgeError",
    "NullArgumentError",
    "InvalidIdentifierError",
    "EmptyTableError",
    "InvalidAutoIncrementError",
    "DuplicateAutoIncrementError",
    "UnsupportedDialectError",
]
