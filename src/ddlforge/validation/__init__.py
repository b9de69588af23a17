"""
Validation utilities and the ddlforge error hierarchy.
"""

from .errors import (
    DDLForgeError,
    DialectConfigurationError,
    DuplicateAutoIncrementError,
    EmptyTableError,
    InvalidAutoIncrementError,
    InvalidColumnDefinitionError,
    InvalidIdentifierError,
    NullArgumentError,
    SchemaDefinitionError,
    SchemaStateError,
    UnsupportedDialectError,
)
from .identifiers import (
    COLUMN_NAME_MAX_SIZE,
    CONSTRAINT_NAME_MAX_SIZE,
    TABLE_NAME_MAX_SIZE,
    check_column_name,
    check_constraint_name,
    check_db_identifier,
    check_table_name,
)

__all__ = [
    "DDLForgeError",
    "SchemaDefinitionError",
    "NullArgumentError",
    "InvalidIdentifierError",
    "InvalidColumnDefinitionError",
    "EmptyTableError",
    "InvalidAutoIncrementError",
    "DuplicateAutoIncrementError",
    "UnsupportedDialectError",
    "SchemaStateError",
    "DialectConfigurationError",
    "TABLE_NAME_MAX_SIZE",
    "CONSTRAINT_NAME_MAX_SIZE",
    "COLUMN_NAME_MAX_SIZE",
    "check_db_identifier",
    "check_table_name",
    "check_constraint_name",
    "check_column_name",
]
