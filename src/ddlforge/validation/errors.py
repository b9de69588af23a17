"""
Error hierarchy for ddlforge.
"""

from __future__ import annotations


class DDLForgeError(Exception):
    """Base error for every failure raised by ddlforge."""


class SchemaDefinitionError(DDLForgeError, ValueError):
    """
    Raised when a table description supplied by the caller is invalid.

    The builder is left untouched by the failing call, so callers may fix the
    input and keep building.
    """


class NullArgumentError(SchemaDefinitionError, TypeError):
    """Raised when a required argument is ``None``."""


class InvalidIdentifierError(SchemaDefinitionError):
    """
    Raised when a table, constraint or column name breaks identifier rules.
    """

    def __init__(self, message: str, *, identifier: str, label: str, rule: str) -> None:
        super().__init__(message)
        self.identifier = identifier
        self.label = label
        self.rule = rule


class InvalidColumnDefinitionError(SchemaDefinitionError):
    """Raised when a column definition carries out-of-range type parameters."""


class EmptyTableError(SchemaDefinitionError):
    """Raised when rendering a table that has no columns."""


class InvalidAutoIncrementError(SchemaDefinitionError):
    """Raised when the auto increment flag is put on an unsuitable column."""


class DuplicateAutoIncrementError(SchemaDefinitionError):
    """Raised when a second auto increment column is added to a table."""


class UnsupportedDialectError(DDLForgeError, RuntimeError):
    """
    Raised when rendering meets a dialect outside the supported set.

    This signals a programming defect rather than bad user input.
    """

    def __init__(self, dialect_id: object) -> None:
        super().__init__(f"Unsupported dialect id {dialect_id!r}")
        self.dialect_id = dialect_id


class SchemaStateError(DDLForgeError, RuntimeError):
    """Raised when builder state contradicts an invariant checked earlier."""


class DialectConfigurationError(DDLForgeError, ValueError):
    """Raised when configuration cannot be resolved to a supported dialect."""
