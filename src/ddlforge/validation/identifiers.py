"""
Database identifier rules shared by table, constraint and column names.
"""

from __future__ import annotations

import re
from typing import Final, Optional

from .errors import InvalidIdentifierError, NullArgumentError

TABLE_NAME_MAX_SIZE: Final[int] = 25
CONSTRAINT_NAME_MAX_SIZE: Final[int] = 30
COLUMN_NAME_MAX_SIZE: Final[int] = 30

_ALLOWED_CHARS_RE = re.compile(r"[a-z0-9_]+")
_FORBIDDEN_FIRST_CHARS = frozenset("0123456789_")


def check_db_identifier(identifier: Optional[str], label: str, max_size: int) -> str:
    """
    Validate ``identifier`` and return it unchanged.

    ``label`` names the identifier in error messages (e.g. ``"Table name"``).
    Rules are checked in order: presence, emptiness, length, allowed
    characters (lower case ASCII letters, digits, ``_``) and first character
    (neither a digit nor ``_``).
    """
    if identifier is None:
        raise NullArgumentError(f"{label} can't be null")
    if not identifier:
        raise InvalidIdentifierError(
            f"{label} can't be empty", identifier=identifier, label=label, rule="empty"
        )
    if len(identifier) > max_size:
        raise InvalidIdentifierError(
            f"{label} length can't be more than {max_size}, got '{identifier}'",
            identifier=identifier,
            label=label,
            rule="length",
        )
    if not _ALLOWED_CHARS_RE.fullmatch(identifier):
        raise InvalidIdentifierError(
            f"{label} must be lower case and contain only alphanumeric chars or '_', "
            f"got '{identifier}'",
            identifier=identifier,
            label=label,
            rule="characters",
        )
    if identifier[0] in _FORBIDDEN_FIRST_CHARS:
        raise InvalidIdentifierError(
            f"{label} must not start by a number or '_', got '{identifier}'",
            identifier=identifier,
            label=label,
            rule="first_character",
        )
    return identifier


def check_table_name(table_name: Optional[str]) -> str:
    return check_db_identifier(table_name, "Table name", TABLE_NAME_MAX_SIZE)


def check_constraint_name(constraint_name: Optional[str]) -> str:
    return check_db_identifier(
        constraint_name, "Primary key constraint name", CONSTRAINT_NAME_MAX_SIZE
    )


def check_column_name(column_name: Optional[str]) -> str:
    return check_db_identifier(column_name, "Column name", COLUMN_NAME_MAX_SIZE)
