"""
Column definitions rendering their SQL type for each supported dialect.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Final, Mapping

from ..dialects.base import Dialect, DialectId, dialect_id_of
from ..validation.errors import InvalidColumnDefinitionError, UnsupportedDialectError
from ..validation.identifiers import check_column_name

VARCHAR_MAX_SIZE: Final[int] = 4000
DEFAULT_DECIMAL_PRECISION: Final[int] = 38
DEFAULT_DECIMAL_SCALE: Final[int] = 20


@dataclass(frozen=True)
class ColumnDef:
    """
    Base class for immutable column definitions.

    Subclasses provide ``_sql_types``, a template per :class:`DialectId`
    formatted with :meth:`_type_parameters`. Two definitions built with the
    same values compare equal.
    """

    name: str
    nullable: bool = True

    _sql_types: ClassVar[Mapping[DialectId, str]] = {}

    def __post_init__(self) -> None:
        check_column_name(self.name)

    def generate_sql_type(self, dialect: Dialect) -> str:
        dialect_id = dialect_id_of(dialect)
        template = self._sql_types.get(dialect_id)
        if template is None:
            raise UnsupportedDialectError(dialect_id)
        return template.format(**self._type_parameters())

    def _type_parameters(self) -> dict[str, Any]:
        return {}


@dataclass(frozen=True)
class IntegerColumnDef(ColumnDef):
    _sql_types: ClassVar[Mapping[DialectId, str]] = {
        DialectId.H2: "INTEGER",
        DialectId.MYSQL: "INTEGER",
        DialectId.POSTGRESQL: "INTEGER",
        DialectId.MSSQL: "INT",
        DialectId.ORACLE: "INTEGER",
    }


@dataclass(frozen=True)
class BigIntegerColumnDef(ColumnDef):
    _sql_types: ClassVar[Mapping[DialectId, str]] = {
        DialectId.H2: "BIGINT",
        DialectId.MYSQL: "BIGINT",
        DialectId.POSTGRESQL: "BIGINT",
        DialectId.MSSQL: "BIGINT",
        DialectId.ORACLE: "NUMBER (38)",
    }


@dataclass(frozen=True)
class TinyIntColumnDef(ColumnDef):
    _sql_types: ClassVar[Mapping[DialectId, str]] = {
        DialectId.H2: "TINYINT",
        DialectId.MYSQL: "TINYINT(2)",
        DialectId.POSTGRESQL: "SMALLINT",
        DialectId.MSSQL: "TINYINT",
        DialectId.ORACLE: "NUMBER(3)",
    }


@dataclass(frozen=True)
class BooleanColumnDef(ColumnDef):
    _sql_types: ClassVar[Mapping[DialectId, str]] = {
        DialectId.H2: "BOOLEAN",
        DialectId.MYSQL: "BOOLEAN",
        DialectId.POSTGRESQL: "BOOLEAN",
        DialectId.MSSQL: "BOOLEAN",
        DialectId.ORACLE: "BOOLEAN",
    }


@dataclass(frozen=True)
class VarcharColumnDef(ColumnDef):
    """
    Variable length string column of at most ``limit`` characters.

    On Oracle the length is expressed in characters unless
    ``ignore_oracle_unit`` is set, in which case the session default applies.
    """

    limit: int = field(kw_only=True)
    ignore_oracle_unit: bool = field(default=False, kw_only=True)

    _sql_types: ClassVar[Mapping[DialectId, str]] = {
        DialectId.H2: "VARCHAR ({limit})",
        DialectId.MYSQL: "VARCHAR ({limit})",
        DialectId.POSTGRESQL: "VARCHAR ({limit})",
        DialectId.MSSQL: "NVARCHAR ({limit})",
        DialectId.ORACLE: "VARCHAR2 ({limit}{oracle_unit})",
    }

    def __post_init__(self) -> None:
        super().__post_init__()
        if isinstance(self.limit, bool) or not isinstance(self.limit, int):
            raise InvalidColumnDefinitionError(
                f"Limit of column '{self.name}' must be an integer, got {self.limit!r}"
            )
        if not 0 < self.limit <= VARCHAR_MAX_SIZE:
            raise InvalidColumnDefinitionError(
                f"Limit of column '{self.name}' must be between 1 and {VARCHAR_MAX_SIZE}, "
                f"got {self.limit}"
            )

    def _type_parameters(self) -> dict[str, Any]:
        return {
            "limit": self.limit,
            "oracle_unit": "" if self.ignore_oracle_unit else " CHAR",
        }


@dataclass(frozen=True)
class DecimalColumnDef(ColumnDef):
    precision: int = field(default=DEFAULT_DECIMAL_PRECISION, kw_only=True)
    scale: int = field(default=DEFAULT_DECIMAL_SCALE, kw_only=True)

    _sql_types: ClassVar[Mapping[DialectId, str]] = {
        DialectId.H2: "DOUBLE",
        DialectId.MYSQL: "DECIMAL ({precision},{scale})",
        DialectId.POSTGRESQL: "NUMERIC ({precision},{scale})",
        DialectId.MSSQL: "DECIMAL ({precision},{scale})",
        DialectId.ORACLE: "NUMERIC ({precision},{scale})",
    }

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.precision <= 0:
            raise InvalidColumnDefinitionError(
                f"Precision of column '{self.name}' must be strictly positive, "
                f"got {self.precision}"
            )
        if not 0 <= self.scale <= self.precision:
            raise InvalidColumnDefinitionError(
                f"Scale of column '{self.name}' must be between 0 and {self.precision}, "
                f"got {self.scale}"
            )

    def _type_parameters(self) -> dict[str, Any]:
        return {"precision": self.precision, "scale": self.scale}


@dataclass(frozen=True)
class ClobColumnDef(ColumnDef):
    _sql_types: ClassVar[Mapping[DialectId, str]] = {
        DialectId.H2: "CLOB",
        DialectId.MYSQL: "LONGTEXT",
        DialectId.POSTGRESQL: "TEXT",
        DialectId.MSSQL: "NVARCHAR (MAX)",
        DialectId.ORACLE: "CLOB",
    }


@dataclass(frozen=True)
class BlobColumnDef(ColumnDef):
    _sql_types: ClassVar[Mapping[DialectId, str]] = {
        DialectId.H2: "BLOB",
        DialectId.MYSQL: "LONGBLOB",
        DialectId.POSTGRESQL: "BYTEA",
        DialectId.MSSQL: "VARBINARY(MAX)",
        DialectId.ORACLE: "BLOB",
    }
