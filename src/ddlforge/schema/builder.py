"""
CREATE TABLE builder rendering dialect specific DDL statements.
"""

from __future__ import annotations

from enum import Enum
from typing import Final, List, Mapping, Optional, Set

from ..core.columns import BigIntegerColumnDef, ColumnDef, IntegerColumnDef
from ..dialects.base import Dialect, DialectId, dialect_id_of
from ..utils import correlation_scope, current_correlation_id, get_logger
from ..validation.errors import (
    DuplicateAutoIncrementError,
    EmptyTableError,
    InvalidAutoIncrementError,
    NullArgumentError,
    SchemaStateError,
)
from ..validation.identifiers import check_constraint_name, check_table_name


class ColumnFlag(Enum):
    AUTO_INCREMENT = "auto_increment"


# PostgreSQL relies on serial types, Oracle on a sequence and a trigger.
_AUTO_INCREMENT_CLAUSES: Final[Mapping[DialectId, str]] = {
    DialectId.H2: " AUTO_INCREMENT (0,1)",
    DialectId.MYSQL: " AUTO_INCREMENT",
    DialectId.POSTGRESQL: "",
    DialectId.MSSQL: " IDENTITY (0,1)",
    DialectId.ORACLE: "",
}

_TABLE_SUFFIXES: Final[Mapping[DialectId, str]] = {
    DialectId.H2: "",
    DialectId.MYSQL: " ENGINE=InnoDB CHARACTER SET utf8 COLLATE utf8_bin",
    DialectId.POSTGRESQL: "",
    DialectId.MSSQL: "",
    DialectId.ORACLE: "",
}


class CreateTableBuilder:
    """
    Accumulates the columns of a table and renders its creation statements.

    Usage::

        statements = (
            CreateTableBuilder(dialect, "issues")
            .add_pk_column(IntegerColumnDef("id", nullable=False), ColumnFlag.AUTO_INCREMENT)
            .add_column(VarcharColumnDef("title", limit=200))
            .build()
        )

    Statements must be executed in the returned order. The builder is not
    thread safe and is meant to be discarded once built.
    """

    def __init__(self, dialect: Dialect, table_name: str) -> None:
        if dialect is None:
            raise NullArgumentError("dialect can't be null")
        self.dialect = dialect
        self.table_name = check_table_name(table_name)
        self.logger = get_logger("schema.builder")
        self._column_defs: List[ColumnDef] = []
        self._pk_column_defs: List[ColumnDef] = []
        # flags keyed by position in _pk_column_defs
        self._pk_flags: dict[int, Set[ColumnFlag]] = {}
        self._pk_constraint_name: Optional[str] = None

    # Accumulation --------------------------------------------------------
    def add_column(self, column_def: ColumnDef) -> "CreateTableBuilder":
        if column_def is None:
            raise NullArgumentError("column def can't be null")
        self._column_defs.append(column_def)
        return self

    def add_pk_column(self, column_def: ColumnDef, *flags: ColumnFlag) -> "CreateTableBuilder":
        if column_def is None:
            raise NullArgumentError("column def can't be null")
        auto_increment_seen = False
        for flag in flags:
            if flag is None:
                raise NullArgumentError("flag can't be null")
            if flag is ColumnFlag.AUTO_INCREMENT:
                if auto_increment_seen:
                    raise DuplicateAutoIncrementError(
                        "There can't be more than one auto increment column"
                    )
                self._validate_auto_increment(column_def)
                auto_increment_seen = True
        position = len(self._pk_column_defs)
        self._pk_column_defs.append(column_def)
        if flags:
            self._pk_flags[position] = set(flags)
        return self

    def with_pk_constraint_name(self, pk_constraint_name: str) -> "CreateTableBuilder":
        self._pk_constraint_name = check_constraint_name(pk_constraint_name)
        return self

    def _validate_auto_increment(self, column_def: ColumnDef) -> None:
        if column_def.name != "id":
            raise InvalidAutoIncrementError("Auto increment column name must be id")
        if not isinstance(column_def, (IntegerColumnDef, BigIntegerColumnDef)):
            raise InvalidAutoIncrementError(
                "Auto increment column must either be BigInteger or Integer"
            )
        if column_def.nullable:
            raise InvalidAutoIncrementError("Auto increment column can't be nullable")
        if self._auto_increment_position() is not None:
            raise DuplicateAutoIncrementError("There can't be more than one auto increment column")

    def _auto_increment_position(self) -> Optional[int]:
        for position, flags in self._pk_flags.items():
            if ColumnFlag.AUTO_INCREMENT in flags:
                return position
        return None

    # Rendering -----------------------------------------------------------
    def build(self) -> List[str]:
        if not self._column_defs and not self._pk_column_defs:
            raise EmptyTableError("at least one column must be specified")
        dialect_id = dialect_id_of(self.dialect)
        # an enclosing migration scope wins over the table name
        with correlation_scope(current_correlation_id() or f"create_table:{self.table_name}"):
            statements = [self._create_table_statement(dialect_id)]
            if dialect_id is DialectId.ORACLE and self._auto_increment_position() is not None:
                self.logger.debug(
                    "Emulating auto increment on %s with a sequence and a trigger",
                    self.table_name,
                )
                statements.append(self._create_sequence_statement())
                statements.append(self._create_trigger_statement())
            self.logger.debug(
                "Rendered %s statement(s) for table %s on %s",
                len(statements),
                self.table_name,
                dialect_id.value,
            )
        return statements

    def _create_table_statement(self, dialect_id: DialectId) -> str:
        auto_increment_position = self._auto_increment_position()
        columns_sql = [
            self._render_column(
                column_def, dialect_id, auto_increment=position == auto_increment_position
            )
            for position, column_def in enumerate(self._pk_column_defs)
        ]
        columns_sql.extend(
            self._render_column(column_def, dialect_id, auto_increment=False)
            for column_def in self._column_defs
        )
        column_list = ",".join(columns_sql)
        return (
            f"CREATE TABLE {self.table_name} ({column_list}{self._pk_constraint_clause()})"
            f"{_TABLE_SUFFIXES[dialect_id]}"
        )

    def _render_column(
        self, column_def: ColumnDef, dialect_id: DialectId, *, auto_increment: bool
    ) -> str:
        column_type = self._render_data_type(column_def, dialect_id, auto_increment=auto_increment)
        null_clause = " NULL" if column_def.nullable else " NOT NULL"
        flag_clause = _AUTO_INCREMENT_CLAUSES[dialect_id] if auto_increment else ""
        return f"{column_def.name} {column_type}{null_clause}{flag_clause}"

    def _render_data_type(
        self, column_def: ColumnDef, dialect_id: DialectId, *, auto_increment: bool
    ) -> str:
        if dialect_id is DialectId.POSTGRESQL and auto_increment:
            if isinstance(column_def, BigIntegerColumnDef):
                return "BIGSERIAL"
            if isinstance(column_def, IntegerColumnDef):
                return "SERIAL"
            raise SchemaStateError("Column with autoincrement is neither BigInteger nor Integer")
        return column_def.generate_sql_type(self.dialect)

    def _pk_constraint_clause(self) -> str:
        if not self._pk_column_defs:
            return ""
        column_names = ",".join(column_def.name for column_def in self._pk_column_defs)
        return f", CONSTRAINT {self._pk_name()} PRIMARY KEY ({column_names})"

    def _pk_name(self) -> str:
        if self._pk_constraint_name is None:
            return f"pk_{self.table_name}"
        return self._pk_constraint_name.lower()

    def _create_sequence_statement(self) -> str:
        return f"CREATE SEQUENCE {self.table_name}_seq START WITH 1 INCREMENT BY 1"

    def _create_trigger_statement(self) -> str:
        table = self.table_name
        return (
            f"CREATE OR REPLACE TRIGGER {table}_idt"
            f" BEFORE INSERT ON {table}"
            " FOR EACH ROW"
            " BEGIN"
            " IF :new.id IS null THEN"
            f" SELECT {table}_seq.nextval INTO :new.id FROM dual;"
            " END IF;"
            " END;"
        )
