import dataclasses

import pytest

from ddlforge.core import (
    BigIntegerColumnDef,
    BlobColumnDef,
    BooleanColumnDef,
    ClobColumnDef,
    ColumnDef,
    DecimalColumnDef,
    IntegerColumnDef,
    TinyIntColumnDef,
    VarcharColumnDef,
)
from ddlforge.dialects import DialectId, get_dialect
from ddlforge.validation import (
    InvalidColumnDefinitionError,
    InvalidIdentifierError,
    NullArgumentError,
    UnsupportedDialectError,
)

EXPECTED_TYPES = {
    IntegerColumnDef("col"): {
        "H2": "INTEGER",
        "MYSQL": "INTEGER",
        "POSTGRESQL": "INTEGER",
        "MSSQL": "INT",
        "ORACLE": "INTEGER",
    },
    BigIntegerColumnDef("col"): {
        "H2": "BIGINT",
        "MYSQL": "BIGINT",
        "POSTGRESQL": "BIGINT",
        "MSSQL": "BIGINT",
        "ORACLE": "NUMBER (38)",
    },
    TinyIntColumnDef("col"): {
        "H2": "TINYINT",
        "MYSQL": "TINYINT(2)",
        "POSTGRESQL": "SMALLINT",
        "MSSQL": "TINYINT",
        "ORACLE": "NUMBER(3)",
    },
    BooleanColumnDef("col"): {
        "H2": "BOOLEAN",
        "MYSQL": "BOOLEAN",
        "POSTGRESQL": "BOOLEAN",
        "MSSQL": "BOOLEAN",
        "ORACLE": "BOOLEAN",
    },
    VarcharColumnDef("col", limit=40): {
        "H2": "VARCHAR (40)",
        "MYSQL": "VARCHAR (40)",
        "POSTGRESQL": "VARCHAR (40)",
        "MSSQL": "NVARCHAR (40)",
        "ORACLE": "VARCHAR2 (40 CHAR)",
    },
    DecimalColumnDef("col"): {
        "H2": "DOUBLE",
        "MYSQL": "DECIMAL (38,20)",
        "POSTGRESQL": "NUMERIC (38,20)",
        "MSSQL": "DECIMAL (38,20)",
        "ORACLE": "NUMERIC (38,20)",
    },
    ClobColumnDef("col"): {
        "H2": "CLOB",
        "MYSQL": "LONGTEXT",
        "POSTGRESQL": "TEXT",
        "MSSQL": "NVARCHAR (MAX)",
        "ORACLE": "CLOB",
    },
    BlobColumnDef("col"): {
        "H2": "BLOB",
        "MYSQL": "LONGBLOB",
        "POSTGRESQL": "BYTEA",
        "MSSQL": "VARBINARY(MAX)",
        "ORACLE": "BLOB",
    },
}


class UnknownDialect:
    id = "DB2"


@pytest.mark.parametrize(
    "column_def, dialect_id",
    [(column_def, dialect_id) for column_def in EXPECTED_TYPES for dialect_id in DialectId],
    ids=lambda value: type(value).__name__ if isinstance(value, ColumnDef) else value.value,
)
def test_sql_type_per_dialect(column_def, dialect_id):
    expected = EXPECTED_TYPES[column_def][dialect_id.value]
    assert column_def.generate_sql_type(get_dialect(dialect_id)) == expected


@pytest.mark.parametrize("column_def", list(EXPECTED_TYPES), ids=lambda c: type(c).__name__)
def test_type_tables_cover_every_dialect(column_def):
    assert set(type(column_def)._sql_types) == set(DialectId)


@pytest.mark.parametrize("column_def", list(EXPECTED_TYPES), ids=lambda c: type(c).__name__)
def test_unknown_dialect_fails_fast(column_def):
    with pytest.raises(UnsupportedDialectError, match="DB2"):
        column_def.generate_sql_type(UnknownDialect())


def test_columns_are_nullable_by_default():
    assert IntegerColumnDef("col").nullable is True
    assert IntegerColumnDef("col", nullable=False).nullable is False


def test_columns_are_immutable():
    column = IntegerColumnDef("col")
    with pytest.raises(dataclasses.FrozenInstanceError):
        column.nullable = False  # type: ignore[misc]


def test_columns_compare_by_value():
    assert VarcharColumnDef("col", limit=10) == VarcharColumnDef("col", limit=10)
    assert IntegerColumnDef("col") != BigIntegerColumnDef("col")


def test_column_name_is_validated():
    with pytest.raises(InvalidIdentifierError, match="Column name must be lower case"):
        IntegerColumnDef("Col")
    with pytest.raises(NullArgumentError, match="Column name can't be null"):
        IntegerColumnDef(None)
    with pytest.raises(InvalidIdentifierError, match="Column name length can't be more than 30"):
        IntegerColumnDef("a" * 31)


def test_varchar_oracle_unit_can_be_ignored():
    column = VarcharColumnDef("col", limit=7, ignore_oracle_unit=True)
    assert column.generate_sql_type(get_dialect("ORACLE")) == "VARCHAR2 (7)"
    assert column.generate_sql_type(get_dialect("H2")) == "VARCHAR (7)"


@pytest.mark.parametrize("limit", [0, -1, 4001, "40", True])
def test_varchar_limit_is_validated(limit):
    with pytest.raises(InvalidColumnDefinitionError):
        VarcharColumnDef("col", limit=limit)


def test_varchar_limit_is_required():
    with pytest.raises(TypeError):
        VarcharColumnDef("col")  # type: ignore[call-arg]


def test_varchar_accepts_max_limit():
    column = VarcharColumnDef("col", limit=4000)
    assert column.generate_sql_type(get_dialect("MSSQL")) == "NVARCHAR (4000)"


def test_decimal_precision_and_scale():
    column = DecimalColumnDef("col", precision=10, scale=2)
    assert column.generate_sql_type(get_dialect("POSTGRESQL")) == "NUMERIC (10,2)"
    assert column.generate_sql_type(get_dialect("MYSQL")) == "DECIMAL (10,2)"


@pytest.mark.parametrize("precision, scale", [(0, 0), (-1, 0), (10, 11), (10, -1)])
def test_decimal_parameters_are_validated(precision, scale):
    with pytest.raises(InvalidColumnDefinitionError):
        DecimalColumnDef("col", precision=precision, scale=scale)
