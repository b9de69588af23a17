"""
Table declarations for the ddlforge issue tracker example.
"""

from __future__ import annotations

from typing import Callable, List

from ddlforge.core import (
    BigIntegerColumnDef,
    BooleanColumnDef,
    ClobColumnDef,
    DecimalColumnDef,
    IntegerColumnDef,
    TinyIntColumnDef,
    VarcharColumnDef,
)
from ddlforge.dialects import Dialect
from ddlforge.schema import ColumnFlag, CreateTableBuilder


def create_projects(dialect: Dialect) -> List[str]:
    return (
        CreateTableBuilder(dialect, "projects")
        .add_pk_column(IntegerColumnDef("id", nullable=False), ColumnFlag.AUTO_INCREMENT)
        .add_column(VarcharColumnDef("kee", nullable=False, limit=400))
        .add_column(VarcharColumnDef("name", limit=2000))
        .add_column(BooleanColumnDef("enabled", nullable=False))
        .build()
    )


def create_issues(dialect: Dialect) -> List[str]:
    return (
        CreateTableBuilder(dialect, "issues")
        .add_pk_column(BigIntegerColumnDef("id", nullable=False), ColumnFlag.AUTO_INCREMENT)
        .add_column(IntegerColumnDef("project_id", nullable=False))
        .add_column(VarcharColumnDef("title", nullable=False, limit=200))
        .add_column(ClobColumnDef("description"))
        .add_column(TinyIntColumnDef("severity"))
        .add_column(DecimalColumnDef("effort", precision=30, scale=10))
        .build()
    )


def create_labels(dialect: Dialect) -> List[str]:
    return (
        CreateTableBuilder(dialect, "labels")
        .add_pk_column(VarcharColumnDef("name", nullable=False, limit=40))
        .add_column(VarcharColumnDef("color", limit=7, ignore_oracle_unit=True))
        .build()
    )


def create_issue_labels(dialect: Dialect) -> List[str]:
    return (
        CreateTableBuilder(dialect, "issue_labels")
        .add_pk_column(BigIntegerColumnDef("issue_id", nullable=False))
        .add_pk_column(VarcharColumnDef("label_name", nullable=False, limit=40))
        .with_pk_constraint_name("pk_issue_labels_assoc")
        .build()
    )


TABLES: List[Callable[[Dialect], List[str]]] = [
    create_projects,
    create_issues,
    create_labels,
    create_issue_labels,
]
