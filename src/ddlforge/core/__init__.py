"""
Column definitions making up table descriptions.
"""

from .columns import (
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
]
