"""
Schema utilities producing DDL statements.
"""

from .builder import ColumnFlag, CreateTableBuilder

__all__ = ["ColumnFlag", "CreateTableBuilder"]
