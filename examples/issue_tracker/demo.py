"""
Render the issue tracker schema as a migration script for any backend.
"""

from __future__ import annotations

import sys
from typing import List

from ddlforge.dialects import Dialect, get_dialect
from ddlforge.utils import correlation_scope, get_logger

from .tables import TABLES

MIGRATION_NAME = "0001_issue_tracker"

logger = get_logger("examples.issue_tracker")


def render_migration(dialect: Dialect) -> List[str]:
    """
    Return every statement of the initial migration, in execution order.
    """

    statements: List[str] = []
    with correlation_scope(MIGRATION_NAME):
        for create_table in TABLES:
            statements.extend(create_table(dialect))
        logger.info("Rendered %s statements for %s", len(statements), dialect.id)
    return statements


def run_demo(dialect_name: str = "postgresql") -> str:
    """
    Render the migration for ``dialect_name`` as a script, one statement per
    line with the separator expected by the target's command line client.
    """

    dialect = get_dialect(dialect_name)
    separator = "\n/" if dialect.id == "ORACLE" else ";"
    return "\n".join(f"{statement}{separator}" for statement in render_migration(dialect))


if __name__ == "__main__":
    print(run_demo(sys.argv[1] if len(sys.argv) > 1 else "postgresql"))
