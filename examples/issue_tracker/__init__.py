"""
Issue tracker schema showcasing the ddlforge table builder.
"""

from .demo import render_migration, run_demo
from .tables import TABLES

__all__ = ["TABLES", "render_migration", "run_demo"]
