"""
Utility helpers shared across ddlforge packages.
"""

from .logging import (
    configure_logging,
    correlation_scope,
    current_correlation_id,
    get_correlation_id,
    get_logger,
    set_correlation_id,
)

__all__ = [
    "configure_logging",
    "correlation_scope",
    "current_correlation_id",
    "get_correlation_id",
    "get_logger",
    "set_correlation_id",
]
