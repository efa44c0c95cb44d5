"""
Logging infrastructure for User Directory.

Exports logging configuration and utilities.
"""

from user_directory.infrastructure.logging.logging_config import (
    configure_logging,
    get_logger,
    bind_context,
    clear_context,
)

__all__ = [
    "configure_logging",
    "get_logger",
    "bind_context",
    "clear_context",
]
