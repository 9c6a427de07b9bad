"""Structured logging module.

This module provides utilities for structured logging using structlog.
"""

from .context import (
    clear_log_context,
    get_log_context,
    set_log_context,
    update_log_context,
)
from .setup import get_logger, setup_logging

__all__ = [
    "clear_log_context",
    # Context management
    "get_log_context",
    # Setup
    "get_logger",
    "set_log_context",
    "setup_logging",
    "update_log_context",
]
