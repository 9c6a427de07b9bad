"""Logging context utilities for structured logging.

Context set here lives in structlog's contextvars, so every message logged
through ``get_logger`` (including the builders' own output) carries it once
``structlog.contextvars.merge_contextvars`` is in the processor chain, as it
is after ``setup_logging()``.
"""

from typing import Any

import structlog


def get_log_context() -> dict[str, Any]:
    """Get the current logging context.

    Returns:
        Copy of the context bound in this execution context
    """
    return dict(structlog.contextvars.get_contextvars())


def set_log_context(context: dict[str, Any]) -> None:
    """Replace the logging context.

    Args:
        context: Dictionary with logging context data
    """
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(**context)


def update_log_context(key: str, value: Any) -> None:
    """Update a single key in the logging context.

    Args:
        key: Context key to update
        value: Value to set
    """
    structlog.contextvars.bind_contextvars(**{key: value})


def clear_log_context() -> None:
    """Clear the current logging context."""
    structlog.contextvars.clear_contextvars()
