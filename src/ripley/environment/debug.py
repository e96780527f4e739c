"""Opt-in debug trace of the compiler.

The compiler logs element names, property maps and child counts to the
``ripley`` logger at DEBUG level. Nothing is written anywhere unless the
application configures logging or ``RIPLEY_DEBUG`` is set, in which case
trace lines are appended to ``ripley.debug`` (or ``RIPLEY_DEBUG_FILE``).

Logging is observational only: compiled programs are identical with or
without it.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

LOGGER_NAME = "ripley"
DEFAULT_DEBUG_FILE = "ripley.debug"

logger = logging.getLogger(LOGGER_NAME)
logger.addHandler(logging.NullHandler())

# Handler → logger level in effect before `enable_debug_log` installed it
_previous_levels: dict[logging.Handler, int] = {}


def debug_requested() -> bool:
    """Check whether the ``RIPLEY_DEBUG`` environment flag is set."""
    return bool(os.environ.get("RIPLEY_DEBUG"))


def enable_debug_log(path: str | Path | None = None) -> logging.Handler:
    """Append compiler trace lines to a file.

    Args:
        path: Target file. Defaults to ``RIPLEY_DEBUG_FILE`` or ``ripley.debug``.

    Returns:
        The installed handler, so callers can remove it again.
    """
    if path is None:
        path = os.environ.get("RIPLEY_DEBUG_FILE") or DEFAULT_DEBUG_FILE
    handler = logging.FileHandler(path, mode="a", encoding="utf-8", delay=True)
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter("%(message)s"))
    _previous_levels[handler] = logger.level
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    return handler


def disable_debug_log(handler: logging.Handler) -> None:
    """Detach and close a handler installed by `enable_debug_log`.

    Restores the logger level that was in effect before the handler was
    installed.
    """
    logger.removeHandler(handler)
    handler.close()
    if handler in _previous_levels:
        logger.setLevel(_previous_levels.pop(handler))


# Read once at import
_DEBUG_ENABLED = debug_requested()

if _DEBUG_ENABLED:
    enable_debug_log()
