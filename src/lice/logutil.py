"""Logging for lice runs.

Diagnostics (skipped files, unreadable directories, malformed headers) go to
stderr through the ``lice`` logger; per-file progress is printed by the CLI
and never passes through here. Worker threads share the logger, so lines
from different files may interleave.
"""
from __future__ import annotations

import logging
import sys
from typing import Dict, Optional

LOGGER_NAME = "lice"
LOG_FORMAT = "[%(name)s] %(levelname)s: %(message)s"

# -v count => level; anything above the table means "everything"
_VERBOSE_LEVELS: Dict[int, int] = {
    0: logging.WARNING,  # malformed blocks, read/write failures
    1: logging.INFO,  # unsupported extensions, exclusions, execution mode
}

_logger: Optional[logging.Logger] = None


def get_logger() -> logging.Logger:
    """Return the shared ``lice`` logger, attaching a stderr handler on first use.

    A handler is only attached when the embedding program has not configured
    one itself.
    """
    global _logger
    if _logger is None:
        logger = logging.getLogger(LOGGER_NAME)
        if not logger.handlers:
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            logger.addHandler(handler)
        logger.setLevel(_VERBOSE_LEVELS[0])
        _logger = logger
    return _logger


def set_verbosity(verbose: int = 0, quiet: bool = False) -> None:
    """Apply the CLI's -v/-q flags; -q wins and keeps only errors."""
    if quiet:
        level = logging.ERROR
    else:
        level = _VERBOSE_LEVELS.get(max(0, verbose), logging.DEBUG)
    get_logger().setLevel(level)

__all__ = ["LOGGER_NAME", "get_logger", "set_verbosity"]
