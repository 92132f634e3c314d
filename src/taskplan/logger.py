"""Logging configuration for taskplan with custom verbosity levels."""

from __future__ import annotations

import logging
import sys
from typing import Any, TextIO

# Custom levels between the standard ones
CHANGES_LEVEL = 25  # Between INFO (20) and WARNING (30) - verbosity level 1
CHECKS_LEVEL = 15  # Between DEBUG (10) and INFO (20) - verbosity level 2

logging.addLevelName(CHANGES_LEVEL, "CHANGES")
logging.addLevelName(CHECKS_LEVEL, "CHECKS")

VERBOSITY_SILENT = 0  # Only errors
VERBOSITY_CHANGES = 1  # Show placements and schedule summaries
VERBOSITY_CHECKS = 2  # Show queue activity and ordering decisions
VERBOSITY_DEBUG = 3  # Full debug output


class TaskplanLogger(logging.Logger):
    """Logger with semantic verbosity methods.

    - changes(): verbosity level 1 - tasks placed on the timeline
    - checks(): verbosity level 2 - queue and ordering decisions
    - debug(): verbosity level 3 - full algorithm details
    """

    def changes(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Log changes (verbosity level 1)."""
        if self.isEnabledFor(CHANGES_LEVEL):
            self._log(CHANGES_LEVEL, msg, args, **kwargs)

    def checks(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Log checks (verbosity level 2)."""
        if self.isEnabledFor(CHECKS_LEVEL):
            self._log(CHECKS_LEVEL, msg, args, **kwargs)


def get_logger() -> TaskplanLogger:
    """Get the taskplan logger instance (singleton).

    Use setup_logger() to configure it before first use.
    """
    logging.setLoggerClass(TaskplanLogger)
    logger = logging.getLogger("taskplan")
    assert isinstance(logger, TaskplanLogger)
    return logger


def setup_logger(verbosity: int, stream: TextIO | None = None) -> None:
    """Configure the taskplan logger with a verbosity level.

    Can be called multiple times to reconfigure the logger.

    Args:
        verbosity: 0=silent (errors only), 1=changes, 2=checks, 3=debug
        stream: Optional output stream (defaults to sys.stderr, useful for testing)
    """
    logger = get_logger()
    logger.handlers.clear()

    level_map = {
        VERBOSITY_SILENT: logging.ERROR,
        VERBOSITY_CHANGES: CHANGES_LEVEL,
        VERBOSITY_CHECKS: CHECKS_LEVEL,
        VERBOSITY_DEBUG: logging.DEBUG,
    }
    logger.setLevel(level_map.get(verbosity, logging.ERROR))

    output_stream = stream if stream is not None else sys.stderr

    # No level prefix; messages are meant to be read as a trace
    handler = logging.StreamHandler(output_stream)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.propagate = False


def reset_logger() -> None:
    """Reset the logger to clean state.

    Useful for testing to ensure clean state between tests.
    """
    logger = get_logger()
    logger.handlers.clear()
    logger.setLevel(logging.ERROR)


def changes_enabled() -> bool:
    """Check if changes-level logging is enabled (verbosity >= 1)."""
    return get_logger().isEnabledFor(CHANGES_LEVEL)


def checks_enabled() -> bool:
    """Check if checks-level logging is enabled (verbosity >= 2)."""
    return get_logger().isEnabledFor(CHECKS_LEVEL)


def debug_enabled() -> bool:
    """Check if debug-level logging is enabled (verbosity >= 3)."""
    return get_logger().isEnabledFor(logging.DEBUG)
