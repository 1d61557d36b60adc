"""Logging configuration for doctree.

Diagnostics go to stderr so that command output on stdout stays clean.
The level can be raised or lowered with DOCTREE_LOG_LEVEL (e.g. DEBUG).
"""

import logging
import os
import sys

logger = logging.getLogger("doctree")


def _level_from_env(default: int = logging.INFO) -> int:
    name = os.environ.get("DOCTREE_LOG_LEVEL", "").upper()
    level = logging.getLevelName(name) if name else default
    # getLevelName returns "Level X" for unknown names
    return level if isinstance(level, int) else default


def setup_logger(level: int | None = None) -> None:
    """Attach the stderr handler to the doctree logger once.

    Args:
        level: Logging level. Defaults to DOCTREE_LOG_LEVEL, then INFO.
    """
    if logger.handlers:
        return

    if level is None:
        level = _level_from_env()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("doctree: %(levelname)s: %(message)s"))

    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False


setup_logger()
