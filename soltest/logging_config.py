"""Diagnostic logging for soltest.

Results meant for the user go through :mod:`soltest.report`; these loggers
carry debugging detail (resolved commands, fixture discovery, cleanup).
"""

import logging
import sys


def setup_logging(level: str = "WARNING") -> None:
    """Install a single stderr handler on the ``soltest`` logger."""
    logger = logging.getLogger("soltest")
    logger.setLevel(getattr(logging, level.upper()))
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Get logger for specific module."""
    if not name.startswith("soltest."):
        name = f"soltest.{name}"
    return logging.getLogger(name)
