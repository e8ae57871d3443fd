"""Logging utilities for the opcplc_harness package."""

import logging
import sys

# Global package logger
logger = logging.getLogger("opcplc-harness")

_configured = False


def setup_opcplc_logging(level: int | str = logging.INFO, force: bool = False) -> None:
    """
    Setup logging with a clean format for the opcplc_harness package.

    Safe to call from every entry point: it is a no-op once logging has been
    configured, unless ``force`` is set.

    Args:
        level: Logging level, as an int or a name such as "DEBUG" (default: INFO)
        force: If True, reconfigure even if already configured.
    """
    global _configured

    if _configured and not force:
        return

    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    # Remove existing handlers to avoid duplicates
    logger.handlers.clear()

    # Use stdout stream handler to ensure logs are dumped to stdout
    logging_handler = logging.StreamHandler(sys.stdout)
    logging_formatter = logging.Formatter("[opcplc-harness] [%(levelname)s] %(message)s")

    logging_handler.setFormatter(logging_formatter)
    logger.addHandler(logging_handler)
    logger.setLevel(level)
    logger.propagate = False  # Don't propagate to root logger

    _configured = True


__all__ = [
    "logger",
    "setup_opcplc_logging",
]
