"""
Logging utility for subsearch.

The library logs through loguru but stays silent by default: importing
subsearch disables its loguru records so an application embedding the
matchers sees nothing unless it opts in. The CLI opts in by calling
configure_logging(), which sends records to STDERR so that STDOUT carries
only search results.
"""

import sys

from loguru import logger as loguru_logger

from subsearch.config import is_debug_enabled

LOG_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {name}:{function} - {message}"


def configure_logging(verbose: bool = False) -> None:
    """
    Enable subsearch logging on STDERR.

    Args:
        verbose: Log at DEBUG instead of INFO. DEBUG=true has the same effect.
    """
    level = "DEBUG" if verbose or is_debug_enabled() else "INFO"
    loguru_logger.remove()
    loguru_logger.add(sys.stderr, level=level, format=LOG_FORMAT)
    loguru_logger.enable("subsearch")


def disable_logging() -> None:
    """Silence subsearch records (the library default)."""
    loguru_logger.disable("subsearch")


# Export loguru logger for direct use
logger = loguru_logger
