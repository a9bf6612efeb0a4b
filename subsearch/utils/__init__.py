"""
subsearch utilities.

This module exports logging, timing and argument-validation helpers.
"""

from .logger import configure_logging, disable_logging, logger
from .symbols import (
    check_alphabet,
    check_start,
    coerce_symbols,
    out_of_alphabet,
    prepare_text,
    symbol_code,
    validate_alphabet_size,
)
from .timing import Timing, timed

__all__ = [
    # Logging
    "logger",
    "configure_logging",
    "disable_logging",
    # Timing
    "Timing",
    "timed",
    # Symbols
    "coerce_symbols",
    "prepare_text",
    "check_start",
    "check_alphabet",
    "symbol_code",
    "out_of_alphabet",
    "validate_alphabet_size",
]
