"""
subsearch interfaces.

This module exports the protocol implemented by every matcher.
"""

from .matcher import SubstringMatcher, Symbols

__all__ = [
    "SubstringMatcher",
    "Symbols",
]
