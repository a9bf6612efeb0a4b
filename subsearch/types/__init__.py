"""
subsearch type definitions.

This module exports the error taxonomy shared by every matcher.
"""

from .errors import (
    ConfigurationError,
    ErrorCode,
    ErrorContext,
    ErrorSeverity,
    InvalidArgumentError,
    SourceError,
    SubsearchError,
)

__all__ = [
    "ErrorCode",
    "ErrorSeverity",
    "ErrorContext",
    "SubsearchError",
    "InvalidArgumentError",
    "ConfigurationError",
    "SourceError",
]
