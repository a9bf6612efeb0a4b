"""
Structured error handling for subsearch.

Every error raised by the library derives from SubsearchError, which carries
a machine-readable code, a user-facing message, a severity and an optional
context describing the failed operation.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, IntEnum
from typing import Any

from subsearch.constants import utcnow


class ErrorCode(IntEnum):
    """Internal error codes for categorization."""

    # Argument Errors (1000-1999)
    INVALID_ARGS = 1001
    MISSING_ARGS = 1002
    SYMBOL_OUT_OF_ALPHABET = 1003
    MIXED_SYMBOL_KINDS = 1004
    UNKNOWN_ALGORITHM = 1005

    # Configuration Errors (2000-2999)
    INVALID_CONFIG = 2001

    # Input Source Errors (3000-3999)
    SOURCE_READ_FAILED = 3001


class ErrorSeverity(str, Enum):
    """Error severity levels."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


@dataclass
class ErrorContext:
    """Context information for an error."""

    operation: str | None = None
    component: str | None = None
    timestamp: datetime = field(default_factory=utcnow)
    additional_info: dict[str, Any] = field(default_factory=dict)


class SubsearchError(Exception):
    """Base error class for subsearch."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        user_message: str,
        severity: str = ErrorSeverity.MEDIUM,
        context: ErrorContext | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.severity = severity
        self.user_message = user_message
        self.context = context or ErrorContext()
        self.original_error = original_error

        self.context.timestamp = utcnow()

    def get_formatted_message(self) -> str:
        """Get a formatted error message for display to users."""
        parts = [
            f"[Error] {self.user_message}",
            f"   Code: {self.code.value}",
        ]

        if self.context.operation:
            parts.append(f"   Operation: {self.context.operation}")
        if self.context.component:
            parts.append(f"   Component: {self.context.component}")
        for key, value in self.context.additional_info.items():
            parts.append(f"   {key}: {value}")

        return "\n".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return {
            "name": self.__class__.__name__,
            "code": self.code.value,
            "message": str(self),
            "user_message": self.user_message,
            "severity": self.severity,
            "context": {
                "operation": self.context.operation,
                "component": self.context.component,
                "timestamp": self.context.timestamp.isoformat(),
                "additional_info": self.context.additional_info,
            },
            "original_error": str(self.original_error) if self.original_error else None,
        }


class InvalidArgumentError(SubsearchError, ValueError):
    """A pattern, text or option is absent, malformed, or outside the alphabet."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INVALID_ARGS,
        user_message: str | None = None,
        context: ErrorContext | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(
            code=code,
            message=message,
            user_message=user_message or message,
            severity=ErrorSeverity.LOW,
            context=context,
            original_error=original_error,
        )


class ConfigurationError(SubsearchError):
    """Error related to configuration issues."""

    def __init__(
        self,
        message: str,
        user_message: str | None = None,
        context: ErrorContext | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.INVALID_CONFIG,
            message=message,
            user_message=user_message or "Configuration error. Check your environment settings.",
            severity=ErrorSeverity.HIGH,
            context=context,
            original_error=original_error,
        )


class SourceError(SubsearchError):
    """Error reading the text to be searched."""

    def __init__(
        self,
        message: str,
        user_message: str | None = None,
        context: ErrorContext | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.SOURCE_READ_FAILED,
            message=message,
            user_message=user_message or "Could not read the search text.",
            severity=ErrorSeverity.MEDIUM,
            context=context,
            original_error=original_error,
        )
