"""Argument validation and symbol helpers shared by all matchers.

A pattern or text is either a ``str`` (symbols are characters, coded with
``ord``) or binary data (symbols are byte values). Binary input is copied
into immutable ``bytes`` so a compiled matcher can never observe a change.
"""

from __future__ import annotations

from subsearch.types.errors import ErrorCode, ErrorContext, InvalidArgumentError

_BINARY_TYPES = (bytes, bytearray, memoryview)


def coerce_symbols(value: object, role: str = "pattern") -> str | bytes:
    """Validate a pattern or text argument and return an immutable copy.

    Args:
        value: The candidate pattern or text.
        role: Argument name used in error messages.

    Returns:
        The value itself for ``str`` and ``bytes``, a ``bytes`` copy otherwise.

    Raises:
        InvalidArgumentError: If the value is None or not str/bytes-like.
    """
    if value is None:
        raise InvalidArgumentError(
            f"{role} must not be None",
            code=ErrorCode.MISSING_ARGS,
            context=ErrorContext(operation="validate", additional_info={"argument": role}),
        )
    if isinstance(value, (str, bytes)):
        return value
    if isinstance(value, _BINARY_TYPES):
        return bytes(value)
    raise InvalidArgumentError(
        f"{role} must be str or bytes-like, got {type(value).__name__}",
        context=ErrorContext(operation="validate", additional_info={"argument": role}),
    )


def prepare_text(pattern: str | bytes, text: object) -> str | bytes:
    """Validate a text against the kind of an already compiled pattern."""
    text = coerce_symbols(text, role="text")
    if isinstance(pattern, str) != isinstance(text, str):
        raise InvalidArgumentError(
            "pattern and text must both be str or both be bytes-like",
            code=ErrorCode.MIXED_SYMBOL_KINDS,
            context=ErrorContext(
                operation="search",
                additional_info={
                    "pattern_type": type(pattern).__name__,
                    "text_type": type(text).__name__,
                },
            ),
        )
    return text


def check_start(start: int) -> None:
    """Reject a negative or non-integer search start."""
    if isinstance(start, bool) or not isinstance(start, int) or start < 0:
        raise InvalidArgumentError(f"start must be a non-negative integer, got {start!r}")


def symbol_code(symbol: str | int) -> int:
    """Integer code of a single symbol (a 1-char str or a byte value)."""
    return ord(symbol) if isinstance(symbol, str) else symbol


def validate_alphabet_size(alphabet_size: int | None) -> int | None:
    """Check an alphabet size option; None selects sparse tables."""
    if alphabet_size is None:
        return None
    if isinstance(alphabet_size, bool) or not isinstance(alphabet_size, int) or alphabet_size < 1:
        raise InvalidArgumentError(
            f"alphabet_size must be a positive integer or None, got {alphabet_size!r}"
        )
    return alphabet_size


def out_of_alphabet(symbol: str | int, alphabet_size: int, operation: str) -> InvalidArgumentError:
    """Build the error raised when a symbol falls outside the alphabet."""
    code = symbol_code(symbol)
    return InvalidArgumentError(
        f"symbol {symbol!r} (code {code}) is outside the alphabet of size {alphabet_size}",
        code=ErrorCode.SYMBOL_OUT_OF_ALPHABET,
        context=ErrorContext(
            operation=operation,
            additional_info={"symbol_code": code, "alphabet_size": alphabet_size},
        ),
    )


def check_alphabet(pattern: str | bytes, alphabet_size: int | None) -> None:
    """Raise if any pattern symbol lies outside a bounded alphabet."""
    if alphabet_size is None:
        return
    for symbol in pattern:
        if symbol_code(symbol) >= alphabet_size:
            raise out_of_alphabet(symbol, alphabet_size, operation="compile")
