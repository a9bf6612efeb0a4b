"""Text sources for CLI commands.

A source is a file path, or ``-`` for standard input. Text mode decodes
UTF-8 and drops undecodable bytes; binary mode returns the raw bytes.
"""

from __future__ import annotations

from pathlib import Path

import click

from subsearch.types.errors import ErrorContext, SourceError
from subsearch.utils.logger import logger

STDIN = "-"


def load_text(source: str | None, binary: bool = False) -> str | bytes:
    """Read the text to search.

    Args:
        source: File path, or ``-``/None for standard input.
        binary: Return bytes instead of decoded text.

    Returns:
        The full contents of the source.

    Raises:
        SourceError: If the file cannot be read.
    """
    if source is None or source == STDIN:
        if binary:
            return click.get_binary_stream("stdin").read()
        return click.get_text_stream("stdin").read()

    path = Path(source)
    try:
        if binary:
            text = path.read_bytes()
        else:
            text = path.read_text(encoding="utf-8", errors="ignore")
    except OSError as e:
        raise SourceError(
            f"Cannot read {path}: {e}",
            user_message=f"Cannot read search text from {path}",
            context=ErrorContext(operation="load", component="cli", additional_info={"path": str(path)}),
            original_error=e,
        ) from e

    logger.debug(f"Loaded {len(text)} symbols from {path}")
    return text
