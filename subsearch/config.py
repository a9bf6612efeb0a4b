"""Environment-driven configuration.

Environment variables:
- SUBSEARCH_ALPHABET_SIZE: integer alphabet size for dense tables, or
  ``unicode`` for sparse tables over an unbounded alphabet.
- DEBUG: ``true`` turns on debug logging in the CLI.
"""

import os

from subsearch.constants import EXTENDED_ASCII
from subsearch.types.errors import ConfigurationError

ALPHABET_ENV_VAR = "SUBSEARCH_ALPHABET_SIZE"

# Environment value selecting the sparse tables.
UNICODE_ALPHABET = "unicode"


def default_alphabet_size() -> int | None:
    """Return the process-wide default alphabet size.

    An integer selects a dense table of that size, ``unicode`` selects
    sparse tables (returned as ``None``), and an unset variable falls back
    to :data:`~subsearch.constants.EXTENDED_ASCII`.

    Raises:
        ConfigurationError: If the variable holds anything else.
    """
    raw = os.environ.get(ALPHABET_ENV_VAR, "").strip()
    if not raw:
        return EXTENDED_ASCII
    if raw.lower() == UNICODE_ALPHABET:
        return None
    try:
        size = int(raw)
    except ValueError as e:
        raise ConfigurationError(
            f"{ALPHABET_ENV_VAR} must be an integer or '{UNICODE_ALPHABET}', got {raw!r}",
            original_error=e,
        ) from e
    if size < 1:
        raise ConfigurationError(f"{ALPHABET_ENV_VAR} must be positive, got {size}")
    return size


def is_alphabet_configured() -> bool:
    """Check if SUBSEARCH_ALPHABET_SIZE overrides the built-in default."""
    return bool(os.environ.get(ALPHABET_ENV_VAR, "").strip())


def is_debug_enabled() -> bool:
    """Check if debug mode is enabled."""
    return os.environ.get("DEBUG", "").lower() == "true"
