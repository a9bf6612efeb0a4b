"""Shared constants and helpers for subsearch.

Centralizes alphabet defaults, the not-found sentinel, benchmark inputs,
and timezone-aware datetime helpers.
"""

from datetime import datetime, timezone


def utcnow() -> datetime:
    """Return the current UTC time as a timezone-aware datetime.

    Usable directly as a ``default_factory`` in dataclass fields.
    """
    return datetime.now(timezone.utc)


# Dense tables are sized to the extended ASCII alphabet unless told otherwise.
EXTENDED_ASCII: int = 256

# Returned by every matcher's search() when the pattern does not occur,
# following the str.find convention.
NOT_FOUND: int = -1

DEFAULT_ALGORITHM: str = "boyer-moore"

# Modulus for the Rabin-Karp rolling hash.
RABIN_KARP_PRIME: int = 10963707205259

# Pathological benchmark input: 52 'A's then a 'B', searched in 'A' * N + 'B'.
PATHOLOGICAL_PATTERN: str = "A" * 52 + "B"
PATHOLOGICAL_TEXT_SIZE: int = 10_000_000

# Patterns used by `subsearch bench` when none are given on the command line.
DEFAULT_BENCH_PATTERNS: list[str] = [
    "ACABACACD",
    "test pattern",
    "variations",
    "this is just a long random pattern to match",
]
