"""Substring search algorithms.

This package provides interchangeable matchers that share the
SubstringMatcher contract: compile a pattern once, then search any number
of texts.

Components:
- BoyerMooreMatcher: bad-character and good-suffix rules (the default)
- BadCharacterMatcher: Boyer-Moore with the bad-character rule only
- KMPMatcher / KMPDfaMatcher: Knuth-Morris-Pratt automata
- ZMatcher: direct Z-algorithm search
- RabinKarpMatcher: rolling-hash search
- NaiveMatcher: brute-force reference

Usage:
    from subsearch.matchers import compile

    matcher = compile("ABABAC")
    matcher.search("ABABABABAC")  # 4
    list(matcher.search_all("ABABACABABAC"))  # [0, 6]
"""

from __future__ import annotations

from typing import Any, Iterator

from subsearch.constants import DEFAULT_ALGORITHM
from subsearch.interfaces.matcher import SubstringMatcher, Symbols
from subsearch.types.errors import ErrorCode, ErrorContext, InvalidArgumentError

from ._tables import LastOccurrenceTable
from .bad_character import BadCharacterMatcher
from .boyer_moore import (
    BoyerMooreMatcher,
    compute_borders,
    compute_good_suffix_shift,
    compute_suffix_z,
)
from .kmp import KMPDfaMatcher, KMPMatcher, compute_failure
from .naive import NaiveMatcher
from .rabin_karp import RabinKarpMatcher
from .z_search import ZMatcher, compute_z

MATCHERS: dict[str, type] = {
    BoyerMooreMatcher.name: BoyerMooreMatcher,
    BadCharacterMatcher.name: BadCharacterMatcher,
    KMPMatcher.name: KMPMatcher,
    KMPDfaMatcher.name: KMPDfaMatcher,
    ZMatcher.name: ZMatcher,
    RabinKarpMatcher.name: RabinKarpMatcher,
    NaiveMatcher.name: NaiveMatcher,
}

# Matchers whose tables depend on the alphabet.
ALPHABET_AWARE = frozenset(
    {
        BoyerMooreMatcher.name,
        BadCharacterMatcher.name,
        KMPDfaMatcher.name,
        RabinKarpMatcher.name,
    }
)

# Alphabet-aware matchers that also accept alphabet_size=None.
SPARSE_CAPABLE = ALPHABET_AWARE - {KMPDfaMatcher.name}


def available_algorithms() -> list[str]:
    """Names accepted by compile(), default first."""
    return [DEFAULT_ALGORITHM] + sorted(name for name in MATCHERS if name != DEFAULT_ALGORITHM)


def get_matcher_class(algorithm: str) -> type:
    """Look up a matcher class by registry name.

    Raises:
        InvalidArgumentError: If no matcher has that name.
    """
    try:
        return MATCHERS[algorithm]
    except (KeyError, TypeError) as e:
        raise InvalidArgumentError(
            f"Unknown algorithm {algorithm!r}; choose one of {', '.join(available_algorithms())}",
            code=ErrorCode.UNKNOWN_ALGORITHM,
            context=ErrorContext(operation="compile", additional_info={"algorithm": algorithm}),
            original_error=e,
        ) from e


def compile(pattern: Symbols, algorithm: str = DEFAULT_ALGORITHM, **options: Any) -> SubstringMatcher:
    """Compile a pattern with the named algorithm.

    Args:
        pattern: Pattern to search for; str or bytes-like.
        algorithm: Registry name, see available_algorithms().
        **options: Forwarded to the matcher (``alphabet_size`` for the
            alphabet-aware matchers).

    Returns:
        An immutable compiled matcher.
    """
    matcher_class = get_matcher_class(algorithm)
    if "alphabet_size" in options and algorithm not in ALPHABET_AWARE:
        options.pop("alphabet_size")
    return matcher_class(pattern, **options)


def search(
    pattern: Symbols,
    text: Symbols,
    algorithm: str = DEFAULT_ALGORITHM,
    start: int = 0,
    **options: Any,
) -> int:
    """Index of the first occurrence of ``pattern`` in ``text``, or NOT_FOUND."""
    return compile(pattern, algorithm, **options).search(text, start)


def search_all(
    pattern: Symbols,
    text: Symbols,
    algorithm: str = DEFAULT_ALGORITHM,
    **options: Any,
) -> Iterator[int]:
    """Every occurrence of ``pattern`` in ``text``, in increasing order."""
    return compile(pattern, algorithm, **options).search_all(text)


__all__ = [
    "MATCHERS",
    "ALPHABET_AWARE",
    "SPARSE_CAPABLE",
    "available_algorithms",
    "get_matcher_class",
    "compile",
    "search",
    "search_all",
    # Matchers
    "BoyerMooreMatcher",
    "BadCharacterMatcher",
    "KMPMatcher",
    "KMPDfaMatcher",
    "ZMatcher",
    "RabinKarpMatcher",
    "NaiveMatcher",
    # Preprocessing
    "LastOccurrenceTable",
    "compute_suffix_z",
    "compute_borders",
    "compute_good_suffix_shift",
    "compute_failure",
    "compute_z",
]
