"""
subsearch - Substring search algorithms behind one compile/search contract.

Provides:
- Full Boyer-Moore (bad-character and good-suffix rules), the default
- Bad-character-only Boyer-Moore, Knuth-Morris-Pratt (failure array and
  DFA), Z-algorithm and Rabin-Karp matchers
- A brute-force reference matcher
- A command line for searching files and timing the algorithms

Usage:
    import subsearch

    subsearch.search("ABABAC", "ABABABABAC")  # 4
    matcher = subsearch.compile(b"needle")
    matcher.search(b"haystack with a needle")  # 16
"""

__version__ = "0.1.0"

from subsearch.constants import NOT_FOUND
from subsearch.matchers import (
    BadCharacterMatcher,
    BoyerMooreMatcher,
    KMPDfaMatcher,
    KMPMatcher,
    NaiveMatcher,
    RabinKarpMatcher,
    ZMatcher,
    available_algorithms,
    compile,
    search,
    search_all,
)
from subsearch.types.errors import InvalidArgumentError, SubsearchError
from subsearch.utils.logger import disable_logging

# Library default: silent until an application (or the CLI) enables it.
disable_logging()

__all__ = [
    "__version__",
    "NOT_FOUND",
    "compile",
    "search",
    "search_all",
    "available_algorithms",
    "BoyerMooreMatcher",
    "BadCharacterMatcher",
    "KMPMatcher",
    "KMPDfaMatcher",
    "ZMatcher",
    "RabinKarpMatcher",
    "NaiveMatcher",
    "SubsearchError",
    "InvalidArgumentError",
]
