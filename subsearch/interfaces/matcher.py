"""Matcher interface shared by every substring search algorithm.

Each algorithm compiles a pattern once into an immutable object that can
then be searched against any number of texts. Implementations are
independent classes that satisfy this protocol; none inherits from another.
"""

from typing import Iterator, Protocol, Union, runtime_checkable

# A pattern or text: a str, or binary data whose symbols are byte values.
Symbols = Union[str, bytes, bytearray, memoryview]


@runtime_checkable
class SubstringMatcher(Protocol):
    """Protocol for a compiled substring matcher."""

    name: str

    @property
    def pattern(self) -> str | bytes:
        """The compiled pattern (immutable)."""
        ...

    def search(self, text: Symbols, start: int = 0) -> int:
        """Find the first occurrence of the pattern.

        Args:
            text: Text to search, of the same kind (str or binary) as the pattern.
            start: Smallest index at which a match may begin.

        Returns:
            The smallest match index >= start, or NOT_FOUND (-1).
        """
        ...

    def search_all(self, text: Symbols) -> Iterator[int]:
        """Yield every match index in increasing order, overlaps included.

        Args:
            text: Text to search.

        Yields:
            Start index of each occurrence.
        """
        ...
