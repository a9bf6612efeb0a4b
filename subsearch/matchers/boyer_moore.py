"""Boyer-Moore substring search with the bad-character and good-suffix rules.

Compiling a pattern builds three artifacts:

- a last-occurrence table for the bad-character rule,
- a suffix Z-array, where ``z[i]`` is the length of the longest substring
  ending at ``i`` that is also a suffix of the pattern,
- a shift table for the good-suffix rule, derived from the Z-array.

The Z-array is only needed while the shift table is built and is not kept
on the compiled matcher. Search is sublinear on typical inputs and linear
in the length of the text in the worst case.
"""

from __future__ import annotations

from typing import Any, Iterator, Sequence

from subsearch.constants import NOT_FOUND
from subsearch.interfaces.matcher import Symbols
from subsearch.matchers._tables import UNSET, LastOccurrenceTable, resolve_alphabet_size
from subsearch.utils.logger import logger
from subsearch.utils.symbols import check_start, coerce_symbols, prepare_text


def compute_suffix_z(pattern: Sequence) -> list[int]:
    """Compute the suffix Z-array of a pattern.

    This is the Z algorithm run backwards: instead of matching prefixes from
    the start of the string, it matches suffixes from the end. It maintains
    the interval [left, right] with minimal ``left`` such that
    ``pattern[left..right]`` is a suffix substring.

    If ``index < left`` nothing known covers ``index``, so the suffix is
    compared backwards against ``pattern[..index]`` directly and the
    interval restarts at ``index``.

    Otherwise ``pattern[left..index]`` mirrors a region ending at
    ``start = size - 1 - right + index`` that was already analysed. If
    ``z[start]`` stops short of ``left`` it is the answer. If not, the match
    may reach further left than the interval, so ``left`` is extended by
    direct comparison.

    ``z[size - 1]`` is not computed (it would trivially be ``size``) and is
    left at 0.

    Args:
        pattern: Sequence of symbols.

    Returns:
        List of ``len(pattern)`` suffix match lengths.
    """
    size = len(pattern)
    z = [0] * size
    left = size - 1
    right = size - 1
    for index in range(size - 2, -1, -1):
        if index < left:
            count = 0
            while count <= index and pattern[size - 1 - count] == pattern[index - count]:
                count += 1
            z[index] = count
            right = index
            left = right - count + 1
        else:
            start = size - 1 - right + index
            if z[start] < index - left + 1:
                z[index] = z[start]
            else:
                right = index
                distance = size - 1 - index
                while left > 0 and pattern[left - 1] == pattern[left - 1 + distance]:
                    left -= 1
                z[index] = right - left + 1
    return z


def compute_borders(z: Sequence[int]) -> list[int]:
    """Lengths of the proper prefixes that are also suffixes, ascending.

    A prefix ``pattern[0..i]`` is a suffix exactly when ``z[i] == i + 1``.
    """
    return [z[i] for i in range(len(z) - 1) if z[i] == i + 1]


def compute_good_suffix_shift(z: Sequence[int], borders: Sequence[int] | None = None) -> tuple[int, ...]:
    """Build the good-suffix shift table from a suffix Z-array.

    ``shift[i]`` is how far the pattern may move right after a mismatch at
    ``i`` once ``pattern[i + 1..]`` has matched the text.

    First pass: a substring ending at ``index`` that matches a suffix of
    length ``z[index]`` (and no longer) is a re-occurrence of the good suffix
    seen when the mismatch is at ``size - 1 - z[index]``. Scanning
    ``index`` downwards means the rightmost re-occurrence, the smallest
    shift, claims each slot first.

    Second pass: slots still empty have no re-occurrence, so the pattern
    moves until its longest border no longer than the matched suffix lines
    up with the end of that suffix, or past it entirely if there is none.

    ``borders`` may be passed in when the caller already has
    ``compute_borders(z)``.

    Every entry is at least 1 and ``shift[size - 1]`` is 1.
    """
    size = len(z)
    if size == 0:
        return ()
    shift = [0] * size
    # a mismatch on the last character can only move one position
    shift[size - 1] = 1

    for index in range(size - 2, -1, -1):
        suffix_length = z[index]
        if suffix_length == 0:
            continue
        mismatch_at = size - 1 - suffix_length
        if shift[mismatch_at] == 0:
            shift[mismatch_at] = size - 1 - index

    if borders is None:
        borders = compute_borders(z)
    border = 0
    position = 0
    for index in range(size - 2, -1, -1):
        while position < len(borders) and size - borders[position] > index:
            border = borders[position]
            position += 1
        if shift[index] == 0:
            shift[index] = size - border
    return tuple(shift)


class BoyerMooreMatcher:
    """Compiled full Boyer-Moore matcher.

    The tables are immutable once built, so one matcher can be shared by
    any number of threads searching concurrently.

    Example:
        matcher = BoyerMooreMatcher("ABABAC")
        matcher.search("ABABABABAC")  # 4
    """

    name = "boyer-moore"

    __slots__ = ("_pattern", "_size", "_last_occurrence", "_shift", "_match_shift")

    def __init__(self, pattern: Symbols, alphabet_size: Any = UNSET) -> None:
        """Compile a pattern.

        Args:
            pattern: Pattern to search for; str or bytes-like.
            alphabet_size: Dense table size, or None for an unbounded
                alphabet. Defaults to SUBSEARCH_ALPHABET_SIZE, else 256.

        Raises:
            InvalidArgumentError: If the pattern is missing, of the wrong
                type, or holds a symbol outside the alphabet.
        """
        self._pattern = coerce_symbols(pattern)
        self._size = len(self._pattern)
        alphabet_size = resolve_alphabet_size(alphabet_size)
        self._last_occurrence = LastOccurrenceTable(self._pattern, alphabet_size)
        z = compute_suffix_z(self._pattern)
        borders = compute_borders(z)
        self._shift = compute_good_suffix_shift(z, borders)
        # after a full match, move by the pattern's period
        self._match_shift = self._size - (borders[-1] if borders else 0)
        logger.debug(
            f"Compiled {self.name} matcher: pattern length {self._size}, "
            f"alphabet {alphabet_size or 'unbounded'}"
        )

    @property
    def pattern(self) -> str | bytes:
        return self._pattern

    @property
    def last_occurrence(self) -> LastOccurrenceTable:
        return self._last_occurrence

    @property
    def shift(self) -> tuple[int, ...]:
        return self._shift

    @property
    def match_shift(self) -> int:
        """Advance applied after a full match when collecting every occurrence."""
        return self._match_shift

    def search(self, text: Symbols, start: int = 0) -> int:
        """Return the first match index >= start, or NOT_FOUND."""
        text = prepare_text(self._pattern, text)
        check_start(start)
        if self._size == 0:
            return start if start <= len(text) else NOT_FOUND
        return next(self._scan(text, start), NOT_FOUND)

    def search_all(self, text: Symbols) -> Iterator[int]:
        """Yield every match index in increasing order, overlaps included."""
        text = prepare_text(self._pattern, text)
        if self._size == 0:
            return iter(range(len(text) + 1))
        return self._scan(text, 0)

    def _scan(self, text: str | bytes, position: int) -> Iterator[int]:
        pattern = self._pattern
        size = self._size
        last_occurrence = self._last_occurrence
        shift = self._shift
        last_start = len(text) - size
        while position <= last_start:
            offset = size - 1
            while offset >= 0 and text[position + offset] == pattern[offset]:
                offset -= 1
            if offset < 0:
                yield position
                position += self._match_shift
                continue
            skip = offset - last_occurrence[text[position + offset]]
            if skip < shift[offset]:
                skip = shift[offset]
            position += skip

    def __repr__(self) -> str:
        return f"BoyerMooreMatcher(pattern={self._pattern!r})"
