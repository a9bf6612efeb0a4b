"""Substring search with the Z algorithm.

The pattern and text are joined as ``pattern + sentinel + text`` and the Z
array of the joined sequence is computed; every position whose Z value
equals the pattern length starts an occurrence. The sentinel compares
unequal to every symbol, so no Z value can run across it. O(m + n) time
and space.
"""

from __future__ import annotations

from typing import Iterator, Sequence

from subsearch.constants import NOT_FOUND
from subsearch.interfaces.matcher import Symbols
from subsearch.utils.symbols import check_start, coerce_symbols, prepare_text


class _Sentinel:
    """Separator equal to nothing but itself."""

    def __repr__(self) -> str:
        return "<sentinel>"


_SENTINEL = _Sentinel()


def compute_z(sequence: Sequence) -> list[int]:
    """Compute the Z array of a sequence.

    ``z[i]`` is the length of the longest prefix of ``sequence[i..]`` that
    is also a prefix of ``sequence``; ``z[0]`` is left at 0.

    The interval [left, right] is the one with maximal ``right`` such that
    ``sequence[left..right]`` is a prefix substring. An index beyond
    ``right`` is matched directly. Inside the interval, ``z[index - left]``
    is reused when it ends before ``right``; otherwise matching resumes
    from ``right + 1``.
    """
    size = len(sequence)
    z = [0] * size
    left = 0
    right = 0
    for index in range(1, size):
        if index > right:
            count = 0
            while index + count < size and sequence[count] == sequence[index + count]:
                count += 1
            z[index] = count
            left = index
            right = index + count - 1
        else:
            mirrored = z[index - left]
            if mirrored < right - index + 1:
                z[index] = mirrored
            else:
                while right + 1 < size and sequence[right + 1] == sequence[right + 1 - index]:
                    right += 1
                left = index
                z[index] = right - left + 1
    return z


class ZMatcher:
    """Compiled Z-algorithm matcher."""

    name = "z"

    __slots__ = ("_pattern",)

    def __init__(self, pattern: Symbols) -> None:
        self._pattern = coerce_symbols(pattern)

    @property
    def pattern(self) -> str | bytes:
        return self._pattern

    def search(self, text: Symbols, start: int = 0) -> int:
        text = prepare_text(self._pattern, text)
        check_start(start)
        if not self._pattern:
            return start if start <= len(text) else NOT_FOUND
        return next(self._scan(text, start), NOT_FOUND)

    def search_all(self, text: Symbols) -> Iterator[int]:
        text = prepare_text(self._pattern, text)
        if not self._pattern:
            return iter(range(len(text) + 1))
        return self._scan(text, 0)

    def _scan(self, text: str | bytes, position: int) -> Iterator[int]:
        length = len(self._pattern)
        if len(text) - position < length:
            return
        joined = [*self._pattern, _SENTINEL, *text[position:]]
        z = compute_z(joined)
        offset = position - length - 1
        for index in range(length + 1, len(joined)):
            if z[index] == length:
                yield index + offset

    def __repr__(self) -> str:
        return f"ZMatcher(pattern={self._pattern!r})"
