"""Brute-force substring search, the reference every other matcher must agree with."""

from __future__ import annotations

from typing import Iterator

from subsearch.constants import NOT_FOUND
from subsearch.interfaces.matcher import Symbols
from subsearch.utils.symbols import check_start, coerce_symbols, prepare_text


class NaiveMatcher:
    """Compare the pattern at every alignment, O(m * n)."""

    name = "naive"

    __slots__ = ("_pattern",)

    def __init__(self, pattern: Symbols) -> None:
        self._pattern = coerce_symbols(pattern)

    @property
    def pattern(self) -> str | bytes:
        return self._pattern

    def search(self, text: Symbols, start: int = 0) -> int:
        text = prepare_text(self._pattern, text)
        check_start(start)
        return next(self._scan(text, start), NOT_FOUND)

    def search_all(self, text: Symbols) -> Iterator[int]:
        text = prepare_text(self._pattern, text)
        return self._scan(text, 0)

    def _scan(self, text: str | bytes, position: int) -> Iterator[int]:
        pattern = self._pattern
        size = len(pattern)
        for candidate in range(position, len(text) - size + 1):
            offset = 0
            while offset < size and text[candidate + offset] == pattern[offset]:
                offset += 1
            if offset == size:
                yield candidate

    def __repr__(self) -> str:
        return f"NaiveMatcher(pattern={self._pattern!r})"
