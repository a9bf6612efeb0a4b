"""Boyer-Moore substring search with the bad-character rule only.

Sublinear on typical inputs, but O(m * n) in the worst case, e.g. the
pattern ``baaaaaaaa`` against a long run of ``a``.
"""

from __future__ import annotations

from typing import Any, Iterator

from subsearch.constants import NOT_FOUND
from subsearch.interfaces.matcher import Symbols
from subsearch.matchers._tables import UNSET, LastOccurrenceTable, resolve_alphabet_size
from subsearch.utils.logger import logger
from subsearch.utils.symbols import check_start, coerce_symbols, prepare_text


class BadCharacterMatcher:
    """Compiled Boyer-Moore matcher using only the last-occurrence table."""

    name = "bad-character"

    __slots__ = ("_pattern", "_last_occurrence")

    def __init__(self, pattern: Symbols, alphabet_size: Any = UNSET) -> None:
        self._pattern = coerce_symbols(pattern)
        alphabet_size = resolve_alphabet_size(alphabet_size)
        self._last_occurrence = LastOccurrenceTable(self._pattern, alphabet_size)
        logger.debug(f"Compiled {self.name} matcher: pattern length {len(self._pattern)}")

    @property
    def pattern(self) -> str | bytes:
        return self._pattern

    @property
    def last_occurrence(self) -> LastOccurrenceTable:
        return self._last_occurrence

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
        pattern = self._pattern
        size = len(pattern)
        last_occurrence = self._last_occurrence
        last_start = len(text) - size
        while position <= last_start:
            offset = size - 1
            while offset >= 0 and text[position + offset] == pattern[offset]:
                offset -= 1
            if offset < 0:
                yield position
                position += 1
                continue
            skip = offset - last_occurrence[text[position + offset]]
            position += skip if skip > 0 else 1

    def __repr__(self) -> str:
        return f"BadCharacterMatcher(pattern={self._pattern!r})"
