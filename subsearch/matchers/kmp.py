"""Knuth-Morris-Pratt substring search.

Two renditions of the same automaton:

- KMPMatcher keeps only the mismatch transitions, an O(m) failure array
  usable with any alphabet.
- KMPDfaMatcher expands them into a full DFA with one row per alphabet
  symbol, O(R * m) space for an alphabet of size R but exactly one table
  lookup per text symbol.

Both run in O(m + n).
"""

from __future__ import annotations

from typing import Any, Iterator, Sequence

from subsearch.constants import NOT_FOUND
from subsearch.interfaces.matcher import Symbols
from subsearch.matchers._tables import UNSET, resolve_alphabet_size
from subsearch.types.errors import InvalidArgumentError
from subsearch.utils.logger import logger
from subsearch.utils.symbols import (
    check_alphabet,
    check_start,
    coerce_symbols,
    out_of_alphabet,
    prepare_text,
    symbol_code,
)


def compute_failure(pattern: Sequence) -> tuple[int, ...]:
    """Compute the mismatch transitions of the KMP automaton.

    ``failure[state]`` is the state the automaton would be in had it been
    restarted on the second symbol and run up to and including
    ``pattern[state]``; equivalently, the length of the longest proper
    border of ``pattern[..state]``.
    """
    length = len(pattern)
    failure = [0] * length
    simulated = 0
    for state in range(1, length):
        while simulated > 0 and pattern[state] != pattern[simulated]:
            simulated = failure[simulated - 1]
        if pattern[state] == pattern[simulated]:
            simulated += 1
        failure[state] = simulated
    return tuple(failure)


class KMPMatcher:
    """Compiled KMP matcher driven by the failure array."""

    name = "kmp"

    __slots__ = ("_pattern", "_failure")

    def __init__(self, pattern: Symbols) -> None:
        self._pattern = coerce_symbols(pattern)
        self._failure = compute_failure(self._pattern)
        logger.debug(f"Compiled {self.name} matcher: pattern length {len(self._pattern)}")

    @property
    def pattern(self) -> str | bytes:
        return self._pattern

    @property
    def failure(self) -> tuple[int, ...]:
        return self._failure

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

    def _scan(self, text: str | bytes, index: int) -> Iterator[int]:
        pattern = self._pattern
        failure = self._failure
        length = len(pattern)
        text_length = len(text)
        state = 0
        while index < text_length:
            if text[index] == pattern[state]:
                state += 1
                index += 1
                if state == length:
                    yield index - length
                    state = failure[length - 1]
            elif state > 0:
                state = failure[state - 1]
            else:
                index += 1

    def __repr__(self) -> str:
        return f"KMPMatcher(pattern={self._pattern!r})"


class KMPDfaMatcher:
    """Compiled KMP matcher backed by a dense DFA over a bounded alphabet."""

    name = "kmp-dfa"

    __slots__ = ("_pattern", "_alphabet_size", "_dfa", "_restart")

    def __init__(self, pattern: Symbols, alphabet_size: Any = UNSET) -> None:
        self._pattern = coerce_symbols(pattern)
        alphabet_size = resolve_alphabet_size(alphabet_size)
        if alphabet_size is None:
            raise InvalidArgumentError(
                "kmp-dfa needs a bounded alphabet; use kmp for unbounded alphabets"
            )
        check_alphabet(self._pattern, alphabet_size)
        self._alphabet_size = alphabet_size
        self._dfa, self._restart = self._build(self._pattern, alphabet_size)
        logger.debug(
            f"Compiled {self.name} matcher: pattern length {len(self._pattern)}, "
            f"alphabet {alphabet_size}"
        )

    @staticmethod
    def _build(pattern: str | bytes, alphabet_size: int) -> tuple[tuple[tuple[int, ...], ...], int]:
        length = len(pattern)
        if length == 0:
            return (), 0
        dfa = [[0] * length for _ in range(alphabet_size)]
        dfa[symbol_code(pattern[0])][0] = 1
        # state reached by running pattern[1..state - 1] through the DFA built so far
        simulated = 0
        for state in range(1, length):
            for row in dfa:
                row[state] = row[simulated]
            code = symbol_code(pattern[state])
            dfa[code][state] = state + 1
            simulated = dfa[code][simulated]
        return tuple(tuple(row) for row in dfa), simulated

    @property
    def pattern(self) -> str | bytes:
        return self._pattern

    def transition(self, state: int, symbol: str | int) -> int:
        """Next state after reading ``symbol`` in ``state``."""
        return self._dfa[symbol_code(symbol)][state]

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
        dfa = self._dfa
        alphabet_size = self._alphabet_size
        length = len(self._pattern)
        codes = text[position:] if isinstance(text, bytes) else map(ord, text[position:])
        state = 0
        for index, code in enumerate(codes, position):
            if code >= alphabet_size:
                raise out_of_alphabet(text[index], alphabet_size, operation="search")
            state = dfa[code][state]
            if state == length:
                yield index - length + 1
                # a full match behaves like the state after pattern[1..]
                state = self._restart

    def __repr__(self) -> str:
        return f"KMPDfaMatcher(pattern={self._pattern!r})"
