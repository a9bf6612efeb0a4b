"""Rabin-Karp substring search with a rolling hash.

The hash of each text window is updated in constant time by removing the
leading symbol and appending the trailing one. A window whose hash equals
the pattern's is compared symbol by symbol before it is reported, so hash
collisions never produce false matches.
"""

from __future__ import annotations

from typing import Any, Iterator, Sequence

from subsearch.constants import NOT_FOUND, RABIN_KARP_PRIME
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
)

# Radix for unbounded alphabets: one past the largest Unicode code point.
UNICODE_RADIX = 0x110000


def polynomial_hash(codes: Sequence[int], radix: int, prime: int = RABIN_KARP_PRIME) -> int:
    """Hash ``codes`` as the digits of a base-``radix`` number modulo ``prime``."""
    value = 0
    for code in codes:
        value = (value * radix + code) % prime
    return value


class RabinKarpMatcher:
    """Compiled single-pattern Rabin-Karp matcher."""

    name = "rabin-karp"

    __slots__ = ("_pattern", "_alphabet_size", "_radix", "_prime", "_hash", "_exponent")

    def __init__(
        self,
        pattern: Symbols,
        alphabet_size: Any = UNSET,
        prime: int = RABIN_KARP_PRIME,
    ) -> None:
        self._pattern = coerce_symbols(pattern)
        alphabet_size = resolve_alphabet_size(alphabet_size)
        check_alphabet(self._pattern, alphabet_size)
        self._alphabet_size = alphabet_size
        self._radix = alphabet_size or UNICODE_RADIX
        if isinstance(prime, bool) or not isinstance(prime, int) or prime < 2:
            raise InvalidArgumentError(f"prime must be an integer >= 2, got {prime!r}")
        self._prime = prime
        self._hash = polynomial_hash(_codes(self._pattern), self._radix, prime)
        # weight of the leading symbol of a window
        self._exponent = pow(self._radix, max(len(self._pattern) - 1, 0), prime)
        logger.debug(f"Compiled {self.name} matcher: pattern length {len(self._pattern)}")

    @property
    def pattern(self) -> str | bytes:
        return self._pattern

    @property
    def pattern_hash(self) -> int:
        return self._hash

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
        length = len(pattern)
        if len(text) - position < length:
            return
        codes = _codes(text)
        self._check_codes(text, codes, position)
        radix = self._radix
        exponent = self._exponent
        prime = self._prime
        window = polynomial_hash(codes[position:position + length], radix, prime)
        last_start = len(text) - length
        while True:
            if window == self._hash and text[position:position + length] == pattern:
                yield position
            if position == last_start:
                return
            window = (window - exponent * codes[position]) % prime
            window = (window * radix + codes[position + length]) % prime
            position += 1

    def _check_codes(self, text: str | bytes, codes: Sequence[int], position: int) -> None:
        if self._alphabet_size is None:
            return
        for index in range(position, len(codes)):
            if codes[index] >= self._alphabet_size:
                raise out_of_alphabet(text[index], self._alphabet_size, operation="search")

    def __repr__(self) -> str:
        return f"RabinKarpMatcher(pattern={self._pattern!r})"


def _codes(symbols: str | bytes) -> Sequence[int]:
    if isinstance(symbols, bytes):
        return symbols
    return [ord(symbol) for symbol in symbols]
