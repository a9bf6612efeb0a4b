"""Bad-character table shared by the Boyer-Moore matchers."""

from __future__ import annotations

from types import MappingProxyType
from typing import Any

from subsearch.config import default_alphabet_size
from subsearch.utils.symbols import (
    check_alphabet,
    out_of_alphabet,
    symbol_code,
    validate_alphabet_size,
)

# Marks an alphabet_size argument the caller left out; the environment
# default applies.
UNSET: Any = object()


def resolve_alphabet_size(alphabet_size: Any) -> int | None:
    """Apply the configured default to an omitted alphabet_size."""
    if alphabet_size is UNSET:
        return default_alphabet_size()
    return validate_alphabet_size(alphabet_size)


class LastOccurrenceTable:
    """Rightmost index of every symbol in a pattern, -1 for absent symbols.

    With a bounded alphabet the table is a dense tuple indexed by symbol
    code. With ``alphabet_size=None`` it is a read-only mapping holding only
    the symbols that occur in the pattern.
    """

    __slots__ = ("_alphabet_size", "_dense", "_sparse")

    def __init__(self, pattern: str | bytes, alphabet_size: int | None) -> None:
        check_alphabet(pattern, alphabet_size)
        self._alphabet_size = alphabet_size
        if alphabet_size is None:
            rightmost = {}
            for index, symbol in enumerate(pattern):
                rightmost[symbol] = index
            self._dense = None
            self._sparse = MappingProxyType(rightmost)
        else:
            table = [-1] * alphabet_size
            for index, symbol in enumerate(pattern):
                table[symbol_code(symbol)] = index
            self._dense = tuple(table)
            self._sparse = None

    @property
    def alphabet_size(self) -> int | None:
        return self._alphabet_size

    def __getitem__(self, symbol: str | int) -> int:
        if self._dense is None:
            return self._sparse.get(symbol, -1)
        code = symbol_code(symbol)
        if code >= self._alphabet_size:
            raise out_of_alphabet(symbol, self._alphabet_size, operation="search")
        return self._dense[code]

    def __len__(self) -> int:
        if self._dense is None:
            return len(self._sparse)
        return self._alphabet_size

    def occurrences(self) -> dict[str | int, int]:
        """Pattern symbols mapped to their rightmost index (keyed by code when dense)."""
        if self._dense is None:
            return dict(self._sparse)
        return {code: index for code, index in enumerate(self._dense) if index >= 0}

    def __repr__(self) -> str:
        return f"LastOccurrenceTable(alphabet_size={self._alphabet_size}, symbols={len(self.occurrences())})"
