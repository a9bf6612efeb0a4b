"""
Pytest configuration and shared fixtures for subsearch tests.
"""
import os

import pytest

from subsearch.matchers import NaiveMatcher

# Tests assume the built-in 256-symbol default unless they set it themselves.
os.environ.pop("SUBSEARCH_ALPHABET_SIZE", None)


class CountingText(str):
    """A str that counts how many times a matcher indexes into it."""

    def __new__(cls, value: str):
        text = super().__new__(cls, value)
        text.accesses = 0
        return text

    def __getitem__(self, key):
        self.accesses += 1
        return super().__getitem__(key)


@pytest.fixture
def naive_positions():
    """Every occurrence of a pattern according to the brute-force matcher."""

    def find(pattern, text) -> list[int]:
        return list(NaiveMatcher(pattern).search_all(text))

    return find


@pytest.fixture
def counting_text():
    """The CountingText class, for asserting how much of a text a scan reads."""
    return CountingText
