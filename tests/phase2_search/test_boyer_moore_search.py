"""
Phase 2 Tests: Boyer-Moore search

Tests for BoyerMooreMatcher.search / search_all including:
- Reference scenarios
- Start offsets and overlapping matches
- Empty patterns and patterns longer than the text
- Linear behaviour on pathological input
- Sharing one compiled matcher across threads
"""

from concurrent.futures import ThreadPoolExecutor

import pytest

from subsearch import NOT_FOUND
from subsearch.constants import PATHOLOGICAL_PATTERN, PATHOLOGICAL_TEXT_SIZE
from subsearch.matchers import BadCharacterMatcher, BoyerMooreMatcher


class TestScenarios:
    """Reference inputs with known answers."""

    def test_partial_overlap(self):
        """ABABAC is found after two failed alignments."""
        assert BoyerMooreMatcher("ABABAC").search("ABABABABAC") == 4

    def test_match_at_start(self):
        """A run of one symbol matches immediately."""
        assert BoyerMooreMatcher("AAAA").search("AAAAAAAAAB") == 0

    def test_no_match(self):
        """Absent pattern reports NOT_FOUND."""
        text = "the quick brown fox jumps over the lazy dog" * 10
        assert BoyerMooreMatcher("XYZ").search(text) == NOT_FOUND

    def test_pattern_longer_than_text(self):
        """A pattern longer than the text is never found."""
        assert BoyerMooreMatcher("ABCDEF").search("ABC") == NOT_FOUND

    def test_pattern_equals_text(self):
        """Whole-text match at 0."""
        assert BoyerMooreMatcher("needle").search("needle") == 0

    def test_empty_text(self):
        """Nothing is found in an empty text."""
        assert BoyerMooreMatcher("A").search("") == NOT_FOUND

    def test_match_at_end(self):
        """Occurrence flush with the end of the text."""
        assert BoyerMooreMatcher("END").search("xxxxxxEND") == 6

    def test_first_of_several(self):
        """The smallest index is reported."""
        assert BoyerMooreMatcher("ab").search("xxabyyabzzab") == 2

    def test_bytes(self):
        """Binary pattern and text."""
        assert BoyerMooreMatcher(b"\x00\x01").search(b"\xff\x00\x00\x01") == 2

    def test_memoryview_text(self):
        """Bytes-like text is accepted."""
        assert BoyerMooreMatcher(b"cd").search(memoryview(b"abcd")) == 2

    def test_reused_across_texts(self):
        """One compiled matcher searches many texts."""
        matcher = BoyerMooreMatcher("fox")
        assert matcher.search("a fox") == 2
        assert matcher.search("no match here") == NOT_FOUND
        assert matcher.search("fox") == 0


class TestStartOffset:
    """Tests for the start argument."""

    def test_start_skips_earlier_matches(self):
        """Matches before start are ignored."""
        matcher = BoyerMooreMatcher("ab")
        assert matcher.search("abxab", start=1) == 3

    def test_start_on_a_match(self):
        """A match beginning exactly at start is reported."""
        assert BoyerMooreMatcher("ab").search("abxab", start=3) == 3

    def test_start_past_last_alignment(self):
        """No alignment fits after start."""
        assert BoyerMooreMatcher("ab").search("abxab", start=4) == NOT_FOUND

    def test_start_beyond_text(self):
        """start past the end is not an error."""
        assert BoyerMooreMatcher("ab").search("ab", start=10) == NOT_FOUND


class TestSearchAll:
    """Tests for search_all."""

    def test_all_occurrences(self):
        """Every occurrence in increasing order."""
        matcher = BoyerMooreMatcher("ABABAC")
        assert list(matcher.search_all("ABABACABABAC")) == [0, 6]

    def test_overlapping_occurrences(self):
        """Overlaps are reported."""
        assert list(BoyerMooreMatcher("AA").search_all("AAAA")) == [0, 1, 2]
        assert list(BoyerMooreMatcher("ABAB").search_all("ABABABAB")) == [0, 2, 4]

    def test_none_found(self):
        """An empty iterator when nothing matches."""
        assert list(BoyerMooreMatcher("zz").search_all("abc")) == []

    def test_validates_eagerly(self):
        """Argument errors surface before iteration starts."""
        with pytest.raises(ValueError):
            BoyerMooreMatcher("a").search_all(None)


class TestEmptyPattern:
    """The empty pattern matches at every position."""

    def test_matches_at_zero(self):
        """Empty pattern is found at 0."""
        assert BoyerMooreMatcher("").search("abc") == 0

    def test_matches_empty_text(self):
        """Empty pattern is found in an empty text."""
        assert BoyerMooreMatcher("").search("") == 0

    def test_respects_start(self):
        """Empty pattern is found at start, up to len(text)."""
        matcher = BoyerMooreMatcher("")
        assert matcher.search("abc", start=3) == 3
        assert matcher.search("abc", start=4) == NOT_FOUND

    def test_search_all(self):
        """Every boundary, including the end."""
        assert list(BoyerMooreMatcher("").search_all("abc")) == [0, 1, 2, 3]

    def test_tables_are_empty(self):
        """No shift entries for an empty pattern."""
        assert BoyerMooreMatcher("").shift == ()


class TestPathologicalInput:
    """Full Boyer-Moore stays linear where the bad-character rule does not."""

    def test_run_then_mismatch_scaled(self):
        """52 'A's and a 'B' found at the end of a long run of 'A'."""
        size = 200_000
        text = "A" * size + "B"
        assert BoyerMooreMatcher(PATHOLOGICAL_PATTERN).search(text) == size - 52

    @pytest.mark.slow
    def test_run_then_mismatch_full_size(self):
        """The 10,000,000-symbol version of the same input."""
        size = PATHOLOGICAL_TEXT_SIZE
        text = b"A" * size + b"B"
        assert BoyerMooreMatcher(PATHOLOGICAL_PATTERN.encode()).search(text) == size - 52

    def test_reads_each_symbol_a_constant_number_of_times(self, counting_text):
        """Scan reads stay proportional to the text length."""
        size = 20_000
        text = counting_text("A" * size + "B")
        assert BoyerMooreMatcher(PATHOLOGICAL_PATTERN).search(text) == size - 52
        assert text.accesses <= 3 * len(text)

    def test_good_suffix_beats_bad_character(self, counting_text):
        """A leading mismatch after a long suffix match skips the whole pattern."""
        pattern = "B" + "A" * 30
        size = 20_000

        full_text = counting_text("A" * size)
        assert BoyerMooreMatcher(pattern).search(full_text) == NOT_FOUND

        bad_character_text = counting_text("A" * size)
        assert BadCharacterMatcher(pattern).search(bad_character_text) == NOT_FOUND

        assert full_text.accesses <= 3 * size
        assert bad_character_text.accesses > 10 * size


class TestSharedMatcher:
    """Compiled matchers are read-only and safe to share."""

    def test_concurrent_searches(self):
        """Threads searching different texts with one matcher agree with serial results."""
        matcher = BoyerMooreMatcher("needle")
        texts = [("x" * i) + "needle" + ("y" * i) for i in range(50)]
        texts.append("no match at all")

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(matcher.search, texts))

        assert results == [matcher.search(t) for t in texts]
        assert results[:50] == list(range(50))
        assert results[-1] == NOT_FOUND
