"""Tests for the fuzzy match engine."""

import pytest

from fz.models import Span
from fz.services.matcher import best_match, scan, search


class TestScan:
    """Tests for a single forward scan."""

    def test_contiguous(self):
        """Test adjacent matches extend one span."""
        assert scan("ply", "pl") == [Span(0, 2)]

    def test_gap_starts_new_span(self):
        """Test a gap between matches starts a new span."""
        assert scan("people", "pl") == [Span(0, 1), Span(4, 5)]

    def test_offset(self):
        """Test the scan ignores characters before the offset."""
        assert scan("people", "pl", offset=1) == [Span(3, 5)]

    def test_partial_match(self):
        """Test scanning stops at the first missing term character."""
        assert scan("person", "pl") == [Span(0, 1)]

    def test_first_character_missing(self):
        """Test no spans when the first term character is missing."""
        assert scan("dog", "pl") == []

    def test_duplicate_term_characters(self):
        """Test repeated term characters match consecutive positions."""
        assert scan("aab", "aa") == [Span(0, 2)]


class TestSearch:
    """Tests for the full search over every starting anchor."""

    def test_finds_later_contiguous_match(self):
        """Test the spread-out match is found first, then the contiguous one."""
        results = search("CxxxAxxxTCAT", "CAT")
        assert [r.spans for r in results] == [
            (Span(0, 1), Span(4, 5), Span(8, 9)),
            (Span(9, 12),),
        ]

    def test_each_pass_starts_after_previous_first_match(self):
        """Test passes shift one character past the previous first match."""
        results = search("aaa", "aa")
        assert [r.spans for r in results] == [
            (Span(0, 2),),
            (Span(1, 3),),
            (Span(2, 3),),
        ]

    def test_empty_term(self):
        """Test an empty term never matches."""
        assert search("anything", "") == []

    def test_empty_candidate(self):
        """Test an empty candidate never matches."""
        assert search("", "a") == []

    def test_no_match(self):
        """Test a missing first character yields nothing."""
        assert search("dog", "pl") == []

    def test_unicode_positions_are_characters(self):
        """Test spans index characters, not encoded bytes."""
        results = search("naïve café", "café")
        assert results[-1].spans == (Span(6, 10),)

    def test_long_candidate_does_not_recurse(self):
        """Test a long run of the first term character completes."""
        candidate = "m" * 5000 + "oo"
        result = best_match(candidate, "moo")
        assert result.spans == (Span(4999, 5002),)


class TestSearchProperties:
    """Invariants that hold for every result the engine returns."""

    CANDIDATES = [
        "people",
        "CxxxAxxxTCAT",
        "./templates/index.gohtml",
        "mississippi",
        "aaaaab",
        "ab",
        "",
        "xyz",
    ]
    TERMS = ["pl", "CAT", ".go", "ssi", "aab", "abc", "", "zz"]

    @pytest.mark.parametrize("candidate", CANDIDATES)
    @pytest.mark.parametrize("term", TERMS)
    def test_invariants(self, candidate, term):
        """Test scores are positive and spans are ordered and disjoint."""
        for result in search(candidate, term):
            assert result.input == candidate
            assert 0 < result.match_score <= len(term)
            previous_end = 0
            for span in result.spans:
                assert span.end >= span.start + 1
                assert span.start >= previous_end
                previous_end = span.end
            assert result.spans[0].start < len(candidate)

    @pytest.mark.parametrize("candidate", CANDIDATES)
    def test_matched_text_is_term_prefix(self, candidate):
        """Test every result matches a prefix of the term, in order."""
        for term in self.TERMS:
            for result in search(candidate, term):
                assert term.startswith(result.matched_text)


class TestBestMatch:
    """Tests for picking one result per candidate."""

    def test_prefers_contiguous(self):
        """Test the trailing contiguous CAT beats the scattered one."""
        result = best_match("CxxxAxxxTCAT", "CAT")
        assert result.spans == (Span(9, 12),)
        assert result.match_score == 3
        assert result.gap_score == 0

    def test_prefers_more_characters(self):
        """Test a full scattered match beats a shorter contiguous one."""
        result = best_match("pxlxpl", "pl")
        assert result.match_score == 2
        assert result.spans == (Span(4, 6),)

    def test_term_longer_than_candidate(self):
        """Test a long term only produces a partial match."""
        result = best_match("ab", "abc")
        assert result.spans == (Span(0, 2),)
        assert result.match_score == 2

    def test_no_match_returns_none(self):
        """Test None when nothing matched."""
        assert best_match("dog", "pl") is None
        assert best_match("dog", "") is None
