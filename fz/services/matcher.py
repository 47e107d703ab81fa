"""Fuzzy match engine with pure matching algorithms.

A single greedy scan from the start of a candidate can miss the best span
set. For the term ``CAT`` in ``CxxxAxxxTCAT`` the first scan finds the
scattered ``C..A..T``, while the contiguous trailing ``CAT`` is the match
a user means. So after each scan the search starts over one character past
the first match of the previous scan, until a scan finds nothing.

Worst case is quadratic scans per candidate; that cost is accepted.
"""

from __future__ import annotations

from typing import Optional

from ..models import Result, Span
from .ranking import rank_key

__all__ = ["best_match", "scan", "search"]


def scan(candidate: str, term: str, offset: int = 0) -> list[Span]:
    """Match the term's characters, in order, against candidate[offset:].

    Each term character is looked up at or after the previous match. A
    character found right after the previous one extends the open span;
    any gap starts a new span. Scanning stops at the first term character
    that can't be found, so a partial match is returned as-is.

    Args:
        candidate: String being searched.
        term: Characters to look for.
        offset: Position in candidate where the scan starts.

    Returns:
        Spans in ascending order; empty if the first term character is
        missing from candidate[offset:].
    """
    starts: list[int] = []
    ends: list[int] = []
    pos = offset
    for char in term:
        found = candidate.find(char, pos)
        if found == -1:
            break
        if ends and found == pos:
            ends[-1] += 1
        else:
            starts.append(found)
            ends.append(found + 1)
        pos = found + 1
    return [Span(start, end) for start, end in zip(starts, ends)]


def search(candidate: str, term: str) -> list[Result]:
    """Find every locally-optimal match of term in candidate.

    Results are in discovery order: each one comes from a scan starting one
    character after the first match of the one before it.

    Args:
        candidate: String being searched.
        term: Fuzzy search term.

    Returns:
        List of Results, each with at least one span. Empty when the term
        is empty or its first character never occurs in candidate.
    """
    results: list[Result] = []
    offset = 0
    while offset < len(candidate):
        spans = scan(candidate, term, offset)
        if not spans:
            break
        results.append(Result(candidate, tuple(spans)))
        offset = spans[0].start + 1
    return results


def best_match(candidate: str, term: str) -> Optional[Result]:
    """Return the best-ranked Result for candidate, or None if nothing matched."""
    results = search(candidate, term)
    if not results:
        return None
    return min(results, key=rank_key)
