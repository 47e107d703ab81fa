"""Ranking order for match results.

Best first:
1. More term characters matched (match score).
2. Fewer gaps (gap score).
3. Shorter input string.

Results equal on all three have no defined order.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Optional

if TYPE_CHECKING:
    from ..models import Result

__all__ = ["is_better", "rank", "rank_key"]


def rank_key(result: Result) -> tuple[int, int, int]:
    """Sort key that puts the best result first in an ascending sort."""
    return (-result.match_score, -result.gap_score, len(result.input))


def is_better(a: Result, b: Result) -> bool:
    """True if a strictly outranks b."""
    return rank_key(a) < rank_key(b)


def rank(results: Iterable[Result], limit: Optional[int] = None) -> list[Result]:
    """Sort results best first, keeping at most limit of them."""
    ranked = sorted(results, key=rank_key)
    if limit is not None:
        return ranked[:limit]
    return ranked
