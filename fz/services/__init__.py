"""Matching, ranking and batching services for fz."""

from .matcher import best_match, search
from .pipeline import Searcher, rank_batch
from .ranking import is_better, rank, rank_key

__all__ = [
    "Searcher",
    "best_match",
    "is_better",
    "rank",
    "rank_batch",
    "rank_key",
    "search",
]
