"""fz - fuzzy filter for line-delimited input."""

from .config import BATCH_BYTE_MIN, MAX_RESULTS, SearchConfig
from .exceptions import ConfigError, FzError, InvalidSpanError, SearcherClosedError
from .models import Result, Span
from .services import Searcher, best_match, rank, search

__version__ = "0.1.0"

__all__ = [
    "BATCH_BYTE_MIN",
    "MAX_RESULTS",
    "ConfigError",
    "FzError",
    "InvalidSpanError",
    "Result",
    "SearchConfig",
    "Searcher",
    "SearcherClosedError",
    "Span",
    "best_match",
    "rank",
    "search",
]
