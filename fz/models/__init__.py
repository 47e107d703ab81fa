"""Value types for fuzzy match results."""

from .result import Result, Span

__all__ = ["Result", "Span"]
