"""Span and Result value types.

Scores are always derived from the spans on access; nothing is cached, so a
Result can never report a score that disagrees with its spans.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ..exceptions import InvalidSpanError

__all__ = ["Result", "Span"]


@dataclass(frozen=True)
class Span:
    """Half-open ``[start, end)`` range of character positions."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0 or self.end <= self.start:
            raise InvalidSpanError(f"invalid span [{self.start}, {self.end})")

    def __len__(self) -> int:
        return self.end - self.start


@dataclass(frozen=True)
class Result:
    """A candidate string and the spans where the term matched it."""

    input: str
    spans: tuple[Span, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # Accept any iterable of spans but always store a tuple.
        if not isinstance(self.spans, tuple):
            object.__setattr__(self, "spans", tuple(self.spans))
        previous_end = 0
        for span in self.spans:
            if span.start < previous_end:
                raise InvalidSpanError(
                    f"span [{span.start}, {span.end}) overlaps or precedes the previous span"
                )
            previous_end = span.end
        if previous_end > len(self.input):
            raise InvalidSpanError(
                f"span end {previous_end} is past the end of a {len(self.input)} character input"
            )

    @property
    def match_score(self) -> int:
        """Number of term characters found in the input."""
        return sum(len(span) for span in self.spans)

    @property
    def gap_score(self) -> int:
        """Zero for a contiguous match, one lower for every extra span."""
        return 1 - len(self.spans)

    @property
    def matched_text(self) -> str:
        """The matched characters, concatenated in order."""
        return "".join(self.input[span.start : span.end] for span in self.spans)
