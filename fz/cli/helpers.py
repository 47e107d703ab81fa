"""Input helpers for the fz command."""

from __future__ import annotations

from typing import IO, Iterator


def read_lines(stream: IO[str]) -> Iterator[str]:
    """Yield lines from stream without their line terminators."""
    for line in stream:
        yield line.rstrip("\r\n")
