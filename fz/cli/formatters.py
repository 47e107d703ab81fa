"""CLI output formatters.

Rendering only: these functions never affect which results are shown or
in what order.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

import click

if TYPE_CHECKING:
    from ..models import Result


USAGE_EXAMPLES = """\
\b
Examples:

\b
    # recursively search for file paths containing ".go"
    $ find . | fz .go
    ./main.go
    ./main_test.go
    ./templates/index.gohtml
    ./go.mod

\b
    # search a list for the characters "p" and "l" anywhere in each string
    $ printf 'people\\nperson\\nplace\\nply\\ndog\\n' | fz pl
    ply
    place
    people
    person

\b
    # use -- when the term starts with a dash
    $ ls | fz -- -x
"""


def highlight(result: Result, color: bool = True) -> str:
    """Return the result's input with each matched span in bold.

    Args:
        result: Result to render.
        color: If False, return the input without escape sequences.

    Returns:
        Rendered line, without a trailing newline.
    """
    if not color:
        return result.input

    text = result.input
    parts = []
    pos = 0
    for span in result.spans:
        parts.append(text[pos : span.start])
        parts.append(click.style(text[span.start : span.end], bold=True))
        pos = span.end
    parts.append(text[pos:])
    return "".join(parts)


def echo_results(results: Iterable[Result], color: bool = True) -> None:
    """Echo ranked results to stdout, one per line.

    Lines are written as bytes so input that wasn't valid UTF-8 (kept as
    surrogates by the reader) comes out byte for byte as it went in.
    """
    for result in results:
        line = highlight(result, color=color)
        click.echo(line.encode("utf-8", "surrogateescape"))
