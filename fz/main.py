"""Command-line entry point for fz."""

from __future__ import annotations

import logging
import sys
from typing import Optional

import click
from tqdm import tqdm

from .cli.formatters import USAGE_EXAMPLES, echo_results
from .cli.helpers import read_lines
from .config import BATCH_BYTE_MIN, MAX_RESULTS, SearchConfig, default_workers
from .exceptions import ConfigError
from .services import Searcher

logger = logging.getLogger(__name__)


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr; stdout is reserved for results."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


@click.command(
    context_settings={"help_option_names": ["-h", "-help", "--help"]},
    epilog=USAGE_EXAMPLES,
)
@click.argument("term", required=False)
@click.option(
    "-n",
    "--limit",
    type=click.IntRange(min=1),
    default=MAX_RESULTS,
    show_default=True,
    help="Number of results to print.",
)
@click.option(
    "--workers",
    type=click.IntRange(min=1),
    default=None,
    help="Batches ranked in parallel [default: CPU count].",
)
@click.option(
    "--batch-bytes",
    type=click.IntRange(min=1),
    default=BATCH_BYTE_MIN,
    show_default=True,
    help="Input bytes per batch.",
)
@click.option(
    "--color/--no-color", default=True, show_default=True, help="Bold the matched characters."
)
@click.option("--stop-at-blank", is_flag=True, help="Stop reading at the first blank line.")
@click.option("--threads", is_flag=True, help="Rank batches on threads instead of processes.")
@click.option("--progress", is_flag=True, help="Show a line counter on stderr.")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging on stderr.")
@click.pass_context
def main(
    ctx: click.Context,
    term: Optional[str],
    limit: int,
    workers: Optional[int],
    batch_bytes: int,
    color: bool,
    stop_at_blank: bool,
    threads: bool,
    progress: bool,
    verbose: bool,
) -> None:
    """Fuzzy search a line-delimited list of strings read from stdin.

    Prints the lines that best match TERM, allowing any number of
    characters between the matched ones. Contiguous matches and shorter
    lines rank higher.
    """
    if term is None:
        click.echo(ctx.get_help(), err=True)
        ctx.exit(1)

    configure_logging(verbose)

    try:
        config = SearchConfig(
            batch_bytes=batch_bytes,
            workers=workers or default_workers(),
            max_results=limit,
            stop_at_blank=stop_at_blank,
            use_processes=not threads,
        )
    except ConfigError as e:
        raise click.UsageError(str(e), ctx=ctx) from e

    # Undecodable bytes survive as surrogates and are written back unchanged.
    stdin = click.get_text_stream("stdin", errors="surrogateescape")
    with Searcher(term, config) as searcher:
        with tqdm(
            read_lines(stdin),
            desc="Reading",
            unit="line",
            file=sys.stderr,
            disable=not progress,
            leave=False,
        ) as lines:
            for line in lines:
                if not searcher.append(line):
                    break
        results = searcher.ranked_results(config.max_results)

    logger.debug("Printing %d of %d lines", len(results), searcher.line_count)
    echo_results(results, color=color)


if __name__ == "__main__":
    main()
