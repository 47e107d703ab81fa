"""Batch pipeline that fans candidate lines out to a pool of workers.

Lines are buffered into batches bounded by their UTF-8 size rather than
their count, so memory per batch and overhead per task stay flat whatever
the line lengths are. Each full batch is ranked by its own executor task.
A semaphore sized to the pool keeps at most ``workers`` batches in flight;
``append`` blocks on it when the pool is saturated.
"""

from __future__ import annotations

import logging
import threading
from concurrent.futures import (
    Executor,
    Future,
    ProcessPoolExecutor,
    ThreadPoolExecutor,
    as_completed,
)
from typing import Optional

from ..config import SearchConfig
from ..exceptions import SearcherClosedError
from ..models import Result
from .matcher import best_match
from .ranking import rank

logger = logging.getLogger(__name__)

__all__ = ["Searcher", "rank_batch"]


def rank_batch(batch: list[str], term: str) -> list[Result]:
    """Return the best Result of each candidate in batch that matched term.

    Module level so it can be pickled into a worker process.
    """
    results = []
    for candidate in batch:
        result = best_match(candidate, term)
        if result is not None:
            results.append(result)
    return results


class Searcher:
    """Accumulates candidate lines and ranks them against a fixed term.

    Usage:
        with Searcher("pl") as searcher:
            for line in lines:
                searcher.append(line)
            top = searcher.ranked_results(25)
    """

    def __init__(self, term: str, config: Optional[SearchConfig] = None):
        """Initialize the searcher.

        Args:
            term: Fuzzy search term, fixed for the searcher's lifetime.
            config: Pipeline settings; defaults to SearchConfig().
        """
        self._term = term
        self._config = config or SearchConfig()

        self._batch: list[str] = []
        self._batch_bytes = 0
        self._line_count = 0
        self._ended = False
        self._closed = False

        self._permits = threading.BoundedSemaphore(self._config.workers)
        self._futures: list[Future[list[Result]]] = []
        self._executor: Optional[Executor] = None

    @property
    def batch_count(self) -> int:
        """Number of batches submitted to the pool so far."""
        return len(self._futures)

    @property
    def line_count(self) -> int:
        """Number of candidate lines accepted so far."""
        return self._line_count

    def __enter__(self) -> Searcher:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self._closed = True
        self._shutdown()

    def append(self, *lines: str) -> bool:
        """Add candidate lines, submitting the batch whenever it fills up.

        Surrounding whitespace is stripped. Blank lines are skipped, unless
        ``stop_at_blank`` is set, in which case a blank line ends the input
        and the rest of this call's lines are dropped.

        Returns:
            False once the input has been ended by a blank line, else True.

        Raises:
            SearcherClosedError: If ranked_results was already called.
        """
        if self._closed:
            raise SearcherClosedError("cannot append after ranked_results")
        if self._ended:
            return False

        for line in lines:
            line = line.strip()
            if not line:
                if self._config.stop_at_blank:
                    logger.debug("Blank line ends input after %d lines", self._line_count)
                    self._ended = True
                    return False
                continue

            self._batch.append(line)
            self._batch_bytes += len(line.encode("utf-8", "surrogateescape"))
            self._line_count += 1
            if self._batch_bytes >= self._config.batch_bytes:
                self._submit()
        return True

    def ranked_results(self, max_count: int) -> list[Result]:
        """Collect every batch's results and return the best max_count.

        The unfilled last batch is ranked in the calling thread. Blocks until
        every submitted batch has finished. An exception raised by a batch
        task is re-raised here.

        Raises:
            SearcherClosedError: If called more than once.
        """
        if self._closed:
            raise SearcherClosedError("ranked_results was already called")
        self._closed = True

        try:
            merged = rank_batch(self._batch, self._term)
            self._batch = []
            self._batch_bytes = 0

            for future in as_completed(self._futures):
                merged.extend(future.result())
        finally:
            self._shutdown()

        logger.debug(
            "Merged %d matches from %d lines in %d batches",
            len(merged),
            self._line_count,
            len(self._futures),
        )
        return rank(merged, limit=max_count)

    def _submit(self) -> None:
        """Hand the current batch to the pool and start a new one."""
        batch, self._batch = self._batch, []
        size, self._batch_bytes = self._batch_bytes, 0

        # Backpressure: wait for a free worker before queueing more work.
        self._permits.acquire()
        try:
            future = self._get_executor().submit(rank_batch, batch, self._term)
        except BaseException:
            self._permits.release()
            raise
        future.add_done_callback(self._release_permit)
        self._futures.append(future)
        logger.debug(
            "Submitted batch %d: %d lines, %d bytes", len(self._futures), len(batch), size
        )

    def _release_permit(self, future: Future[list[Result]]) -> None:
        self._permits.release()

    def _get_executor(self) -> Executor:
        if self._executor is None:
            workers = self._config.workers
            if self._config.use_processes:
                self._executor = ProcessPoolExecutor(max_workers=workers)
            else:
                self._executor = ThreadPoolExecutor(
                    max_workers=workers, thread_name_prefix="fz-batch"
                )
            logger.debug(
                "Started %s with %d workers", type(self._executor).__name__, workers
            )
        return self._executor

    def _shutdown(self) -> None:
        if self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None
