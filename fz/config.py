"""Search configuration.

Settings come from code or CLI options only; fz reads no config files
and no environment variables.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from .exceptions import ConfigError

# Number of results printed by the CLI.
MAX_RESULTS = 25

# A batch is submitted once its candidates add up to this many UTF-8 bytes.
BATCH_BYTE_MIN = 256_000


def default_workers() -> int:
    """Return the number of available processing units (at least 1)."""
    return os.cpu_count() or 1


@dataclass(frozen=True)
class SearchConfig:
    """Tuning knobs for the batch pipeline."""

    batch_bytes: int = BATCH_BYTE_MIN
    workers: int = field(default_factory=default_workers)
    max_results: int = MAX_RESULTS
    stop_at_blank: bool = False  # Treat a blank line as end of input
    use_processes: bool = True  # False runs batches on threads

    def __post_init__(self) -> None:
        for name in ("batch_bytes", "workers", "max_results"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise ConfigError(f"{name} must be a positive integer, got {value!r}")
