"""Shared pytest fixtures for fz tests."""

import pytest
from click.testing import CliRunner

from fz.config import SearchConfig

WORDS = ["people", "person", "place", "ply", "dog"]


@pytest.fixture
def words():
    """Candidate list from the README example."""
    return list(WORDS)


@pytest.fixture
def thread_config():
    """Small batches on a thread pool, so short inputs span several batches."""
    return SearchConfig(batch_bytes=8, workers=2, use_processes=False)


@pytest.fixture
def cli_runner():
    """Create Click CliRunner."""
    return CliRunner()
