"""Exceptions raised by fz."""


class FzError(Exception):
    """Base class for all fz errors."""


class InvalidSpanError(FzError, ValueError):
    """A span or result was built with malformed character ranges."""


class ConfigError(FzError, ValueError):
    """Search configuration has an invalid value."""


class SearcherClosedError(FzError, RuntimeError):
    """A searcher was used after its results were collected."""
