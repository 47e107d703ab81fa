"""CLI helpers and formatters for fz."""

from .formatters import USAGE_EXAMPLES, echo_results, highlight
from .helpers import read_lines

__all__ = ["USAGE_EXAMPLES", "echo_results", "highlight", "read_lines"]
