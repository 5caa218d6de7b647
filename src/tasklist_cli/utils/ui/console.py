"""Console utilities for tasklist-cli.

Tables, notifications and data go to stdout; errors and warnings go to
stderr.
"""

from functools import lru_cache

from rich.console import Console


@lru_cache(maxsize=4)
def get_console(highlight: bool = True, stderr: bool = False) -> Console:
    """Get a Rich Console instance for consistent output formatting."""
    return Console(highlight=highlight, stderr=stderr)


def get_error_console() -> Console:
    """Console for diagnostics, writing to stderr without highlighting."""
    return get_console(highlight=False, stderr=True)
