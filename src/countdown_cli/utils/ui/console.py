"""Console utilities for the countdown CLI."""

from functools import lru_cache

from rich.console import Console
from rich.theme import Theme

# Named styles for messages printed outside the full-screen timer
MESSAGE_STYLES = {
    "error": "bold red",
    "warning": "yellow",
    "success": "green",
    "version": "cyan",
}


@lru_cache(maxsize=2)
def get_console(highlight: bool = False) -> Console:
    """Get the Rich Console used for one-shot CLI output.

    Highlighting is off by default so digits in timer titles are printed
    as written.
    """
    return Console(highlight=highlight, theme=Theme(MESSAGE_STYLES))
