"""Rich utilities: shared error console, themes, and helpers."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.theme import Theme
from rich.traceback import install as rich_traceback_install

_console: Console | None = None


def get_console() -> Console:
    """Return a shared Rich Console bound to standard error.

    Standard output is reserved for the offender report, so every
    human-facing message goes through this console instead.
    """
    global _console
    if _console is None:
        theme = Theme(
            {
                "info": "cyan",
                "warning": "yellow",
                "error": "red",
                "success": "green",
                "muted": "grey62",
            }
        )
        _console = Console(stderr=True, theme=theme, highlight=False, soft_wrap=True)
    return _console


def print_error(message: str) -> None:
    """Print an error message to standard error."""
    get_console().print(f"[error]Error:[/error] {escape(message)}")


def print_warning(message: str) -> None:
    """Print a warning message to standard error."""
    get_console().print(f"[warning]Warning:[/warning] {escape(message)}")


def print_muted(message: str) -> None:
    """Print a low-emphasis message to standard error."""
    get_console().print(f"[muted]{escape(message)}[/muted]")


def install_rich_tracebacks() -> None:
    """Enable rich tracebacks globally for nicer error output."""
    rich_traceback_install(show_locals=False, word_wrap=True, suppress=["click"])
