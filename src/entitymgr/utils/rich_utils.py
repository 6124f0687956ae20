"""Rich utilities: shared console, themes, and helpers."""

from __future__ import annotations

from rich.console import Console
from rich.theme import Theme
from rich.traceback import install as rich_traceback_install

THEME = Theme(
    {
        "info": "cyan",
        "warning": "yellow",
        "error": "red",
        "success": "green",
        "payload": "blue",
        "muted": "grey62",
    }
)

_console: Console | None = None


def create_console(**kwargs) -> Console:
    """Create a Console with the application theme.

    Keyword arguments are passed through to ``rich.console.Console``.
    """
    kwargs.setdefault("highlight", False)
    kwargs.setdefault("soft_wrap", True)
    return Console(theme=THEME, **kwargs)


def get_console() -> Console:
    """Return a shared Rich Console instance, created on first use."""
    global _console
    if _console is None:
        _console = create_console()
    return _console


def install_rich_tracebacks() -> None:
    """Enable rich tracebacks globally for nicer error output."""
    # Avoid excessive locals dumping; wrap long lines; default width detection
    rich_traceback_install(show_locals=False, word_wrap=True, suppress=["click"])
