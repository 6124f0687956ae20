"""Display utilities for REPL output."""

import json
from typing import Any

from rich.console import Console


def to_json(data: Any) -> str:
    """Serialize data compactly, the way it is sent over the wire."""
    return json.dumps(data, separators=(",", ":"), ensure_ascii=False)


def print_message(console: Console, message: str, style: str = "success") -> None:
    """Print a plain message in the given theme style.

    Markup is disabled so bracketed text is printed verbatim.
    """
    console.print(message, style=style, markup=False, highlight=False)


def print_success(console: Console, message: str) -> None:
    print_message(console, message, "success")


def print_error(console: Console, message: str) -> None:
    print_message(console, message, "error")


def print_json(console: Console, data: Any, style: str = "success") -> None:
    """Print data as compact JSON.

    Args:
        console: Console to write to
        data: Any JSON-serializable value
        style: Theme style name
    """
    print_message(console, to_json(data), style)


def print_payload(console: Console, data: Any) -> None:
    """Print an outgoing request payload."""
    print_json(console, data, style="payload")


def clear_screen(console: Console) -> None:
    """Clear the terminal when attached to one."""
    if console.is_terminal:
        console.clear()
