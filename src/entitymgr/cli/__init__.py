"""CLI module for the Entity Manager."""

from .commands import HELP_LINES, PROMPT, CommandHandler, run_loop
from .session import Session, SessionState

__all__ = [
    "HELP_LINES",
    "PROMPT",
    "CommandHandler",
    "Session",
    "SessionState",
    "run_loop",
]
