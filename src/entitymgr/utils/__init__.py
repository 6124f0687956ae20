"""Utilities module for the Entity Manager."""

from .display_utils import (
    clear_screen,
    print_error,
    print_json,
    print_message,
    print_payload,
    print_success,
    to_json,
)
from .logging_utils import (
    configure_logging,
    get_logger,
    log_operation,
    setup_logging,
)
from .request_utils import send_json_request
from .rich_utils import create_console, get_console, install_rich_tracebacks

__all__ = [
    # Display
    "clear_screen",
    "print_error",
    "print_json",
    "print_message",
    "print_payload",
    "print_success",
    "to_json",
    # Logging
    "configure_logging",
    "get_logger",
    "log_operation",
    "setup_logging",
    # Requests
    "send_json_request",
    # Rich
    "create_console",
    "get_console",
    "install_rich_tracebacks",
]
