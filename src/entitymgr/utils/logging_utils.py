"""Structured logging utilities for the Entity Manager."""

import functools
import json
import logging
import logging.config
import os
import sys
import time
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

import yaml

ROOT_LOGGER_NAME = "entitymgr"

# Record attributes copied into structured and detailed output
CONTEXT_FIELDS = ("operation", "command", "api_endpoint", "status_code", "duration")


class ColoredFormatter(logging.Formatter):
    """Custom formatter with color support for terminal output."""

    # ANSI color codes
    COLORS = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
        "RESET": "\033[0m",  # Reset
    }

    def __init__(self, *args: Any, disable_colors: bool = False, **kwargs: Any) -> None:
        """Initialize formatter with color configuration.

        Args:
            disable_colors: Whether to disable colored output
        """
        super().__init__(*args, **kwargs)
        self.disable_colors = disable_colors

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with colors for terminal output."""
        levelname = record.levelname
        if (
            not self.disable_colors
            and hasattr(sys.stderr, "isatty")
            and sys.stderr.isatty()
        ):
            color = self.COLORS.get(levelname, "")
            reset = self.COLORS["RESET"]
            record.levelname = f"{color}{levelname}{reset}"

        try:
            return super().format(record)
        finally:
            record.levelname = levelname


class StructuredFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as structured JSON."""
        log_entry = {
            "timestamp": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        for name in CONTEXT_FIELDS:
            if hasattr(record, name):
                log_entry[name] = getattr(record, name)

        return json.dumps(log_entry, default=str)


class DetailedFormatter(logging.Formatter):
    """Detailed formatter with context information."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with detailed context."""
        base_msg = super().format(record)

        context_parts = []
        if hasattr(record, "operation"):
            context_parts.append(f"op={record.operation}")
        if hasattr(record, "command"):
            context_parts.append(f"command={record.command}")
        if hasattr(record, "api_endpoint"):
            context_parts.append(f"endpoint={record.api_endpoint}")
        if hasattr(record, "status_code"):
            context_parts.append(f"status={record.status_code}")
        if hasattr(record, "duration"):
            context_parts.append(f"duration={record.duration:.3f}s")

        if context_parts:
            return base_msg + " [" + ", ".join(context_parts) + "]"

        return base_msg


class OperationFilter(logging.Filter):
    """Filter to add operation context to log records."""

    def __init__(self, operation: str | None = None):
        super().__init__()
        self.operation = operation

    def filter(self, record: logging.LogRecord) -> bool:
        """Add operation context to the record."""
        if self.operation and not hasattr(record, "operation"):
            record.operation = self.operation
        return True


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    structured: bool = False,
    operation: str | None = None,
    log_format: str = "console",
    disable_colors: bool = False,
) -> logging.Logger:
    """Configure structured logging for the application.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional log file path for file output
        structured: Whether to use structured JSON logging
        operation: Current operation context for filtering
        log_format: Log format (console, json, detailed)
        disable_colors: Whether to disable colored output

    Returns:
        logging.Logger: Configured logger instance
    """
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.handlers.clear()

    log_level = getattr(logging, level.upper(), logging.WARNING)
    root_logger.setLevel(log_level)

    # Console output goes to stderr so it never mixes with REPL output
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(log_level)

    if structured or log_format == "json":
        console_formatter: logging.Formatter = StructuredFormatter()
    elif log_format == "detailed":
        console_formatter = DetailedFormatter(
            fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    else:
        console_formatter = ColoredFormatter(
            fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
            disable_colors=disable_colors,
        )

    console_handler.setFormatter(console_formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(log_level)
        # Always use structured logging for files
        file_handler.setFormatter(StructuredFormatter())
        root_logger.addHandler(file_handler)

    if operation:
        operation_filter = OperationFilter(operation)
        for handler in root_logger.handlers:
            handler.addFilter(operation_filter)

    return root_logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the specified module.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger: Logger instance
    """
    if name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def configure_from_env() -> logging.Logger:
    """Configure logging from environment variables.

    Environment variables:
        ENTITYMGR_LOG_LEVEL: Log level (default: WARNING)
        ENTITYMGR_LOG_FILE: Log file path (optional)
        ENTITYMGR_LOG_STRUCTURED: Use structured logging (default: false)
        ENTITYMGR_LOG_OPERATION: Current operation context (optional)
        ENTITYMGR_LOG_FORMAT: Log format (console, json, detailed) (default: console)
        ENTITYMGR_LOG_DISABLE_COLORS: Disable colored output (default: false)

    Returns:
        logging.Logger: Configured logger instance
    """
    level = os.getenv("ENTITYMGR_LOG_LEVEL", "WARNING")
    log_file = os.getenv("ENTITYMGR_LOG_FILE")
    structured = os.getenv("ENTITYMGR_LOG_STRUCTURED", "false").lower() == "true"
    operation = os.getenv("ENTITYMGR_LOG_OPERATION")
    log_format = os.getenv("ENTITYMGR_LOG_FORMAT", "console")
    disable_colors = (
        os.getenv("ENTITYMGR_LOG_DISABLE_COLORS", "false").lower() == "true"
    )

    return setup_logging(
        level=level,
        log_file=log_file,
        structured=structured,
        operation=operation,
        log_format=log_format,
        disable_colors=disable_colors,
    )


def configure_from_yaml(config_path: str | Path) -> logging.Logger:
    """Configure logging from a YAML dictConfig file.

    Args:
        config_path: Path to YAML configuration file

    Returns:
        logging.Logger: Configured logger instance

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If config file is invalid
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Logging config file not found: {config_path}")

    try:
        with open(config_path, encoding="utf-8") as f:
            config = yaml.safe_load(f)

        logging.config.dictConfig(config)
        return logging.getLogger(ROOT_LOGGER_NAME)
    except Exception as e:
        raise ValueError(f"Invalid logging configuration: {e}") from e


def configure_logging() -> logging.Logger:
    """Configure logging from ENTITYMGR_LOG_CONFIG if set, else from the environment."""
    config_path = os.getenv("ENTITYMGR_LOG_CONFIG")
    if config_path:
        return configure_from_yaml(config_path)
    return configure_from_env()


def log_operation(operation: str, **context: Any) -> Any:
    """Decorator for logging operation start/end with duration.

    Args:
        operation: Operation name
        **context: Additional context variables
    """

    def decorator(func: Any) -> Any:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            logger = get_logger(func.__module__)
            extra = {"operation": operation, **context}

            logger.info(f"Starting {operation}", extra=extra)
            start = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                logger.error(
                    f"Failed {operation}: {e}",
                    extra={**extra, "duration": time.perf_counter() - start},
                    exc_info=True,
                )
                raise
            logger.info(
                f"Completed {operation}",
                extra={**extra, "duration": time.perf_counter() - start},
            )
            return result

        return wrapper

    return decorator


def init_default_logging() -> None:
    """Initialize default logging configuration if not already configured."""
    if not logging.getLogger(ROOT_LOGGER_NAME).handlers:
        configure_from_env()


# Initialize logging when module is imported
init_default_logging()
