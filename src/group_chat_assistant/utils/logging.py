"""Structured logging configuration.

This module configures structlog for the group chat assistant:
- Configurable log levels and output formats (JSON/console)
- Long values (queries, responses) clipped to a bounded length
- Context injection for correlation
- File and console output support
"""

from __future__ import annotations

import logging
import sys
from collections.abc import MutableMapping
from enum import StrEnum
from pathlib import Path
from typing import Any

import structlog

DEFAULT_MAX_VALUE_LENGTH = 200

_max_value_length = DEFAULT_MAX_VALUE_LENGTH


class LogFormat(StrEnum):
    """Log output format options."""

    JSON = "json"
    CONSOLE = "console"


class LogLevel(StrEnum):
    """Log level options."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


def clip_log_value(value: Any, max_length: int | None = None) -> Any:
    """Recursively shorten long strings in log values.

    Args:
        value: Value to clip (can be nested dict/list/str)
        max_length: Longest string kept intact (defaults to the configured limit)

    Returns:
        Value with long strings cut and suffixed with "..."
    """
    limit = _max_value_length if max_length is None else max_length

    if isinstance(value, str):
        return value if len(value) <= limit else value[:limit] + "..."
    elif isinstance(value, dict):
        return {k: clip_log_value(v, limit) for k, v in value.items()}
    elif isinstance(value, (list, tuple)):
        return type(value)(clip_log_value(v, limit) for v in value)
    else:
        return value


def value_clipper(
    logger: logging.Logger,
    method_name: str,
    event_dict: MutableMapping[str, Any],
) -> MutableMapping[str, Any]:
    """Structlog processor that clips long field values.

    The event name itself is left untouched.
    """
    for key, value in event_dict.items():
        if key != "event":
            event_dict[key] = clip_log_value(value)
    return event_dict


def add_context_processor(
    logger: logging.Logger,
    method_name: str,
    event_dict: MutableMapping[str, Any],
) -> MutableMapping[str, Any]:
    """Add service name and version to all log entries."""
    event_dict["service"] = "group-chat-assistant"

    try:
        from group_chat_assistant._version import __version__

        event_dict["version"] = __version__
    except (ImportError, RuntimeError):
        pass

    return event_dict


def configure_logging(
    level: LogLevel | str = LogLevel.INFO,
    log_format: LogFormat | str = LogFormat.CONSOLE,
    file_path: Path | str | None = None,
    file_enabled: bool = False,
    max_value_length: int = DEFAULT_MAX_VALUE_LENGTH,
) -> None:
    """Configure structured logging for the application.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Output format (json or console)
        file_path: Path to log file (if file logging enabled)
        file_enabled: Whether to enable file logging
        max_value_length: Longest field value logged without clipping

    Example:
        # Interactive use
        configure_logging(level="DEBUG", log_format="console")

        # For log aggregation
        configure_logging(level="INFO", log_format="json")
    """
    global _max_value_length

    if isinstance(level, str):
        level = LogLevel(level.upper())
    if isinstance(log_format, str):
        log_format = LogFormat(log_format.lower())

    _max_value_length = max_value_length
    numeric_level = getattr(logging, level.value)

    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        add_context_processor,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        value_clipper,
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if log_format == LogFormat.JSON:
        shared_processors.append(structlog.processors.JSONRenderer(ensure_ascii=False))
    else:
        shared_processors.append(
            structlog.dev.ConsoleRenderer(
                colors=sys.stderr.isatty(), exception_formatter=structlog.dev.plain_traceback
            )
        )

    structlog.configure(
        processors=shared_processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handlers: list[logging.Handler] = []

    # Logs go to stderr; stdout carries assistant responses
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(numeric_level)
    handlers.append(console_handler)

    if file_enabled and file_path:
        try:
            file_path = Path(file_path)
            file_path.parent.mkdir(parents=True, exist_ok=True)

            file_handler = logging.FileHandler(file_path, encoding="utf-8")
            file_handler.setLevel(numeric_level)
            handlers.append(file_handler)
        except OSError as e:
            # Continue with console only
            console_logger = logging.getLogger("group_chat_assistant.logging")
            console_logger.warning(f"Could not create log file {file_path}: {e}")

    logging.basicConfig(
        format="%(message)s",
        level=numeric_level,
        handlers=handlers,
        force=True,
    )


def bind_context(**kwargs: Any) -> None:
    """Bind contextual variables for all subsequent log calls.

    Example:
        bind_context(session_id="3f2a")
        log.info(LogEventNames.QUERY_ANSWERED)  # Includes session_id
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """Clear all bound contextual variables."""
    structlog.contextvars.clear_contextvars()


class LogEventNames:
    """Standard log event names for consistency.

    Use these constants instead of string literals so event names stay
    stable for log searches.
    """

    # Startup and shutdown
    CONFIGURATION_LOADED = "configuration_loaded"
    CONFIGURATION_INVALID = "configuration_invalid"
    DRY_RUN_CONFIG_VALID = "dry_run_mode_config_valid"
    FILE_NOT_FOUND = "file_not_found"
    SHUTTING_DOWN = "shutting_down_gracefully"

    # Chat data
    CHAT_DATA_FILE_READ = "chat_data_file_read"
    CHAT_DATA_LOADED = "chat_data_loaded"
    CHAT_DATA_INVALID = "chat_data_invalid"

    # Query pipeline
    INTENT_CLASSIFIED = "intent_classified"
    INTENT_FALLBACK = "intent_fallback"
    DATA_AGGREGATED = "data_aggregated"
    QUERY_ANSWERED = "query_answered"

    # Conversation session
    SESSION_STARTED = "session_started"
    SESSION_CLEARED = "session_cleared"
    HISTORY_LOADED = "history_loaded"
    HISTORY_LOAD_FAILED = "history_load_failed"
    HISTORY_SAVED = "history_saved"
    HISTORY_SAVE_FAILED = "history_save_failed"
    HISTORY_CLEAR_FAILED = "history_clear_failed"
