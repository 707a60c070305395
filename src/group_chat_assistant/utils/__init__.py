"""Utility functions and helpers.

This module provides various utilities for the group chat assistant:
- errors: Exception hierarchy
- logging: Structured logging setup
- markup: Markdown-lite to HTML conversion
"""

from group_chat_assistant.utils.errors import (
    AssistantError,
    ChatDataError,
    HistoryError,
    RenderError,
)
from group_chat_assistant.utils.logging import (
    LogEventNames,
    LogFormat,
    LogLevel,
    bind_context,
    clear_context,
    configure_logging,
)
from group_chat_assistant.utils.markup import to_html

__all__ = [
    # Errors
    "AssistantError",
    "ChatDataError",
    "HistoryError",
    "RenderError",
    # Logging
    "LogEventNames",
    "LogFormat",
    "LogLevel",
    "bind_context",
    "clear_context",
    "configure_logging",
    # Markup
    "to_html",
]
