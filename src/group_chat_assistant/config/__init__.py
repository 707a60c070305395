"""Configuration loading and validation."""

from .loader import load_config
from .schema import (
    AssistantConfig,
    DataConfig,
    FileLoggingConfig,
    HistoryConfig,
    LoggingConfig,
    SuggestionsConfig,
)

__all__ = [
    # Loader
    "load_config",
    # Root config
    "AssistantConfig",
    # Sections
    "DataConfig",
    "HistoryConfig",
    "SuggestionsConfig",
    "LoggingConfig",
    "FileLoggingConfig",
]
