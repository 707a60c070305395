"""Pydantic models for configuration schema."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class DataConfig(BaseModel):
    """Chat data configuration."""

    path: Path | None = None  # None serves the bundled sample chat
    format: Literal["auto", "json", "yaml"] = "auto"


class HistoryConfig(BaseModel):
    """Conversation history configuration."""

    enabled: bool = False
    path: Path = Path("~/.group-chat-assistant/history.json")
    max_entries: int = Field(200, ge=2, le=10000)


class SuggestionsConfig(BaseModel):
    """Topic suggestion configuration."""

    rank_by_engagement: bool = False


class FileLoggingConfig(BaseModel):
    """File logging configuration."""

    enabled: bool = False
    path: Path = Path("group-chat-assistant.log")


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: Literal["json", "console"] = "console"
    file: FileLoggingConfig = FileLoggingConfig()
    max_value_length: int = Field(200, ge=20, le=10000)

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: object) -> object:
        """Accept log levels in any case."""
        return v.upper() if isinstance(v, str) else v


class AssistantConfig(BaseSettings):
    """Root configuration for the group chat assistant."""

    data: DataConfig = DataConfig()
    history: HistoryConfig = HistoryConfig()
    suggestions: SuggestionsConfig = SuggestionsConfig()
    logging: LoggingConfig = LoggingConfig()

    model_config = SettingsConfigDict(
        env_prefix="GROUP_CHAT_ASSISTANT_",
        env_file=".env",
        env_nested_delimiter="__",
    )
