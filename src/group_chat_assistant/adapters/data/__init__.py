"""Chat data sources."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .file import FileDataSource, detect_format
from .parsing import parse_chat_data
from .sample import SAMPLE_CHAT_DATA, SampleDataSource

if TYPE_CHECKING:
    from ...config.schema import DataConfig
    from ...interfaces.data_source import ChatDataSource


def source_from_config(config: DataConfig) -> ChatDataSource:
    """Pick the data source described by the data configuration.

    No configured path means the bundled sample chat.
    """
    if config.path is None:
        return SampleDataSource()
    return FileDataSource(config.path, config.format)


__all__ = [
    "SAMPLE_CHAT_DATA",
    "FileDataSource",
    "SampleDataSource",
    "detect_format",
    "parse_chat_data",
    "source_from_config",
]
