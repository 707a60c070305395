"""Protocol definitions for pluggable adapters."""

from .data_source import ChatDataSource
from .history import HistoryStore

__all__ = ["ChatDataSource", "HistoryStore"]
