"""Concrete implementations of provider interfaces."""

from .data import FileDataSource, SampleDataSource
from .history import InMemoryHistoryStore, JsonFileHistoryStore

__all__ = [
    "FileDataSource",
    "InMemoryHistoryStore",
    "JsonFileHistoryStore",
    "SampleDataSource",
]
