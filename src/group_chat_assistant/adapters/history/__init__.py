"""Conversation history stores."""

from .json_file import JsonFileHistoryStore
from .memory import InMemoryHistoryStore

__all__ = ["InMemoryHistoryStore", "JsonFileHistoryStore"]
