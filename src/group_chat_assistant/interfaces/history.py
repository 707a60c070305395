"""Abstract interface for conversation history persistence."""

from collections.abc import Sequence
from typing import Protocol

from ..models.session import ConversationEntry


class HistoryStore(Protocol):
    """Best-effort storage for the assistant conversation.

    Implementations may lose data; callers treat failures as non-fatal.
    """

    def load(self) -> list[ConversationEntry]:
        """
        Load previously saved entries, oldest first.

        Returns:
            Saved entries, or an empty list if nothing was saved

        Raises:
            HistoryError: If saved history exists but cannot be read
        """
        ...

    def save(self, entries: Sequence[ConversationEntry]) -> None:
        """
        Replace the saved history with the given entries.

        Args:
            entries: Full conversation, oldest first

        Raises:
            HistoryError: If the history cannot be written
        """
        ...

    def clear(self) -> None:
        """Remove any saved history."""
        ...
