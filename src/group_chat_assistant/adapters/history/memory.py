"""Conversation history kept in process memory."""

from collections.abc import Sequence

from ...models.session import ConversationEntry


class InMemoryHistoryStore:
    """History store that lives only as long as the process."""

    def __init__(self) -> None:
        self._entries: list[ConversationEntry] = []

    def load(self) -> list[ConversationEntry]:
        return list(self._entries)

    def save(self, entries: Sequence[ConversationEntry]) -> None:
        self._entries = list(entries)

    def clear(self) -> None:
        self._entries = []
