"""Conversation session owned by the chat UI.

The assistant itself is stateless. A ConversationSession records the
back-and-forth with it, caps the history length, and saves the history to
an optional HistoryStore. Saving is best-effort: a failing store is logged
and the conversation carries on.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING

import structlog

from group_chat_assistant.models.session import ConversationEntry, Role
from group_chat_assistant.utils.errors import HistoryError
from group_chat_assistant.utils.logging import LogEventNames

if TYPE_CHECKING:
    from group_chat_assistant.core.assistant import GroupChatAssistant
    from group_chat_assistant.interfaces.history import HistoryStore

log = structlog.get_logger()

QUICK_ACTIONS: tuple[str, ...] = (
    "Summarize today's discussion",
    "What questions do followers have?",
    "Suggest topics for next chat",
    "What topic was most liked?",
)

HELP_QUERY = "help"


class ConversationSession:
    """A user's conversation with the assistant.

    Example:
        session = ConversationSession(assistant, JsonFileHistoryStore(path))
        reply = session.ask("Show me engagement stats")
        for entry in session.history:
            print(entry.role.value, entry.content)
    """

    DEFAULT_MAX_ENTRIES = 200

    def __init__(
        self,
        assistant: GroupChatAssistant,
        history_store: HistoryStore | None = None,
        max_entries: int = DEFAULT_MAX_ENTRIES,
    ) -> None:
        """Initialize the session, restoring saved history if any.

        Args:
            assistant: Assistant that answers the queries
            history_store: Where to persist the conversation (optional)
            max_entries: Oldest entries are dropped beyond this many
        """
        if max_entries < 1:
            raise ValueError("max_entries must be at least 1")

        self._assistant = assistant
        self._store = history_store
        self._max_entries = max_entries
        self._entries: list[ConversationEntry] = self._restore()

    @property
    def history(self) -> tuple[ConversationEntry, ...]:
        """Conversation so far, oldest first."""
        return tuple(self._entries)

    def ask(self, query: str) -> str | None:
        """Send a query to the assistant and record both sides.

        Args:
            query: Raw user input

        Returns:
            The assistant's response, or None if the input was blank
        """
        text = query.strip()
        if not text:
            return None

        self._record(Role.USER, text)
        response = self._assistant.answer(text)
        self._record(Role.ASSISTANT, response)

        self._persist()
        return response

    def welcome(self) -> str:
        """The help response, shown when a conversation starts over."""
        return self._assistant.answer(HELP_QUERY)

    def clear(self) -> None:
        """Forget the conversation, including any saved copy."""
        self._entries = []
        if self._store is not None:
            try:
                self._store.clear()
            except HistoryError as e:
                log.warning(LogEventNames.HISTORY_CLEAR_FAILED, error=str(e))
        log.info(LogEventNames.SESSION_CLEARED)

    def _record(self, role: Role, content: str) -> None:
        self._entries.append(ConversationEntry(role, content, datetime.now(UTC)))
        overflow = len(self._entries) - self._max_entries
        if overflow > 0:
            del self._entries[:overflow]

    def _restore(self) -> list[ConversationEntry]:
        if self._store is None:
            return []

        try:
            entries = self._store.load()
        except HistoryError as e:
            log.warning(LogEventNames.HISTORY_LOAD_FAILED, error=str(e))
            return []

        log.debug(LogEventNames.HISTORY_LOADED, entries=len(entries))
        return entries[-self._max_entries :]

    def _persist(self) -> None:
        if self._store is None:
            return

        try:
            self._store.save(self._entries)
        except HistoryError as e:
            log.warning(LogEventNames.HISTORY_SAVE_FAILED, error=str(e))
