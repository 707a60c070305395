"""Conversation history persisted to a JSON file."""

from __future__ import annotations

import json
from collections.abc import Sequence
from pathlib import Path

import structlog

from ...models.session import ConversationEntry
from ...utils.errors import HistoryError
from ...utils.logging import LogEventNames

log = structlog.get_logger()


class JsonFileHistoryStore:
    """Saves the conversation as a JSON list of entries.

    The whole file is rewritten on every save. Parent directories are
    created as needed.

    Example:
        store = JsonFileHistoryStore(Path("~/.group-chat-assistant/history.json"))
        entries = store.load()
    """

    def __init__(self, path: Path) -> None:
        """Initialize the store.

        Args:
            path: History file location (``~`` is expanded)
        """
        self._path = path.expanduser()

    @property
    def path(self) -> Path:
        """Location of the history file."""
        return self._path

    def load(self) -> list[ConversationEntry]:
        """Load saved entries, or an empty list if no file exists.

        Raises:
            HistoryError: If the file exists but is not valid history
        """
        if not self._path.exists():
            return []

        try:
            with self._path.open(encoding="utf-8") as f:
                raw = json.load(f)
            if not isinstance(raw, list):
                raise HistoryError(f"History file {self._path} must contain a list")
            return [ConversationEntry.from_dict(item) for item in raw]
        except HistoryError:
            raise
        except (OSError, json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
            raise HistoryError(f"Could not read history from {self._path}: {e}") from e

    def save(self, entries: Sequence[ConversationEntry]) -> None:
        """Write all entries, replacing the previous file.

        Raises:
            HistoryError: If the file cannot be written
        """
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with self._path.open("w", encoding="utf-8") as f:
                json.dump([entry.to_dict() for entry in entries], f, ensure_ascii=False, indent=2)
        except OSError as e:
            raise HistoryError(f"Could not write history to {self._path}: {e}") from e

        log.debug(LogEventNames.HISTORY_SAVED, path=str(self._path), entries=len(entries))

    def clear(self) -> None:
        """Delete the history file if present.

        Raises:
            HistoryError: If the file exists but cannot be removed
        """
        try:
            self._path.unlink(missing_ok=True)
        except OSError as e:
            raise HistoryError(f"Could not remove history file {self._path}: {e}") from e
