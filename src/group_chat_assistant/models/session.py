"""Data models for the assistant conversation history."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any


class Role(Enum):
    """Who wrote a conversation entry."""

    USER = "user"
    ASSISTANT = "assistant"


@dataclass(frozen=True)
class ConversationEntry:
    """One turn of the conversation with the assistant."""

    role: Role
    content: str
    timestamp: datetime

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dict."""
        return {
            "role": self.role.value,
            "content": self.content,
            "timestamp": self.timestamp.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ConversationEntry":
        """Build an entry from the dict produced by ``to_dict``.

        Raises:
            KeyError: If a field is missing
            ValueError: If the role or timestamp is invalid
        """
        return cls(
            role=Role(data["role"]),
            content=str(data["content"]),
            timestamp=datetime.fromisoformat(data["timestamp"]),
        )
