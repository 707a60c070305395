"""Conversion of raw chat data dicts into models.

The raw shape is the one the chat feed is served in::

    {
        "creator": {"name": ..., "username": ..., "avatar": ..., "followers": ...},
        "chatMessages": [
            {
                "id": 1,
                "timestamp": "Today, 9:30 AM",
                "content": "...",
                "reactions": {"heart": 12, "fire": 3},
                "replies": [
                    {"id": 101, "username": ..., "avatar": ..., "content": ...,
                     "replyCount": 3, "reactions": {"heart": 12}},
                ],
            },
        ],
    }

Missing ``reactions``, ``replies`` and ``replyCount`` are treated as empty.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ...models.chat import ChatData, ChatMessage, Creator, ReactionKind, Reply
from ...utils.errors import ChatDataError


def _require_str(raw: Mapping[str, Any], key: str, where: str) -> str:
    value = raw.get(key)
    if not isinstance(value, str):
        raise ChatDataError(f"{where}: field '{key}' must be a string")
    return value


def _require_count(raw: Mapping[str, Any], key: str, where: str) -> int:
    value = raw.get(key) or 0
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ChatDataError(f"{where}: {key} must be a non-negative integer")
    return value


def _require_id(raw: Mapping[str, Any], where: str) -> int | str:
    value = raw.get("id")
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise ChatDataError(f"{where}: field 'id' must be an integer or string")
    return value


def parse_reactions(raw: Mapping[str, Any] | None, where: str) -> dict[ReactionKind, int]:
    """Parse a reaction tally, keyed by reaction kind.

    Raises:
        ChatDataError: On unknown kinds or counts that are not non-negative integers
    """
    if raw is None:
        return {}
    if not isinstance(raw, Mapping):
        raise ChatDataError(f"{where}: reactions must be a mapping")

    tally: dict[ReactionKind, int] = {}
    for key, count in raw.items():
        try:
            kind = ReactionKind(key)
        except ValueError:
            raise ChatDataError(f"{where}: unknown reaction kind '{key}'") from None

        if isinstance(count, bool) or not isinstance(count, int) or count < 0:
            raise ChatDataError(f"{where}: reaction '{key}' must be a non-negative integer")
        tally[kind] = count

    return tally


def parse_reply(raw: Mapping[str, Any], where: str) -> Reply:
    """Parse one reply."""
    if not isinstance(raw, Mapping):
        raise ChatDataError(f"{where}: reply must be a mapping")

    reply_id = _require_id(raw, where)
    where = f"{where} reply {reply_id}"

    return Reply(
        reply_id=reply_id,
        username=_require_str(raw, "username", where),
        avatar=str(raw.get("avatar") or ""),
        content=_require_str(raw, "content", where),
        reply_count=_require_count(raw, "replyCount", where),
        reactions=parse_reactions(raw.get("reactions"), where),
    )


def parse_message(raw: Mapping[str, Any]) -> ChatMessage:
    """Parse one chat message with its replies."""
    if not isinstance(raw, Mapping):
        raise ChatDataError("chat message must be a mapping")

    message_id = _require_id(raw, "message")
    where = f"message {message_id}"

    raw_replies = raw.get("replies") or []
    if not isinstance(raw_replies, list):
        raise ChatDataError(f"{where}: replies must be a list")

    return ChatMessage(
        message_id=message_id,
        timestamp=str(raw.get("timestamp") or ""),
        content=_require_str(raw, "content", where),
        reactions=parse_reactions(raw.get("reactions"), where),
        replies=tuple(parse_reply(reply, where) for reply in raw_replies),
    )


def parse_creator(raw: Mapping[str, Any] | None) -> Creator | None:
    """Parse the optional creator block."""
    if raw is None:
        return None
    if not isinstance(raw, Mapping):
        raise ChatDataError("creator must be a mapping")

    return Creator(
        name=_require_str(raw, "name", "creator"),
        username=_require_str(raw, "username", "creator"),
        avatar=str(raw.get("avatar") or ""),
        followers=_require_count(raw, "followers", "creator"),
    )


def parse_chat_data(raw: Mapping[str, Any]) -> ChatData:
    """Parse a full chat data document.

    Args:
        raw: Decoded JSON/YAML document

    Returns:
        ChatData with messages in document order

    Raises:
        ChatDataError: If the document does not have the expected shape
    """
    if not isinstance(raw, Mapping):
        raise ChatDataError("chat data must be a mapping")

    raw_messages = raw.get("chatMessages") or []
    if not isinstance(raw_messages, list):
        raise ChatDataError("chatMessages must be a list")

    return ChatData(
        messages=tuple(parse_message(message) for message in raw_messages),
        creator=parse_creator(raw.get("creator")),
    )
