"""Shared test fixtures for the group chat assistant."""

from collections.abc import Callable
from typing import Any

import pytest

from group_chat_assistant.adapters.data import SampleDataSource
from group_chat_assistant.adapters.data.parsing import parse_message
from group_chat_assistant.models.chat import ChatData, ChatMessage


@pytest.fixture
def sample_data() -> ChatData:
    """Load the bundled four-message sample chat."""
    return SampleDataSource().load()


@pytest.fixture
def sample_messages(sample_data: ChatData) -> tuple[ChatMessage, ...]:
    """Return the sample chat messages in store order."""
    return sample_data.messages


@pytest.fixture
def make_message() -> Callable[..., ChatMessage]:
    """Return a factory building a ChatMessage from raw-shaped fields."""
    counter = iter(range(1000, 2000))

    def factory(
        content: str = "A post",
        reactions: dict[str, int] | None = None,
        replies: list[dict[str, Any]] | None = None,
        timestamp: str = "Today, 8:00 AM",
    ) -> ChatMessage:
        raw: dict[str, Any] = {
            "id": next(counter),
            "timestamp": timestamp,
            "content": content,
        }
        if reactions is not None:
            raw["reactions"] = reactions
        if replies is not None:
            raw["replies"] = replies
        return parse_message(raw)

    return factory


@pytest.fixture
def make_reply() -> Callable[..., dict[str, Any]]:
    """Return a factory building a raw reply dict."""
    counter = iter(range(5000, 6000))

    def factory(content: str = "Nice!", username: str = "follower") -> dict[str, Any]:
        return {
            "id": next(counter),
            "username": username,
            "avatar": username[:2].upper(),
            "content": content,
        }

    return factory
