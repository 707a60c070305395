"""Assistant facade that answers one query at a time.

This module implements the GroupChatAssistant class, the only entry point
the chat UI calls. Each query runs the same linear pipeline:
1. Classify the query into an intent
2. Aggregate the chat data that intent needs
3. Render the templated response

The assistant keeps no state between queries; the chat data it holds is
read-only, so repeated calls with the same query give the same answer.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

import structlog

from group_chat_assistant.core.aggregator import DataAggregator
from group_chat_assistant.core.classifier import IntentClassifier
from group_chat_assistant.core.renderer import ResponseRenderer
from group_chat_assistant.models.chat import ChatData, ChatMessage
from group_chat_assistant.utils.logging import LogEventNames

if TYPE_CHECKING:
    from group_chat_assistant.config.schema import AssistantConfig
    from group_chat_assistant.interfaces.data_source import ChatDataSource

log = structlog.get_logger()


class GroupChatAssistant:
    """Answers questions about a group chat with templated summaries.

    Example:
        assistant = GroupChatAssistant(SampleDataSource().load())
        print(assistant.answer("What topic was most liked?"))
    """

    def __init__(
        self,
        store: ChatData | Sequence[ChatMessage],
        classifier: IntentClassifier | None = None,
        aggregator: DataAggregator | None = None,
        renderer: ResponseRenderer | None = None,
    ) -> None:
        """Initialize the assistant.

        Args:
            store: Chat data, or just its messages in store order
            classifier: Intent classifier (default rule table if omitted)
            aggregator: Data aggregator (default settings if omitted)
            renderer: Response renderer
        """
        if isinstance(store, ChatData):
            self._data = store
        else:
            self._data = ChatData(messages=tuple(store))

        self._classifier = classifier or IntentClassifier()
        self._aggregator = aggregator or DataAggregator()
        self._renderer = renderer or ResponseRenderer()

    @property
    def data(self) -> ChatData:
        """The chat data this assistant answers from."""
        return self._data

    def answer(self, query: str) -> str:
        """Answer a free-text query.

        Args:
            query: The user's question

        Returns:
            Markdown-lite response text
        """
        intent = self._classifier.classify(query)
        result = self._aggregator.aggregate(intent, self._data.messages)
        response = self._renderer.render(intent, result)

        log.debug(
            LogEventNames.QUERY_ANSWERED,
            intent=intent.value,
            query=query,
            response_length=len(response),
        )
        return response


def create_assistant(
    config: AssistantConfig,
    source: ChatDataSource | None = None,
) -> GroupChatAssistant:
    """Build an assistant from configuration.

    Args:
        config: Application configuration
        source: Data source to load from; derived from ``config.data`` if omitted

    Returns:
        Assistant over the loaded chat data

    Raises:
        FileNotFoundError: If a configured data file does not exist
        ChatDataError: If the chat data is malformed
    """
    if source is None:
        from group_chat_assistant.adapters.data import source_from_config

        source = source_from_config(config.data)

    data = source.load()
    log.info(
        LogEventNames.CHAT_DATA_LOADED,
        message_count=len(data.messages),
        creator=data.creator.username if data.creator else None,
    )

    return GroupChatAssistant(
        data,
        aggregator=DataAggregator(
            rank_suggestions_by_engagement=config.suggestions.rank_by_engagement,
        ),
    )
