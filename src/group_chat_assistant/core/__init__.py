"""Core business logic components.

This module exports the main business logic classes:
- GroupChatAssistant: Facade that answers one query at a time
- IntentClassifier: Maps queries to intents with ordered keyword rules
- DataAggregator: Computes the chat data each intent needs
- ResponseRenderer: Renders templated responses
- ConversationSession: Records a conversation with the assistant
"""

from group_chat_assistant.core.aggregator import DataAggregator
from group_chat_assistant.core.assistant import GroupChatAssistant, create_assistant
from group_chat_assistant.core.classifier import INTENT_RULES, IntentClassifier, IntentRule
from group_chat_assistant.core.renderer import ResponseRenderer
from group_chat_assistant.core.session import QUICK_ACTIONS, ConversationSession

__all__ = [
    "INTENT_RULES",
    "QUICK_ACTIONS",
    "ConversationSession",
    "DataAggregator",
    "GroupChatAssistant",
    "IntentClassifier",
    "IntentRule",
    "ResponseRenderer",
    "create_assistant",
]
