"""Rule-based assistant that answers questions about a group chat."""

from group_chat_assistant._version import __version__
from group_chat_assistant.core.assistant import GroupChatAssistant, create_assistant
from group_chat_assistant.core.session import ConversationSession

__all__ = [
    "ConversationSession",
    "GroupChatAssistant",
    "__version__",
    "create_assistant",
]
