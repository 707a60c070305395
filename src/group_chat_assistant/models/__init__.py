"""Data models and transfer objects."""

from .chat import (
    REACTION_EMOJI,
    ChatData,
    ChatMessage,
    Creator,
    ReactionKind,
    Reply,
    top_reaction,
    total_reactions,
)
from .intent import Intent
from .results import (
    AggregatedResult,
    EngagementStatsResult,
    FollowerQuestion,
    HelpResult,
    MostLikedResult,
    NoDataResult,
    QuestionsResult,
    SuggestionsResult,
    SummaryResult,
    TopicSuggestion,
)
from .session import ConversationEntry, Role

__all__ = [
    # Chat models
    "REACTION_EMOJI",
    "ChatData",
    "ChatMessage",
    "Creator",
    "ReactionKind",
    "Reply",
    "top_reaction",
    "total_reactions",
    # Intent
    "Intent",
    # Aggregated results
    "AggregatedResult",
    "EngagementStatsResult",
    "FollowerQuestion",
    "HelpResult",
    "MostLikedResult",
    "NoDataResult",
    "QuestionsResult",
    "SuggestionsResult",
    "SummaryResult",
    "TopicSuggestion",
    # Session models
    "ConversationEntry",
    "Role",
]
