"""Aggregated data handed from the aggregator to the renderer.

Each result type answers exactly one intent and carries only the fields
its template needs. Results are built fresh for every query.
"""

from dataclasses import dataclass, field
from typing import ClassVar

from .chat import ChatMessage
from .intent import Intent


@dataclass(frozen=True)
class SummaryResult:
    """Totals plus the most recent messages of the chat."""

    intent: ClassVar[Intent] = Intent.SUMMARIZE_DISCUSSION

    total_messages: int
    total_replies: int
    recent_messages: tuple[ChatMessage, ...]


@dataclass(frozen=True)
class FollowerQuestion:
    """A follower reply that asks something."""

    username: str
    question: str
    message_context: str  # Start of the parent message body


@dataclass(frozen=True)
class QuestionsResult:
    """Every question found in replies, in store order."""

    intent: ClassVar[Intent] = Intent.FOLLOWER_QUESTIONS

    questions: tuple[FollowerQuestion, ...]


@dataclass(frozen=True)
class MostLikedResult:
    """The message with the most reactions."""

    intent: ClassVar[Intent] = Intent.MOST_LIKED_TOPIC

    message: ChatMessage
    total_reactions: int


@dataclass(frozen=True)
class TopicSuggestion:
    """A topic worth covering next and why."""

    topic: str
    reason: str
    keyword: str  # Content keyword the suggestion relates to


@dataclass(frozen=True)
class SuggestionsResult:
    """Suggested topics plus the reply tally they were ranked against."""

    intent: ClassVar[Intent] = Intent.TOPIC_SUGGESTIONS

    suggestions: tuple[TopicSuggestion, ...]
    keyword_engagement: dict[str, int] = field(default_factory=dict)


@dataclass(frozen=True)
class EngagementStatsResult:
    """Chat-wide totals and per-post averages (rounded to one decimal)."""

    intent: ClassVar[Intent] = Intent.ENGAGEMENT_STATS

    total_messages: int
    total_reactions: int
    total_replies: int
    avg_reactions_per_post: float
    avg_replies_per_post: float


@dataclass(frozen=True)
class HelpResult:
    """Nothing to aggregate; the help template is fixed."""

    intent: ClassVar[Intent] = Intent.HELP


@dataclass(frozen=True)
class NoDataResult:
    """Returned when the store has nothing to answer the intent with."""

    intent: Intent
    reason: str = "empty_store"


AggregatedResult = (
    SummaryResult
    | QuestionsResult
    | MostLikedResult
    | SuggestionsResult
    | EngagementStatsResult
    | HelpResult
    | NoDataResult
)
