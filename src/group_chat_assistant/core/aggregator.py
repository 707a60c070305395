"""Per-intent aggregation over the chat data store.

The aggregator never mutates the store. Messages or replies with missing
optional fields (reactions, replies) count as empty.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from decimal import ROUND_HALF_UP, Decimal

import structlog

from group_chat_assistant.models.chat import ChatMessage
from group_chat_assistant.models.intent import Intent
from group_chat_assistant.models.results import (
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
from group_chat_assistant.utils.logging import LogEventNames

log = structlog.get_logger()

TOPIC_KEYWORDS: tuple[str, ...] = (
    "fashion",
    "style",
    "outfit",
    "accessory",
    "seasonal",
    "haul",
    "tip",
)

DEFAULT_SUGGESTIONS: tuple[TopicSuggestion, ...] = (
    TopicSuggestion(
        topic="Work outfit styling",
        reason="Multiple followers asked for professional outfit ideas",
        keyword="outfit",
    ),
    TopicSuggestion(
        topic="Seasonal favorites for fall",
        reason="High engagement on seasonal content",
        keyword="seasonal",
    ),
    TopicSuggestion(
        topic="Accessory styling guide",
        reason="Recent video on accessories got great feedback",
        keyword="accessory",
    ),
)


def round_one_decimal(value: float) -> float:
    """Round half away from zero to one decimal place.

    ``round()`` rounds exact halves to even, so 0.25 would become 0.2;
    displayed averages round 0.25 up to 0.3.
    """
    return float(Decimal(value).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def count_replies(store: Sequence[ChatMessage]) -> int:
    """Total number of direct replies across all messages."""
    return sum(message.reply_total for message in store)


def count_reactions(store: Sequence[ChatMessage]) -> int:
    """Total number of reactions across all messages (replies excluded)."""
    return sum(message.total_reactions for message in store)


class DataAggregator:
    """Computes the dataset each intent's response needs.

    Example:
        aggregator = DataAggregator()
        result = aggregator.aggregate(Intent.ENGAGEMENT_STATS, messages)
        print(result.avg_replies_per_post)
    """

    RECENT_MESSAGE_COUNT = 2
    CONTEXT_LENGTH = 50
    ELLIPSIS = "..."

    def __init__(self, rank_suggestions_by_engagement: bool = False) -> None:
        """Initialize the aggregator.

        Args:
            rank_suggestions_by_engagement: Order topic suggestions by the
                reply count of messages mentioning their keyword, instead
                of the fixed default order
        """
        self._rank_suggestions = rank_suggestions_by_engagement
        self._handlers: dict[Intent, Callable[[Sequence[ChatMessage]], AggregatedResult]] = {
            Intent.SUMMARIZE_DISCUSSION: self._summarize,
            Intent.FOLLOWER_QUESTIONS: self._follower_questions,
            Intent.MOST_LIKED_TOPIC: self._most_liked,
            Intent.TOPIC_SUGGESTIONS: self._topic_suggestions,
            Intent.ENGAGEMENT_STATS: self._engagement_stats,
        }

    def aggregate(self, intent: Intent, store: Sequence[ChatMessage]) -> AggregatedResult:
        """Build the aggregated result for an intent.

        Args:
            intent: Classified intent of the query
            store: Chat messages in store order (newest first)

        Returns:
            The result variant matching the intent, or a NoDataResult when
            the store is empty and the intent needs at least one message
        """
        handler = self._handlers.get(intent)
        if handler is None:
            return HelpResult()

        result = handler(store)
        log.debug(
            LogEventNames.DATA_AGGREGATED,
            intent=intent.value,
            result_type=type(result).__name__,
            message_count=len(store),
        )
        return result

    def _summarize(self, store: Sequence[ChatMessage]) -> SummaryResult:
        return SummaryResult(
            total_messages=len(store),
            total_replies=count_replies(store),
            recent_messages=tuple(store[: self.RECENT_MESSAGE_COUNT]),
        )

    def _follower_questions(self, store: Sequence[ChatMessage]) -> QuestionsResult:
        questions: list[FollowerQuestion] = []

        for message in store:
            for reply in message.replies or ():
                if not reply.is_question:
                    continue
                questions.append(
                    FollowerQuestion(
                        username=reply.username,
                        question=reply.content,
                        message_context=message.content[: self.CONTEXT_LENGTH] + self.ELLIPSIS,
                    )
                )

        return QuestionsResult(questions=tuple(questions))

    def _most_liked(self, store: Sequence[ChatMessage]) -> MostLikedResult | NoDataResult:
        if not store:
            return NoDataResult(Intent.MOST_LIKED_TOPIC)

        # Strictly greater keeps the first message on ties
        best = store[0]
        best_total = best.total_reactions
        for message in store[1:]:
            total = message.total_reactions
            if total > best_total:
                best, best_total = message, total

        return MostLikedResult(message=best, total_reactions=best_total)

    def _topic_suggestions(self, store: Sequence[ChatMessage]) -> SuggestionsResult:
        engagement = self.keyword_engagement(store)

        suggestions = DEFAULT_SUGGESTIONS
        if self._rank_suggestions:
            # sorted() is stable, so equal tallies keep the default order
            suggestions = tuple(
                sorted(
                    DEFAULT_SUGGESTIONS,
                    key=lambda s: engagement.get(s.keyword, 0),
                    reverse=True,
                )
            )

        return SuggestionsResult(suggestions=suggestions, keyword_engagement=engagement)

    def keyword_engagement(self, store: Sequence[ChatMessage]) -> dict[str, int]:
        """Tally replies per topic keyword found in message bodies.

        Only keywords that appear in at least one message are present.
        """
        engagement: dict[str, int] = {}

        for message in store:
            lowered = message.content.lower()
            for keyword in TOPIC_KEYWORDS:
                if keyword in lowered:
                    engagement[keyword] = engagement.get(keyword, 0) + message.reply_total

        return engagement

    def _engagement_stats(
        self, store: Sequence[ChatMessage]
    ) -> EngagementStatsResult | NoDataResult:
        if not store:
            return NoDataResult(Intent.ENGAGEMENT_STATS)

        message_count = len(store)
        reactions = count_reactions(store)
        replies = count_replies(store)

        return EngagementStatsResult(
            total_messages=message_count,
            total_reactions=reactions,
            total_replies=replies,
            avg_reactions_per_post=round_one_decimal(reactions / message_count),
            avg_replies_per_post=round_one_decimal(replies / message_count),
        )
