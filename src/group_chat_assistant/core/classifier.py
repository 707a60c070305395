"""Keyword-based intent classification.

The classifier walks an ordered rule table and returns the intent of the
first rule that matches. Rules overlap, so the order of ``INTENT_RULES``
is part of the behavior:

- Summary phrasing wins over everything else, and after it a query
  containing "question" is always a follower-questions query.
- "most liked" style phrasing is checked before plain topic suggestions,
  and before the broader engagement terms ("highest engagement" would
  otherwise be read as an engagement-stats query).
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

import structlog

from group_chat_assistant.models.intent import Intent
from group_chat_assistant.utils.logging import LogEventNames

log = structlog.get_logger()


@dataclass(frozen=True)
class IntentRule:
    """A keyword predicate mapped to an intent.

    The rule matches when any one of its alternatives matches, and an
    alternative matches when every one of its keywords is a substring of
    the lower-cased query.
    """

    intent: Intent
    alternatives: tuple[tuple[str, ...], ...]

    def matches(self, lowered_query: str) -> bool:
        """Check the rule against an already lower-cased query."""
        return any(
            all(keyword in lowered_query for keyword in alternative)
            for alternative in self.alternatives
        )


INTENT_RULES: tuple[IntentRule, ...] = (
    IntentRule(
        Intent.SUMMARIZE_DISCUSSION,
        (("summarize",), ("summary",), ("discussion",)),
    ),
    IntentRule(
        Intent.FOLLOWER_QUESTIONS,
        (("question",), ("asking",), ("want to know",)),
    ),
    IntentRule(
        Intent.MOST_LIKED_TOPIC,
        (
            ("most liked",),
            ("most popular",),
            ("highest engagement",),
            ("topic", "liked"),
        ),
    ),
    IntentRule(
        Intent.TOPIC_SUGGESTIONS,
        (("topic", "suggest"),),
    ),
    IntentRule(
        Intent.ENGAGEMENT_STATS,
        (("engagement",), ("active",), ("participation",)),
    ),
)

FALLBACK_INTENT = Intent.HELP


class IntentClassifier:
    """Maps free-text queries to an intent.

    Classification is total: a query that matches no rule resolves to
    ``Intent.HELP``.

    Example:
        classifier = IntentClassifier()
        classifier.classify("What topic was most liked?")
        # Intent.MOST_LIKED_TOPIC
    """

    def __init__(self, rules: Sequence[IntentRule] = INTENT_RULES) -> None:
        """Initialize the classifier.

        Args:
            rules: Rules in evaluation order (first match wins)
        """
        self._rules = tuple(rules)

    @property
    def rules(self) -> tuple[IntentRule, ...]:
        """Rules in evaluation order."""
        return self._rules

    def classify(self, query: str) -> Intent:
        """Return the intent of the first rule matching the query."""
        lowered = query.lower()

        for rule in self._rules:
            if rule.matches(lowered):
                log.debug(LogEventNames.INTENT_CLASSIFIED, intent=rule.intent.value)
                return rule.intent

        log.debug(LogEventNames.INTENT_FALLBACK, intent=FALLBACK_INTENT.value)
        return FALLBACK_INTENT
