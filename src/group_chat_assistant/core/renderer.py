"""Templated natural-language responses.

Every response is markdown-lite: ``**bold**`` spans and literal newlines,
which ``utils.markup.to_html`` turns into display markup.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from group_chat_assistant.models.chat import top_reaction
from group_chat_assistant.models.intent import Intent
from group_chat_assistant.models.results import (
    AggregatedResult,
    EngagementStatsResult,
    HelpResult,
    MostLikedResult,
    NoDataResult,
    QuestionsResult,
    SuggestionsResult,
    SummaryResult,
)
from group_chat_assistant.utils.errors import RenderError

HEADERS: dict[Intent, str] = {
    Intent.SUMMARIZE_DISCUSSION: "📊 **Today's Discussion Summary**",
    Intent.FOLLOWER_QUESTIONS: "❓ **Follower Questions**",
    Intent.MOST_LIKED_TOPIC: "🌟 **Most Liked Topic**",
    Intent.TOPIC_SUGGESTIONS: "💡 **Topic Suggestions for Your Next Chat**",
    Intent.ENGAGEMENT_STATS: "📈 **Engagement Statistics**",
}

HELP_EXAMPLES: tuple[str, ...] = (
    "Summarize today's discussion",
    "What questions do followers have?",
    "Suggest topics for next chat",
    "What topic was most liked?",
    "Show me engagement stats",
)

HELP_RESPONSE = (
    "👋 Hi! I'm your Group Chat AI assistant.\n\n"
    "I can help you understand your chat discussions and follower engagement. "
    "Try asking me:\n\n"
    + "".join(f'• "{example}"\n' for example in HELP_EXAMPLES)
    + "\nWhat would you like to know?"
)


class ResponseRenderer:
    """Renders aggregated results into display text.

    Example:
        renderer = ResponseRenderer()
        text = renderer.render(Intent.HELP, HelpResult())
    """

    SUMMARY_PREVIEW_LENGTH = 60
    MOST_LIKED_PREVIEW_LENGTH = 100
    MAX_LISTED_QUESTIONS = 5
    REPLY_RATE_THRESHOLD = 2.0

    def __init__(self) -> None:
        """Initialize the renderer."""
        self._templates: dict[Intent, Callable[[Any], str]] = {
            Intent.SUMMARIZE_DISCUSSION: self._render_summary,
            Intent.FOLLOWER_QUESTIONS: self._render_questions,
            Intent.MOST_LIKED_TOPIC: self._render_most_liked,
            Intent.TOPIC_SUGGESTIONS: self._render_suggestions,
            Intent.ENGAGEMENT_STATS: self._render_engagement_stats,
            Intent.HELP: self._render_help,
        }

    def render(self, intent: Intent, data: AggregatedResult) -> str:
        """Render the response for an intent.

        Args:
            intent: Intent the result was aggregated for
            data: Aggregated result for that intent

        Returns:
            Markdown-lite response text

        Raises:
            RenderError: If the result belongs to a different intent
        """
        if data.intent is not intent:
            raise RenderError(
                f"Cannot render {type(data).__name__} ({data.intent.value}) "
                f"as {intent.value}"
            )

        if isinstance(data, NoDataResult):
            return self._render_no_data(intent)

        return self._templates[intent](data)

    def _render_summary(self, data: SummaryResult) -> str:
        parts = [
            f"{HEADERS[Intent.SUMMARIZE_DISCUSSION]}\n\n",
            f"You've posted **{data.total_messages} messages** today "
            f"with **{data.total_replies} follower replies**.\n\n",
        ]

        if data.recent_messages:
            parts.append("**Recent Topics:**\n")
        for index, message in enumerate(data.recent_messages, start=1):
            preview = message.content[: self.SUMMARY_PREVIEW_LENGTH] + "..."
            parts.append(f"{index}. {preview}\n")
            parts.append(
                f"   💬 {message.reply_total} replies, "
                f"❤️ {message.total_reactions} reactions\n\n"
            )

        parts.append(
            "💡 **Insight:** Great engagement! "
            "Your community is actively participating in discussions."
        )
        return "".join(parts)

    def _render_questions(self, data: QuestionsResult) -> str:
        header = f"{HEADERS[Intent.FOLLOWER_QUESTIONS]}\n\n"
        questions = data.questions

        if not questions:
            return (
                header
                + "No direct questions found in recent replies. "
                "Your followers are mostly sharing thoughts and feedback!\n\n"
                "💡 **Tip:** Consider asking open-ended questions to encourage more interaction."
            )

        parts = [header, f"Your followers have asked {len(questions)} questions:\n\n"]

        for index, question in enumerate(questions[: self.MAX_LISTED_QUESTIONS], start=1):
            parts.append(f"**{index}. {question.username}:**\n")
            parts.append(f'"{question.question}"\n')
            parts.append(f"_Context: {question.message_context}_\n\n")

        remaining = len(questions) - self.MAX_LISTED_QUESTIONS
        if remaining > 0:
            parts.append(f"...and {remaining} more questions.\n\n")

        parts.append(
            "💡 **Tip:** Consider addressing these questions in your next post or video!"
        )
        return "".join(parts)

    def _render_most_liked(self, data: MostLikedResult) -> str:
        message = data.message
        preview = message.content[: self.MOST_LIKED_PREVIEW_LENGTH]

        parts = [
            f"{HEADERS[Intent.MOST_LIKED_TOPIC]}\n\n",
            "Your most engaged post was:\n\n",
            f'"{preview}..."\n\n',
            "**Engagement:**\n",
            f"• {data.total_reactions} total reactions\n",
            f"• {message.reply_total} replies\n",
            f"• Posted: {message.timestamp}\n\n",
        ]

        top = top_reaction(message.reactions)
        if top is None:
            parts.append("💡 **Insight:** This post hasn't collected any reactions yet.")
        else:
            kind, count = top
            parts.append(
                f"💡 **Insight:** The {kind.emoji} reaction was most popular "
                f"({count} reactions). Your community loves this type of content!"
            )
        return "".join(parts)

    def _render_suggestions(self, data: SuggestionsResult) -> str:
        parts = [
            f"{HEADERS[Intent.TOPIC_SUGGESTIONS]}\n\n",
            "Based on follower engagement and questions, here are some great topics:\n\n",
        ]

        for index, suggestion in enumerate(data.suggestions, start=1):
            parts.append(f"**{index}. {suggestion.topic}**\n")
            parts.append(f"_Why: {suggestion.reason}_\n\n")

        parts.append(
            "🎯 **Pro Tip:** Combine multiple follower interests into a single "
            "comprehensive post for maximum engagement!"
        )
        return "".join(parts)

    def _render_engagement_stats(self, data: EngagementStatsResult) -> str:
        parts = [
            f"{HEADERS[Intent.ENGAGEMENT_STATS]}\n\n",
            "**Overall Activity:**\n",
            f"• {data.total_messages} chat messages posted\n",
            f"• {data.total_replies} total replies from followers\n",
            f"• {data.total_reactions} total reactions\n\n",
            "**Averages:**\n",
            f"• {data.avg_replies_per_post:.1f} replies per post\n",
            f"• {data.avg_reactions_per_post:.1f} reactions per post\n\n",
            "💡 **Insight:** ",
        ]

        if data.avg_replies_per_post > self.REPLY_RATE_THRESHOLD:
            parts.append("Excellent! Your followers are highly engaged. Keep the conversation going!")
        else:
            parts.append(
                "Try asking more open-ended questions to encourage more replies and discussion."
            )
        return "".join(parts)

    def _render_help(self, data: HelpResult) -> str:
        return HELP_RESPONSE

    def _render_no_data(self, intent: Intent) -> str:
        header = HEADERS.get(intent)
        body = (
            "There are no chat messages to analyze yet. "
            "Check back once the conversation gets going!"
        )
        return f"{header}\n\n{body}" if header else body
