"""Tests for ResponseRenderer functionality."""

from collections.abc import Callable

import pytest

from group_chat_assistant.core.aggregator import DEFAULT_SUGGESTIONS
from group_chat_assistant.core.renderer import HELP_RESPONSE, ResponseRenderer
from group_chat_assistant.models.chat import ChatMessage
from group_chat_assistant.models.intent import Intent
from group_chat_assistant.models.results import (
    EngagementStatsResult,
    FollowerQuestion,
    HelpResult,
    MostLikedResult,
    NoDataResult,
    QuestionsResult,
    SuggestionsResult,
    SummaryResult,
)
from group_chat_assistant.utils.errors import RenderError


@pytest.fixture
def renderer() -> ResponseRenderer:
    """Create a ResponseRenderer instance."""
    return ResponseRenderer()


def _stats(avg_replies: float) -> EngagementStatsResult:
    return EngagementStatsResult(
        total_messages=4,
        total_reactions=100,
        total_replies=8,
        avg_reactions_per_post=25.0,
        avg_replies_per_post=avg_replies,
    )


class TestRenderSummary:
    """Tests for the discussion summary template."""

    def test_summary_contents(
        self,
        renderer: ResponseRenderer,
        sample_messages: tuple[ChatMessage, ...],
    ) -> None:
        """Test header, totals and recent message lines."""
        data = SummaryResult(
            total_messages=4,
            total_replies=10,
            recent_messages=sample_messages[:2],
        )
        text = renderer.render(Intent.SUMMARIZE_DISCUSSION, data)

        assert text.startswith("📊 **Today's Discussion Summary**\n\n")
        assert "**4 messages**" in text
        assert "**10 follower replies**" in text
        assert f"1. {sample_messages[0].content[:60]}...\n" in text
        assert f"2. {sample_messages[1].content[:60]}...\n" in text
        assert "💬 2 replies, ❤️ 60 reactions" in text
        assert "💬 3 replies, ❤️ 414 reactions" in text
        assert text.endswith("Your community is actively participating in discussions.")

    def test_empty_store_has_no_recent_topics(self, renderer: ResponseRenderer) -> None:
        """Test that no recent topics header is shown without messages."""
        data = SummaryResult(total_messages=0, total_replies=0, recent_messages=())
        text = renderer.render(Intent.SUMMARIZE_DISCUSSION, data)

        assert "**0 messages**" in text
        assert "Recent Topics" not in text
        assert "💡 **Insight:**" in text


class TestRenderQuestions:
    """Tests for the follower questions template."""

    def test_no_questions(self, renderer: ResponseRenderer) -> None:
        """Test the explanatory message when nobody asked anything."""
        text = renderer.render(Intent.FOLLOWER_QUESTIONS, QuestionsResult(questions=()))

        assert "No direct questions found" in text
        assert "asked" not in text
        assert "**1." not in text
        assert "💡 **Tip:** Consider asking open-ended questions" in text

    def test_lists_questions(self, renderer: ResponseRenderer) -> None:
        """Test that each question shows user, text and context."""
        data = QuestionsResult(
            questions=(FollowerQuestion("AmyP", "Where can I find it?", "Just dropped..."),)
        )
        text = renderer.render(Intent.FOLLOWER_QUESTIONS, data)

        assert "Your followers have asked 1 questions:" in text
        assert '**1. AmyP:**\n"Where can I find it?"\n_Context: Just dropped..._' in text
        assert "more questions" not in text

    def test_truncates_to_five(self, renderer: ResponseRenderer) -> None:
        """Test that only five questions are listed with a remainder note."""
        questions = tuple(FollowerQuestion(f"user{i}", f"Q{i}?", "ctx...") for i in range(7))
        text = renderer.render(Intent.FOLLOWER_QUESTIONS, QuestionsResult(questions=questions))

        assert "Your followers have asked 7 questions:" in text
        assert "**5. user4:**" in text
        assert "**6." not in text
        assert "...and 2 more questions." in text


class TestRenderMostLiked:
    """Tests for the most liked template."""

    def test_sample_winner(
        self,
        renderer: ResponseRenderer,
        sample_messages: tuple[ChatMessage, ...],
    ) -> None:
        """Test rendering of the sample's most liked post."""
        message = sample_messages[3]
        text = renderer.render(Intent.MOST_LIKED_TOPIC, MostLikedResult(message, 591))

        assert text.startswith("🌟 **Most Liked Topic**")
        assert f'"{message.content[:100]}..."' in text
        assert "• 591 total reactions" in text
        assert "• 3 replies" in text
        assert "• Posted: Yesterday, 7:20 PM" in text
        assert "The 😊 reaction was most popular (234 reactions)" in text

    def test_top_reaction_tie_goes_to_first_kind(
        self,
        renderer: ResponseRenderer,
        sample_messages: tuple[ChatMessage, ...],
    ) -> None:
        """Test that equal reaction counts pick the first kind."""
        message = sample_messages[0]
        text = renderer.render(Intent.MOST_LIKED_TOPIC, MostLikedResult(message, 60))

        assert "The ❤️ reaction was most popular (12 reactions)" in text

    def test_no_reactions(
        self,
        renderer: ResponseRenderer,
        make_message: Callable[..., ChatMessage],
    ) -> None:
        """Test a winner without any reactions."""
        text = renderer.render(Intent.MOST_LIKED_TOPIC, MostLikedResult(make_message(), 0))

        assert "• 0 total reactions" in text
        assert "hasn't collected any reactions" in text


class TestRenderSuggestions:
    """Tests for the topic suggestions template."""

    def test_suggestions(self, renderer: ResponseRenderer) -> None:
        """Test enumerated suggestions with reasons."""
        text = renderer.render(
            Intent.TOPIC_SUGGESTIONS, SuggestionsResult(suggestions=DEFAULT_SUGGESTIONS)
        )

        assert text.startswith("💡 **Topic Suggestions for Your Next Chat**")
        assert "**1. Work outfit styling**\n_Why: Multiple followers asked" in text
        assert "**3. Accessory styling guide**" in text
        assert text.endswith("for maximum engagement!")


class TestRenderEngagementStats:
    """Tests for the engagement statistics template."""

    def test_blocks(self, renderer: ResponseRenderer) -> None:
        """Test activity and averages blocks."""
        text = renderer.render(Intent.ENGAGEMENT_STATS, _stats(2.0))

        assert "**Overall Activity:**\n• 4 chat messages posted\n" in text
        assert "• 8 total replies from followers\n• 100 total reactions" in text
        assert "**Averages:**\n• 2.0 replies per post\n• 25.0 reactions per post" in text

    def test_high_reply_rate(self, renderer: ResponseRenderer) -> None:
        """Test the encouraging insight above two replies per post."""
        text = renderer.render(Intent.ENGAGEMENT_STATS, _stats(2.1))
        assert "Excellent! Your followers are highly engaged." in text

    def test_threshold_is_exclusive(self, renderer: ResponseRenderer) -> None:
        """Test that exactly two replies per post gets the suggestion."""
        text = renderer.render(Intent.ENGAGEMENT_STATS, _stats(2.0))
        assert "Try asking more open-ended questions" in text


class TestRenderHelp:
    """Tests for the help template."""

    def test_help(self, renderer: ResponseRenderer) -> None:
        """Test the fixed greeting and the five examples."""
        text = renderer.render(Intent.HELP, HelpResult())

        assert text == HELP_RESPONSE
        assert text.startswith("👋 Hi! I'm your Group Chat AI assistant.")
        assert text.count("• \"") == 5
        assert text.endswith("What would you like to know?")


class TestRenderGuards:
    """Tests for no-data results and mismatched payloads."""

    @pytest.mark.parametrize("intent", [Intent.MOST_LIKED_TOPIC, Intent.ENGAGEMENT_STATS])
    def test_no_data(self, renderer: ResponseRenderer, intent: Intent) -> None:
        """Test the no-data message for empty stores."""
        text = renderer.render(intent, NoDataResult(intent))
        assert "no chat messages to analyze yet" in text

    def test_mismatched_intent(self, renderer: ResponseRenderer) -> None:
        """Test that a result for another intent is rejected."""
        with pytest.raises(RenderError, match="HelpResult"):
            renderer.render(Intent.ENGAGEMENT_STATS, HelpResult())

    def test_mismatched_no_data(self, renderer: ResponseRenderer) -> None:
        """Test that a no-data result must match its intent too."""
        with pytest.raises(RenderError):
            renderer.render(Intent.MOST_LIKED_TOPIC, NoDataResult(Intent.ENGAGEMENT_STATS))
