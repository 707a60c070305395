"""Data model for query intents."""

from enum import Enum


class Intent(Enum):
    """What a user query is asking the assistant for."""

    SUMMARIZE_DISCUSSION = "summarize_discussion"
    FOLLOWER_QUESTIONS = "follower_questions"
    MOST_LIKED_TOPIC = "most_liked_topic"
    TOPIC_SUGGESTIONS = "topic_suggestions"
    ENGAGEMENT_STATS = "engagement_stats"
    HELP = "help"
