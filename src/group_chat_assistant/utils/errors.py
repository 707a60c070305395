"""Custom exceptions for the group chat assistant."""


class AssistantError(Exception):
    """Base exception for all assistant errors."""


class ChatDataError(AssistantError):
    """Chat data could not be read or does not have the expected shape."""


class HistoryError(AssistantError):
    """Conversation history could not be loaded or saved."""


class RenderError(AssistantError):
    """A result was handed to the renderer under the wrong intent."""
