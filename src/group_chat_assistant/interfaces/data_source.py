"""Abstract interface for chat data suppliers."""

from typing import Protocol

from ..models.chat import ChatData


class ChatDataSource(Protocol):
    """Supplies the chat data the assistant answers from.

    The assistant loads the data once at construction and never writes
    back, so implementations only need to read.
    """

    def load(self) -> ChatData:
        """
        Load the chat data.

        Returns:
            ChatData with messages in store order (newest first)

        Raises:
            FileNotFoundError: If the backing file does not exist
            ChatDataError: If the data does not have the expected shape
        """
        ...
