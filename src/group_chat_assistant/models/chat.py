"""Data models for group chat messages and reactions."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType


class ReactionKind(Enum):
    """Kind of reaction a follower can leave on a message or reply.

    Declaration order is significant: when two kinds have the same count,
    the one declared first wins.
    """

    HEART = "heart"
    FIRE = "fire"
    SMILE = "smile"
    HUNDRED = "hundred"
    THUMBS_UP = "thumbsUp"

    @property
    def emoji(self) -> str:
        """Display emoji for this reaction kind."""
        return REACTION_EMOJI[self]


REACTION_EMOJI: dict[ReactionKind, str] = {
    ReactionKind.HEART: "❤️",
    ReactionKind.FIRE: "🔥",
    ReactionKind.SMILE: "😊",
    ReactionKind.HUNDRED: "💯",
    ReactionKind.THUMBS_UP: "👍",
}

ReactionTally = Mapping[ReactionKind, int]


def _freeze(tally: ReactionTally | None) -> ReactionTally:
    """Read-only copy of a tally, so frozen models stay immutable."""
    return MappingProxyType(dict(tally or {}))


def total_reactions(tally: ReactionTally | None) -> int:
    """Sum every count in a reaction tally, treating a missing tally as empty."""
    if not tally:
        return 0
    return sum(tally.values())


def top_reaction(tally: ReactionTally | None) -> tuple[ReactionKind, int] | None:
    """Return the reaction kind with the highest count.

    Ties go to the kind declared first in ``ReactionKind``. Returns None
    when the tally is empty or every count is zero.
    """
    if not tally:
        return None

    best: tuple[ReactionKind, int] | None = None
    for kind in ReactionKind:
        count = tally.get(kind, 0)
        if best is None or count > best[1]:
            best = (kind, count)

    if best is None or best[1] == 0:
        return None
    return best


@dataclass(frozen=True)
class Reply:
    """A follower reply under a chat message."""

    reply_id: int | str
    username: str
    avatar: str
    content: str
    reply_count: int = 0  # Nested replies, never expanded
    reactions: ReactionTally = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "reactions", _freeze(self.reactions))

    @property
    def total_reactions(self) -> int:
        """Sum of all reactions on this reply."""
        return total_reactions(self.reactions)

    @property
    def is_question(self) -> bool:
        """A reply counts as a question when it contains a question mark."""
        return "?" in self.content


@dataclass(frozen=True)
class ChatMessage:
    """A message posted by the creator to the group chat."""

    message_id: int | str
    timestamp: str  # Display string, e.g. "Today, 9:30 AM"
    content: str
    reactions: ReactionTally = field(default_factory=dict)
    replies: tuple[Reply, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "reactions", _freeze(self.reactions))
        object.__setattr__(self, "replies", tuple(self.replies))

    @property
    def total_reactions(self) -> int:
        """Sum of all reactions on this message (replies excluded)."""
        return total_reactions(self.reactions)

    @property
    def reply_total(self) -> int:
        """Number of direct replies."""
        return len(self.replies) if self.replies else 0


@dataclass(frozen=True)
class Creator:
    """The creator who owns the group chat."""

    name: str
    username: str
    avatar: str
    followers: int = 0


@dataclass(frozen=True)
class ChatData:
    """Everything the assistant knows about one group chat."""

    messages: tuple[ChatMessage, ...]
    creator: Creator | None = None
