"""
Conversation Domain Model

A conversation is the ordered log of role-tagged chat messages
supplied by a caller (chat UI or chat API route). Messages are
immutable once created and kept in arrival order.

PRIVACY: Message content may contain sensitive information
and must never be written to logs.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Iterable, Iterator, Optional

from genibi.domain.enums.risk_level import MessageRole


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class ChatMessage:
    """
    A single message in a conversation.

    Attributes:
        role: Message author role (user/assistant/system)
        content: Message text content
        timestamp: When the message was created
    """

    role: MessageRole
    content: str
    timestamp: datetime = field(default_factory=_utcnow)

    def to_dict(self) -> dict:
        """Serialize message to dictionary."""
        return {
            "role": self.role.value,
            "content": self.content,
            "timestamp": self.timestamp.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ChatMessage":
        """
        Create message from dictionary.

        Raises:
            ValueError: If the role is not a known MessageRole
        """
        timestamp = data.get("timestamp")
        if isinstance(timestamp, str):
            timestamp = datetime.fromisoformat(timestamp)
        return cls(
            role=MessageRole(data.get("role", MessageRole.USER)),
            content=data.get("content") or "",
            timestamp=timestamp or _utcnow(),
        )

    @classmethod
    def user(cls, content: str) -> "ChatMessage":
        return cls(role=MessageRole.USER, content=content)

    @classmethod
    def assistant(cls, content: str) -> "ChatMessage":
        return cls(role=MessageRole.ASSISTANT, content=content)


@dataclass(frozen=True)
class Conversation:
    """
    Ordered, caller-owned sequence of chat messages.

    Insertion order is significant: classification only ever
    looks at the most recent user message. ``append`` returns a
    new conversation and leaves this one untouched.
    """

    messages: tuple[ChatMessage, ...] = ()

    def __post_init__(self) -> None:
        # Accept any iterable (lists from callers) but store a tuple
        object.__setattr__(self, "messages", tuple(self.messages))

    def __len__(self) -> int:
        return len(self.messages)

    def __iter__(self) -> Iterator[ChatMessage]:
        return iter(self.messages)

    def append(self, message: ChatMessage) -> "Conversation":
        """Return a new conversation with ``message`` added at the end."""
        return Conversation(self.messages + (message,))

    def last_user_message(self) -> Optional[ChatMessage]:
        """Most recent message authored by the user, or None."""
        for message in reversed(self.messages):
            if message.role == MessageRole.USER:
                return message
        return None

    def to_dicts(self) -> list[dict]:
        return [m.to_dict() for m in self.messages]

    @classmethod
    def from_dicts(cls, items: Iterable[dict]) -> "Conversation":
        """Build a conversation from ``{role, content}`` dictionaries."""
        return cls(tuple(ChatMessage.from_dict(item) for item in items))
