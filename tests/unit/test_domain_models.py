"""
Unit Tests for Domain Models
"""

import pytest

from genibi.domain.enums.risk_level import MessageRole, RiskLevel
from genibi.domain.models.conversation import ChatMessage, Conversation


class TestRiskLevel:

    def test_ordered_by_severity(self) -> None:
        assert RiskLevel.LOW < RiskLevel.MEDIUM < RiskLevel.HIGH < RiskLevel.EMERGENCY

    def test_labels(self) -> None:
        assert [level.label for level in RiskLevel] == [
            "low", "medium", "high", "emergency",
        ]

    def test_from_label(self) -> None:
        assert RiskLevel.from_label("Emergency") == RiskLevel.EMERGENCY
        assert RiskLevel.from_label(" high ") == RiskLevel.HIGH

    def test_from_unknown_label(self) -> None:
        with pytest.raises(ValueError):
            RiskLevel.from_label("critical")


class TestConversation:

    def test_append_returns_new_conversation(self) -> None:
        original = Conversation((ChatMessage.user("hi"),))

        extended = original.append(ChatMessage.assistant("Hello!"))

        assert len(original) == 1
        assert len(extended) == 2
        assert extended.messages[0] is original.messages[0]

    def test_accepts_list(self) -> None:
        conversation = Conversation([ChatMessage.user("hi")])
        assert isinstance(conversation.messages, tuple)

    def test_last_user_message(self, make_conversation) -> None:
        conversation = make_conversation(
            ("user", "first"),
            ("user", "second"),
            ("assistant", "reply"),
        )
        assert conversation.last_user_message().content == "second"

    def test_last_user_message_none(self, make_conversation) -> None:
        assert make_conversation(("system", "setup")).last_user_message() is None
        assert Conversation().last_user_message() is None

    def test_from_dicts(self) -> None:
        conversation = Conversation.from_dicts([
            {"role": "assistant", "content": "Hello"},
            {"role": "user", "content": "hi"},
        ])
        assert [m.role for m in conversation] == [MessageRole.ASSISTANT, MessageRole.USER]

    def test_unknown_role_rejected(self) -> None:
        with pytest.raises(ValueError):
            ChatMessage.from_dict({"role": "moderator", "content": "x"})

    def test_message_dict_round_trip(self) -> None:
        message = ChatMessage.user("I feel fine")
        assert ChatMessage.from_dict(message.to_dict()) == message
