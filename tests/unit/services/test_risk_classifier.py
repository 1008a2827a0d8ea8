"""
Unit Tests for Risk Classifier

Tests priority ordering, last-user-message selection,
case handling and default behavior.
"""

import pytest

from genibi.domain.enums.risk_level import RiskLevel
from genibi.domain.models.conversation import ChatMessage, Conversation
from genibi.services.safety.keyword_taxonomy import KeywordSet
from genibi.services.safety.risk_classifier import (
    KeywordMatch,
    RiskClassifier,
    classify,
    classify_text,
    match,
)


class TestClassifierScenarios:
    """Reference scenarios for the four tiers."""

    def test_anxious_about_exams_is_medium(self, user_says) -> None:
        assert classify(user_says("I'm feeling anxious about exams")) == RiskLevel.MEDIUM

    def test_kill_myself_is_emergency(self, user_says) -> None:
        assert classify(user_says("I want to kill myself")) == RiskLevel.EMERGENCY

    def test_emergency_dominates_medium(self, user_says) -> None:
        """Test priority short-circuit when tiers overlap in one message."""
        conversation = user_says(
            "I feel a bit overwhelmed but also want to kill myself"
        )
        assert classify(conversation) == RiskLevel.EMERGENCY

    def test_greeting_is_low(self, user_says) -> None:
        assert classify(user_says("Just saying hello")) == RiskLevel.LOW

    @pytest.mark.parametrize("text", [
        "I've been so depressed lately",
        "everything feels hopeless",
        "I think I'm having a panic attack",
        "I've been drinking alcohol every night",
        "I honestly can't cope anymore",
    ])
    def test_high_tier_phrases(self, text: str) -> None:
        assert classify_text(text) == RiskLevel.HIGH

    @pytest.mark.parametrize("text", [
        "I'm so stressed about my project",
        "I feel lonely in the hostel",
        "I keep crying at night",
        "I have anxiety before every test",
    ])
    def test_medium_tier_phrases(self, text: str) -> None:
        assert classify_text(text) == RiskLevel.MEDIUM

    @pytest.mark.parametrize("text", [
        "I've been thinking about suicide",
        "I want to end my life",
        "sometimes I hurt myself",
        "everyone would be better off dead without me",
        "there is no point living like this",
    ])
    def test_emergency_tier_phrases(self, text: str) -> None:
        assert classify_text(text) == RiskLevel.EMERGENCY


class TestLastUserMessageRule:
    """Only the most recent user message is classified."""

    def test_trailing_assistant_message_ignored(self, make_conversation) -> None:
        conversation = make_conversation(
            ("user", "I want to kill myself"),
            ("assistant", "I'm here with you. You sound fine and relaxed now."),
        )
        assert classify(conversation) == RiskLevel.EMERGENCY

    def test_new_user_message_reevaluates(self, make_conversation) -> None:
        conversation = make_conversation(
            ("user", "I want to kill myself"),
            ("assistant", "Please call 112."),
        )
        followed_up = conversation.append(ChatMessage.user("Just saying hello"))

        assert classify(conversation) == RiskLevel.EMERGENCY
        assert classify(followed_up) == RiskLevel.LOW

    def test_system_messages_ignored(self, make_conversation) -> None:
        conversation = make_conversation(
            ("user", "I feel sad"),
            ("system", "suicide prevention guidance follows"),
        )
        assert classify(conversation) == RiskLevel.MEDIUM

    def test_earlier_user_messages_ignored(self, make_conversation) -> None:
        conversation = make_conversation(
            ("user", "I feel hopeless"),
            ("assistant", "Tell me more."),
            ("user", "Actually I had a good day"),
        )
        assert classify(conversation) == RiskLevel.LOW


class TestDefaults:
    """Inputs without a user message classify as LOW."""

    def test_empty_conversation(self) -> None:
        assert classify(Conversation()) == RiskLevel.LOW

    def test_assistant_only_conversation(self, make_conversation) -> None:
        assert classify(make_conversation(("assistant", "hi"))) == RiskLevel.LOW

    def test_empty_text(self) -> None:
        assert classify_text("") == RiskLevel.LOW


class TestMatching:
    """Case handling, substring semantics and purity."""

    def test_case_insensitive(self) -> None:
        assert classify_text("I want to DIE") == classify_text("i want to die")
        assert classify_text("I want to DIE") == RiskLevel.EMERGENCY

    def test_substring_not_whole_word(self) -> None:
        """Test that triggers match inside longer words."""
        assert classify_text("so much sadness") == RiskLevel.MEDIUM

    def test_typographic_apostrophe(self) -> None:
        assert classify_text("I can’t cope with school") == RiskLevel.HIGH

    def test_long_input_matched_in_full(self) -> None:
        text = "a" * 5000 + " suicide"
        assert classify_text(text) == RiskLevel.EMERGENCY

    def test_deterministic(self, user_says) -> None:
        conversation = user_says("I'm worried and stressed")
        assert classify(conversation) == classify(conversation)

    def test_conversation_not_mutated(self, make_conversation) -> None:
        conversation = make_conversation(
            ("user", "I feel hopeless"),
            ("assistant", "I'm listening."),
        )
        before = conversation.to_dicts()

        classify(conversation)

        assert conversation.to_dicts() == before

    def test_match_reports_deciding_keyword(self, user_says) -> None:
        result = match(user_says("I'm overwhelmed and want to die"))
        assert result == KeywordMatch(level=RiskLevel.EMERGENCY, keyword="want to die")

    def test_low_match_has_no_keyword(self, user_says) -> None:
        assert match(user_says("good morning")).keyword is None


class TestCustomTaxonomy:
    """RiskClassifier accepts an injected taxonomy."""

    def test_custom_keyword_set(self) -> None:
        classifier = RiskClassifier(
            taxonomy=(KeywordSet(level=RiskLevel.HIGH, keywords=("Exam Failure",)),)
        )
        assert classifier.classify_text("worried about exam failure") == RiskLevel.HIGH
        assert classifier.classify_text("suicide") == RiskLevel.LOW
