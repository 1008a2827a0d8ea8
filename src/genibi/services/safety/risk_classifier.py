"""
Risk Classifier

Assigns a risk tier to a conversation from its most recent
user message using priority-ordered keyword matching.

SAFETY-CRITICAL: Severity strictly dominates. A message matching
both an emergency phrase and a lower-tier phrase is EMERGENCY,
regardless of match count or position.

ARCHITECTURE: Pure and stateless. No logging, no I/O, no
mutation of the conversation. Safe to call concurrently.
"""

from dataclasses import dataclass
from typing import Optional

from genibi.domain.enums.risk_level import RiskLevel
from genibi.domain.models.conversation import Conversation
from genibi.services.safety.keyword_taxonomy import KEYWORD_TAXONOMY, KeywordSet


@dataclass(frozen=True)
class KeywordMatch:
    """
    Classification result with the phrase that decided it.

    Attributes:
        level: Assigned risk tier
        keyword: Matched phrase, None when nothing matched (LOW)
    """

    level: RiskLevel
    keyword: Optional[str] = None


def _normalize(text: str) -> str:
    # Typographic apostrophes from mobile keyboards ("can’t")
    return text.lower().replace("’", "'")


class RiskClassifier:
    """
    Priority-ordered keyword classifier.

    Tiers are tested in taxonomy order and the first tier with
    a contained phrase wins. No scoring, weighting or learning.

    Usage:
        classifier = RiskClassifier()
        level = classifier.classify(conversation)
    """

    def __init__(
        self,
        taxonomy: tuple[KeywordSet, ...] = KEYWORD_TAXONOMY,
    ) -> None:
        """
        Initialize classifier.

        Args:
            taxonomy: Keyword sets in evaluation (severity) order
        """
        self._taxonomy = tuple(taxonomy)

    def match_text(self, text: str) -> KeywordMatch:
        """
        Classify a single utterance.

        Args:
            text: Raw message text (any length, any case)

        Returns:
            KeywordMatch with tier and deciding phrase
        """
        normalized = _normalize(text or "")
        for keyword_set in self._taxonomy:
            keyword = keyword_set.first_match(normalized)
            if keyword is not None:
                return KeywordMatch(level=keyword_set.level, keyword=keyword)
        return KeywordMatch(level=RiskLevel.LOW)

    def match(self, conversation: Conversation) -> KeywordMatch:
        """
        Classify the most recent user message of a conversation.

        Assistant and system messages are skipped. A conversation
        without user messages is classified as empty text.
        """
        message = conversation.last_user_message()
        return self.match_text(message.content if message else "")

    def classify_text(self, text: str) -> RiskLevel:
        return self.match_text(text).level

    def classify(self, conversation: Conversation) -> RiskLevel:
        """
        Get the risk tier of a conversation.

        Never raises for well-formed input; no match is LOW.
        """
        return self.match(conversation).level


# Holds only immutable data, so one instance is shared
_default_classifier = RiskClassifier()


def classify(conversation: Conversation) -> RiskLevel:
    """Classify a conversation with the canonical taxonomy."""
    return _default_classifier.classify(conversation)


def classify_text(text: str) -> RiskLevel:
    """Classify a raw utterance with the canonical taxonomy."""
    return _default_classifier.classify_text(text)


def match(conversation: Conversation) -> KeywordMatch:
    """Classify a conversation and report the deciding phrase."""
    return _default_classifier.match(conversation)
