"""
Keyword Taxonomy

Canonical per-tier trigger phrases for chat risk classification.
Matching is case-insensitive substring containment, not whole-word:
"cutting" also matches "cutting myself", "sad" also matches "sadness".

CLINICAL_REVIEW_REQUIRED: Any change to these phrases changes which
users see crisis contacts. Add a test case with every new phrase.
"""

from dataclasses import dataclass
from typing import Optional

from genibi.domain.enums.risk_level import RiskLevel


@dataclass(frozen=True)
class KeywordSet:
    """
    Trigger phrases for a single risk tier.

    Attributes:
        level: Tier returned when any phrase matches
        keywords: Lower-case phrases, checked in order
    """

    level: RiskLevel
    keywords: tuple[str, ...]

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "keywords", tuple(k.lower() for k in self.keywords)
        )

    def first_match(self, text: str) -> Optional[str]:
        """
        Return the first keyword contained in ``text``.

        Args:
            text: Already lower-cased message text

        Returns:
            Matching keyword, or None
        """
        for keyword in self.keywords:
            if keyword in text:
                return keyword
        return None


EMERGENCY_KEYWORDS = KeywordSet(
    level=RiskLevel.EMERGENCY,
    keywords=(
        "suicide",
        "suicidal",
        "kill myself",
        "end my life",
        "end it all",
        "hurt myself",
        "self-harm",
        "self harm",
        "want to die",
        "better off dead",
        "no point living",
        "no reason to live",
    ),
)

HIGH_KEYWORDS = KeywordSet(
    level=RiskLevel.HIGH,
    keywords=(
        "depressed",
        "depression",
        "hopeless",
        "worthless",
        "panic attack",
        "substance",
        "drugs",
        "alcohol",
        "cutting",
        "severe anxiety",
        "can't cope",
        "cant cope",
    ),
)

MEDIUM_KEYWORDS = KeywordSet(
    level=RiskLevel.MEDIUM,
    keywords=(
        "anxious",
        "anxiety",
        "stressed",
        "overwhelmed",
        "sad",
        "lonely",
        "insomnia",
        "sleep problems",
        "crying",
        "worried",
        "withdrawal",
    ),
)

# Evaluation order is severity order. Keep EMERGENCY first.
KEYWORD_TAXONOMY: tuple[KeywordSet, ...] = (
    EMERGENCY_KEYWORDS,
    HIGH_KEYWORDS,
    MEDIUM_KEYWORDS,
)
