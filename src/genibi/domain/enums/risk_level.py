"""
Risk Level and Message Role Enumerations

Defines the severity tiers assigned to a user's latest chat message
and the roles a chat message can carry.

CLINICAL_REVIEW_REQUIRED: Tier meanings drive which supportive
content and crisis contacts the user sees.
"""

from enum import IntEnum, StrEnum


class RiskLevel(IntEnum):
    """
    Risk tier of the most recent user message.

    Values are ordered by severity so comparison operators
    follow clinical urgency (LOW < MEDIUM < HIGH < EMERGENCY).
    External representations always use ``label``.
    """

    LOW = 1
    """General wellness, mild stress, academic pressure."""

    MEDIUM = 2
    """Persistent sadness, anxiety, sleep issues, loneliness."""

    HIGH = 3
    """Depression symptoms, panic attacks, substance use concerns."""

    EMERGENCY = 4
    """
    Suicidal thoughts, self-harm, immediate danger.

    SAFETY_NOTE: Callers must surface an immediate-contact
    affordance (phone link, alert) at this level.
    """

    @property
    def label(self) -> str:
        """Lower-case wire label (``"low"``, ``"medium"``, ...)."""
        return self.name.lower()

    @classmethod
    def from_label(cls, label: str) -> "RiskLevel":
        """
        Parse a wire label.

        Raises:
            ValueError: If the label names no risk level
        """
        try:
            return cls[label.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown risk level: {label!r}") from None


class MessageRole(StrEnum):
    """Author role of a chat message."""

    USER = "user"
    ASSISTANT = "assistant"
    SYSTEM = "system"
