"""
Risk Models

Value objects produced by the chat safety layer.

SAFETY-CRITICAL: These objects carry the risk tier and the
supportive content shown to the user. All of them are
request-scoped and never persisted.
"""

from dataclasses import dataclass, field
from typing import Optional

from genibi.domain.enums.risk_level import RiskLevel


@dataclass(frozen=True)
class ResponseBundle:
    """
    Supportive content selected for a risk level.

    Both lists are ordered for display, most urgent or
    actionable entry first, and must not be re-sorted.

    Attributes:
        suggestions: Suggested next steps for the user
        resources: Resource names to surface alongside the reply
    """

    suggestions: tuple[str, ...]
    resources: tuple[str, ...]

    def to_dict(self) -> dict:
        return {
            "suggestions": list(self.suggestions),
            "resources": list(self.resources),
        }


@dataclass(frozen=True)
class RiskAssessment:
    """
    Classification of a conversation plus its response bundle.

    Attributes:
        risk_level: Tier of the most recent user message
        bundle: Suggestions and resources for that tier
        matched_keyword: Keyword that decided the tier (None for LOW)
    """

    risk_level: RiskLevel
    bundle: ResponseBundle
    matched_keyword: Optional[str] = None

    @property
    def requires_escalation(self) -> bool:
        """Whether the caller must surface emergency contacts."""
        return self.risk_level == RiskLevel.EMERGENCY

    @property
    def suggestions(self) -> tuple[str, ...]:
        return self.bundle.suggestions

    @property
    def resources(self) -> tuple[str, ...]:
        return self.bundle.resources

    def to_dict(self) -> dict:
        return {
            "riskLevel": self.risk_level.label,
            **self.bundle.to_dict(),
        }


@dataclass(frozen=True)
class EscalationDecision:
    """
    Caller-side decision on whether to surface emergency contacts.

    Attributes:
        should_escalate: True only for EMERGENCY
        level: Risk level the decision was made for
        contacts: Phone contacts to offer, most urgent first
    """

    should_escalate: bool = False
    level: RiskLevel = RiskLevel.LOW
    contacts: tuple[dict, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        return {
            "required": self.should_escalate,
            "contacts": list(self.contacts),
        }
