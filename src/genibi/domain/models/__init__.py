"""Domain models package."""

from genibi.domain.models.conversation import (
    ChatMessage,
    Conversation,
)
from genibi.domain.models.risk_models import (
    EscalationDecision,
    ResponseBundle,
    RiskAssessment,
)

__all__ = [
    # Conversation
    "ChatMessage",
    "Conversation",
    # Risk
    "EscalationDecision",
    "ResponseBundle",
    "RiskAssessment",
]
