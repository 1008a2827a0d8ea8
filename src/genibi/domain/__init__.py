"""
GENIBI Domain Layer

Request-scoped value objects for the chat safety layer.
Nothing here performs I/O or holds shared mutable state.
"""

from genibi.domain.enums.risk_level import MessageRole, RiskLevel
from genibi.domain.models.conversation import ChatMessage, Conversation
from genibi.domain.models.risk_models import (
    EscalationDecision,
    ResponseBundle,
    RiskAssessment,
)

__all__ = [
    # Enums
    "MessageRole",
    "RiskLevel",
    # Conversation
    "ChatMessage",
    "Conversation",
    # Risk
    "EscalationDecision",
    "ResponseBundle",
    "RiskAssessment",
]
