"""Domain enums package."""

from genibi.domain.enums.risk_level import MessageRole, RiskLevel

__all__ = ["MessageRole", "RiskLevel"]
