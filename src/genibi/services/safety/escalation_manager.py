"""
Escalation Manager

Caller-side escalation policy. The classifier only reports the
risk tier; this manager decides whether to surface immediate
contact affordances (dialer links) and records that it did.

SAFETY-CRITICAL: EMERGENCY must always produce contacts.
This manager never blocks and never raises on a valid level.
"""

from typing import Optional

from genibi.domain.enums.risk_level import RiskLevel
from genibi.domain.models.risk_models import EscalationDecision
from genibi.services.safety.emergency_resources import ResourceDirectory
from genibi.infrastructure.metrics import track_escalation
from genibi.config.logging_config import get_logger

logger = get_logger(__name__)


class EscalationManager:
    """
    Emergency escalation policy.

    Levels below EMERGENCY continue normal support with no
    contacts attached. EMERGENCY attaches every dialable
    emergency line from the resource directory.

    Usage:
        manager = EscalationManager()
        decision = manager.evaluate(RiskLevel.EMERGENCY)
    """

    def __init__(
        self,
        directory: Optional[ResourceDirectory] = None,
    ) -> None:
        """
        Initialize escalation manager.

        Args:
            directory: Resource directory supplying emergency lines
        """
        self._directory = directory or ResourceDirectory()

    def evaluate(self, level: RiskLevel) -> EscalationDecision:
        """
        Decide whether to escalate.

        Args:
            level: Risk tier of the latest user message

        Returns:
            EscalationDecision with contacts for EMERGENCY
        """
        if level != RiskLevel.EMERGENCY:
            return EscalationDecision(should_escalate=False, level=level)

        contacts = tuple(
            resource.to_contact()
            for resource in self._directory.emergency_contacts()
        )

        track_escalation()
        logger.warning(
            "Emergency escalation triggered",
            contact_count=len(contacts),
        )

        return EscalationDecision(
            should_escalate=True,
            level=level,
            contacts=contacts,
        )
