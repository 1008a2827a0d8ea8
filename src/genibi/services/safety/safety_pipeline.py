"""
Safety Pipeline

Single entry point for chat risk assessment:

    Conversation -> RiskClassifier -> ResponseSelector -> RiskAssessment

The classifier and selector are pure. This pipeline adds the
observability around them (logging, metrics) and the fallback
guard.

SAFETY-CRITICAL: If classification ever fails, the result is the
assessment of an empty conversation (LOW with the baseline bundle),
so the baseline safety messaging is never suppressed.
"""

from typing import Optional

from genibi.domain.enums.risk_level import RiskLevel
from genibi.domain.models.conversation import Conversation
from genibi.domain.models.risk_models import RiskAssessment
from genibi.services.safety.response_selector import respond
from genibi.services.safety.risk_classifier import RiskClassifier
from genibi.infrastructure.metrics import CLASSIFIER_FAILURES_TOTAL, track_risk_assessment
from genibi.config.logging_config import get_logger

logger = get_logger(__name__)


class SafetyPipeline:
    """
    Classify-and-respond pipeline for chat conversations.

    Usage:
        pipeline = SafetyPipeline()
        assessment = pipeline.assess(conversation)
        if assessment.requires_escalation:
            ...
    """

    def __init__(
        self,
        classifier: Optional[RiskClassifier] = None,
    ) -> None:
        """
        Initialize pipeline.

        Args:
            classifier: Risk classifier (defaults to canonical taxonomy)
        """
        self._classifier = classifier or RiskClassifier()

    def assess(self, conversation: Conversation) -> RiskAssessment:
        """
        Assess a conversation.

        Args:
            conversation: Caller-owned message log (not mutated)

        Returns:
            RiskAssessment with tier, bundle and deciding keyword
        """
        try:
            result = self._classifier.match(conversation)
        except Exception as e:
            CLASSIFIER_FAILURES_TOTAL.inc()
            logger.error(
                "Risk classification failed, using empty-conversation result",
                error_type=type(e).__name__,
                error=str(e),
            )
            return self.empty_assessment()

        assessment = RiskAssessment(
            risk_level=result.level,
            bundle=respond(result.level),
            matched_keyword=result.keyword,
        )

        track_risk_assessment(result.level.label)
        logger.info(
            "Risk assessed",
            risk_level=result.level.label,
            matched_keyword=result.keyword,
            message_count=len(conversation),
        )

        return assessment

    def empty_assessment(self) -> RiskAssessment:
        """Assessment of a conversation with no user messages."""
        return RiskAssessment(
            risk_level=RiskLevel.LOW,
            bundle=respond(RiskLevel.LOW),
        )
