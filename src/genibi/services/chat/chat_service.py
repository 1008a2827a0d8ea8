"""
Chat Service

Produces the assistant reply for a conversation:

    Conversation -> SafetyPipeline (rule path) -> risk tier + bundle
                 -> LLM provider (reply text) or fallback generator
                 -> EscalationManager (emergency contacts)

ARCHITECTURE: Risk metadata never depends on model output. A model
failure only changes where the reply text comes from.
"""

from dataclasses import dataclass
from typing import Optional

from genibi.config import Settings, get_settings
from genibi.config.logging_config import get_logger
from genibi.domain.enums.risk_level import RiskLevel
from genibi.domain.models.conversation import Conversation
from genibi.domain.models.risk_models import EscalationDecision, RiskAssessment
from genibi.infrastructure.llm.provider import LLMProvider, LLMProviderError
from genibi.infrastructure.metrics import track_fallback_reply
from genibi.services.chat.fallback_replies import FallbackReplyGenerator
from genibi.services.chat.prompt import BuiltPrompt
from genibi.services.safety.escalation_manager import EscalationManager
from genibi.services.safety.safety_pipeline import SafetyPipeline

logger = get_logger(__name__)

QUICK_RESPONSES: tuple[str, ...] = (
    "I'm feeling anxious about exams",
    "I'm having trouble sleeping",
    "I feel overwhelmed with coursework",
    "I'm feeling lonely and isolated",
    "I need help managing stress",
    "I'm worried about my future",
    "I'm having relationship problems",
    "I feel like I'm not good enough",
)


@dataclass(frozen=True)
class ChatReply:
    """
    Assistant reply with safety metadata.

    Attributes:
        message: Reply text
        assessment: Rule-based risk assessment of the conversation
        escalation: Emergency escalation decision
        source: "llm" or "fallback"
    """

    message: str
    assessment: RiskAssessment
    escalation: EscalationDecision
    source: str

    @property
    def risk_level(self) -> RiskLevel:
        return self.assessment.risk_level

    def to_dict(self) -> dict:
        return {
            "message": self.message,
            **self.assessment.to_dict(),
            "escalation": self.escalation.to_dict(),
            "source": self.source,
        }


class ChatService:
    """
    Chat reply orchestration.

    Usage:
        service = ChatService(provider=OpenAIProvider())
        reply = await service.reply(conversation)
    """

    def __init__(
        self,
        provider: Optional[LLMProvider] = None,
        pipeline: Optional[SafetyPipeline] = None,
        escalation: Optional[EscalationManager] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        """
        Initialize chat service.

        Args:
            provider: Chat model provider; None means fallback only
            pipeline: Safety pipeline for risk assessment
            escalation: Escalation manager for emergency contacts
            settings: Application settings
        """
        self._settings = settings or get_settings()
        self._provider = provider
        self._pipeline = pipeline or SafetyPipeline()
        self._escalation = escalation or EscalationManager()
        self._fallback = FallbackReplyGenerator()

    @property
    def pipeline(self) -> SafetyPipeline:
        return self._pipeline

    @property
    def escalation(self) -> EscalationManager:
        return self._escalation

    def model_available(self) -> bool:
        return (
            self._settings.chat.llm_enabled
            and self._provider is not None
            and self._provider.is_configured()
        )

    async def reply(self, conversation: Conversation) -> ChatReply:
        """
        Produce the assistant reply for a conversation.

        Never raises on provider failure; falls back to rule-based text.

        Args:
            conversation: Caller-owned message log (not mutated)

        Returns:
            ChatReply with text, risk assessment and escalation
        """
        assessment = self._pipeline.assess(conversation)
        escalation = self._escalation.evaluate(assessment.risk_level)

        message, source = await self._generate_text(conversation, assessment)

        return ChatReply(
            message=message,
            assessment=assessment,
            escalation=escalation,
            source=source,
        )

    async def _generate_text(
        self,
        conversation: Conversation,
        assessment: RiskAssessment,
    ) -> tuple[str, str]:
        if not self._settings.chat.llm_enabled:
            return self._fallback_text(conversation, assessment, "disabled")
        if self._provider is None or not self._provider.is_configured():
            return self._fallback_text(conversation, assessment, "not_configured")

        prompt = BuiltPrompt.from_conversation(
            conversation,
            user_context=f"Assessed risk tier of the latest message: {assessment.risk_level.label}",
        )

        try:
            response = await self._provider.generate(prompt)
        except LLMProviderError as e:
            logger.warning(
                "Chat model failed, using fallback reply",
                provider=e.provider,
                error_type=type(e).__name__,
                retryable=e.is_retryable,
            )
            return self._fallback_text(conversation, assessment, "provider_error")

        if not response.content.strip():
            return self._fallback_text(conversation, assessment, "empty_reply")

        return response.content, "llm"

    def _fallback_text(
        self,
        conversation: Conversation,
        assessment: RiskAssessment,
        reason: str,
    ) -> tuple[str, str]:
        track_fallback_reply(reason)
        return self._fallback.reply(conversation, assessment.risk_level), "fallback"

    @staticmethod
    def quick_responses() -> list[str]:
        """Canned prompts offered as one-tap chat starters."""
        return list(QUICK_RESPONSES)
