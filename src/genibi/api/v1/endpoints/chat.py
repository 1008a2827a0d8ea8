"""
Chat Endpoints

Main interaction point for the GENIBI assistant. Every reply
carries the rule-based risk tier, suggestions and resources,
and emergency contacts when the tier is emergency.
"""

from typing import Annotated, Literal

from fastapi import APIRouter, Depends
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, Field, StringConstraints

from genibi.api.dependencies import get_app_settings, get_chat_service
from genibi.config import Settings
from genibi.config.logging_config import get_logger
from genibi.domain.models.conversation import Conversation
from genibi.services.chat.chat_service import ChatService

logger = get_logger(__name__)
router = APIRouter()


# Request/Response Models

MessageContent = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=1),
]


class ChatMessageIn(BaseModel):
    """A single conversation message."""

    role: Literal["user", "assistant", "system"]
    content: MessageContent


class ChatRequest(BaseModel):
    """Conversation so far, oldest message first."""

    messages: list[ChatMessageIn] = Field(..., min_length=1)

    def to_conversation(self) -> Conversation:
        return Conversation.from_dicts(m.model_dump() for m in self.messages)


def validated_conversation(
    request: ChatRequest,
    settings: Settings = Depends(get_app_settings),
) -> Conversation:
    """
    Conversation from the request body, with message length
    checked against the configured maximum.

    Raises:
        RequestValidationError: If any message is too long (422)
    """
    max_length = settings.chat.max_message_length
    errors = [
        {
            "type": "string_too_long",
            "loc": ("body", "messages", index, "content"),
            "msg": f"String should have at most {max_length} characters",
            "input": None,
            "ctx": {"max_length": max_length},
        }
        for index, message in enumerate(request.messages)
        if len(message.content) > max_length
    ]
    if errors:
        raise RequestValidationError(errors)

    return request.to_conversation()


class EscalationOut(BaseModel):
    required: bool
    contacts: list[dict]


class AssessmentData(BaseModel):
    riskLevel: Literal["low", "medium", "high", "emergency"]
    suggestions: list[str]
    resources: list[str]
    escalation: EscalationOut


class ChatData(AssessmentData):
    message: str
    source: Literal["llm", "fallback"]


class ChatResponse(BaseModel):
    """Assistant reply with safety metadata."""

    success: bool = True
    data: ChatData

    model_config = {
        "json_schema_extra": {
            "example": {
                "success": True,
                "data": {
                    "message": "I understand you're feeling stressed...",
                    "riskLevel": "medium",
                    "suggestions": ["Talk to someone you trust"],
                    "resources": ["Campus Counseling Services"],
                    "escalation": {"required": False, "contacts": []},
                    "source": "fallback",
                },
            }
        }
    }


class AssessmentResponse(BaseModel):
    success: bool = True
    data: AssessmentData


class QuickResponsesResponse(BaseModel):
    success: bool = True
    data: list[str]


@router.post(
    "/message",
    response_model=ChatResponse,
    summary="Send the conversation and receive GENIBI's reply",
)
async def send_message(
    conversation: Conversation = Depends(validated_conversation),
    service: ChatService = Depends(get_chat_service),
) -> ChatResponse:
    """
    Reply to the latest user message.

    Risk is assessed on the most recent user message only. The
    model writes the reply text when configured; otherwise a
    rule-based reply is used.
    """
    reply = await service.reply(conversation)

    logger.info(
        "Chat interaction",
        risk_level=reply.risk_level.label,
        source=reply.source,
        message_count=len(conversation),
        escalated=reply.escalation.should_escalate,
    )

    return ChatResponse(data=ChatData(**reply.to_dict()))


@router.post(
    "/assess",
    response_model=AssessmentResponse,
    summary="Assess conversation risk without generating a reply",
)
async def assess_conversation(
    conversation: Conversation = Depends(validated_conversation),
    service: ChatService = Depends(get_chat_service),
) -> AssessmentResponse:
    """Rule-based risk tier, response bundle and escalation only."""
    assessment = service.pipeline.assess(conversation)
    escalation = service.escalation.evaluate(assessment.risk_level)

    return AssessmentResponse(
        data=AssessmentData(
            **assessment.to_dict(),
            escalation=EscalationOut(**escalation.to_dict()),
        )
    )


@router.get(
    "/quick-responses",
    response_model=QuickResponsesResponse,
    summary="Get one-tap conversation starters",
)
async def quick_responses() -> QuickResponsesResponse:
    return QuickResponsesResponse(data=ChatService.quick_responses())
