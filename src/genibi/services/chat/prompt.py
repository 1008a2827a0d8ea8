"""
Chat Prompt

System instructions for the GENIBI assistant and conversion of a
conversation into the provider message format.

CLINICAL_REVIEW_REQUIRED: The system prompt shapes every model reply.
"""

from dataclasses import dataclass, field
from typing import Optional

from genibi.domain.models.conversation import Conversation

SYSTEM_PROMPT = """You are GENIBI, a compassionate mental health assistant \
designed for Nigerian undergraduate students. Your role is to:

1. Provide supportive, empathetic responses to mental health concerns
2. Notice early warning signs (depression, anxiety, panic attacks, substance abuse)
3. Offer practical coping strategies and wellness tips
4. Give culturally sensitive advice relevant to Nigerian students
5. Recommend professional help when necessary
6. Never provide medical diagnoses or replace professional treatment

Guidelines:
- Be warm, understanding, and non-judgmental
- Use simple, accessible language
- Respect Nigerian cultural context
- Encourage help-seeking when appropriate
- Always prioritize user safety

Risk tiers:
- LOW: General wellness, mild stress, academic pressure
- MEDIUM: Persistent sadness, anxiety, sleep issues, social withdrawal
- HIGH: Severe depression symptoms, panic attacks, substance use concerns
- EMERGENCY: Suicidal thoughts, self-harm, immediate danger

Always end responses with appropriate resources or next steps."""


@dataclass
class BuiltPrompt:
    """
    Complete prompt ready for the model.

    Attributes:
        system_prompt: System/instruction prompt
        conversation_history: Conversation messages in provider format
        user_context: Extra system context (e.g. assessed risk tier)
        max_tokens: Suggested max tokens for response
        temperature: Suggested temperature setting
    """

    system_prompt: str
    conversation_history: list[dict] = field(default_factory=list)
    user_context: str = ""
    max_tokens: Optional[int] = None
    temperature: Optional[float] = None

    def to_messages(self) -> list[dict]:
        """
        Convert to OpenAI-style message format.

        Returns:
            List of message dictionaries
        """
        messages = [{"role": "system", "content": self.system_prompt}]

        if self.user_context:
            messages.append({
                "role": "system",
                "content": f"Context: {self.user_context}"
            })

        messages.extend(self.conversation_history)
        return messages

    @classmethod
    def from_conversation(
        cls,
        conversation: Conversation,
        user_context: str = "",
    ) -> "BuiltPrompt":
        return cls(
            system_prompt=SYSTEM_PROMPT,
            conversation_history=[
                {"role": m.role.value, "content": m.content}
                for m in conversation
            ],
            user_context=user_context,
        )
