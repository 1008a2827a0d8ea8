"""Tests configuration and fixtures."""

from typing import Optional

import pytest

from genibi.config import Settings
from genibi.config.settings import ChatSettings, OpenAISettings, RateLimitSettings
from genibi.domain.models.conversation import ChatMessage, Conversation
from genibi.infrastructure.llm.provider import LLMProvider, LLMProviderError, LLMResponse
from genibi.services.chat.prompt import BuiltPrompt


class FakeProvider(LLMProvider):
    """In-memory LLM provider returning a fixed reply or raising."""

    def __init__(
        self,
        reply: str = "I'm here with you.",
        error: Optional[LLMProviderError] = None,
        configured: bool = True,
    ) -> None:
        self.reply = reply
        self.error = error
        self.configured = configured
        self.prompts: list[BuiltPrompt] = []

    @property
    def provider_name(self) -> str:
        return "fake"

    async def generate(self, prompt, *, max_tokens=None, temperature=None) -> LLMResponse:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return LLMResponse(content=self.reply, provider=self.provider_name)

    async def health_check(self) -> bool:
        return self.configured

    def is_configured(self) -> bool:
        return self.configured


@pytest.fixture
def test_settings() -> Settings:
    """Settings with no model key and rate limiting off."""
    return Settings(
        env="development",
        debug=True,
        openai=OpenAISettings(api_key=""),
        chat=ChatSettings(resources_config_path=None),
        rate_limit=RateLimitSettings(enabled=False),
    )


@pytest.fixture
def make_conversation():
    """Build a conversation from (role, content) pairs."""
    def _make(*pairs: tuple[str, str]) -> Conversation:
        return Conversation.from_dicts(
            {"role": role, "content": content} for role, content in pairs
        )
    return _make


@pytest.fixture
def user_says():
    """Single-message conversation from the user."""
    def _make(content: str) -> Conversation:
        return Conversation((ChatMessage.user(content),))
    return _make
