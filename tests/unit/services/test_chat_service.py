"""
Unit Tests for Chat Service

Tests reply source selection and that safety metadata is
independent of the chat model.
"""

import re

import pytest

from conftest import FakeProvider
from genibi.config.settings import ChatSettings
from genibi.domain.enums.risk_level import RiskLevel
from genibi.infrastructure.llm.provider import LLMProviderError
from genibi.services.chat.chat_service import QUICK_RESPONSES, ChatService
from genibi.services.safety.emergency_resources import EMERGENCY_NUMBER, HELPLINE_NUMBER
from genibi.services.safety.response_selector import respond


class TestReplySource:
    """Tests for where the reply text comes from."""

    async def test_model_reply_used_when_configured(self, test_settings, user_says) -> None:
        provider = FakeProvider(reply="Let's take a breath together.")
        service = ChatService(provider=provider, settings=test_settings)

        reply = await service.reply(user_says("I'm feeling anxious about exams"))

        assert reply.source == "llm"
        assert reply.message == "Let's take a breath together."
        assert len(provider.prompts) == 1

    async def test_prompt_carries_history_and_tier(self, test_settings, make_conversation) -> None:
        provider = FakeProvider()
        service = ChatService(provider=provider, settings=test_settings)

        await service.reply(make_conversation(
            ("user", "hi"),
            ("assistant", "Hello!"),
            ("user", "I feel lonely"),
        ))

        prompt = provider.prompts[0]
        assert "medium" in prompt.user_context
        messages = prompt.to_messages()
        assert messages[0]["role"] == "system"
        assert messages[-1] == {"role": "user", "content": "I feel lonely"}

    async def test_no_provider_uses_fallback(self, test_settings, user_says) -> None:
        service = ChatService(provider=None, settings=test_settings)

        reply = await service.reply(user_says("I'm having trouble sleeping"))

        assert reply.source == "fallback"
        assert "sleep" in reply.message.lower()

    async def test_unconfigured_provider_not_called(self, test_settings, user_says) -> None:
        provider = FakeProvider(configured=False)
        service = ChatService(provider=provider, settings=test_settings)

        reply = await service.reply(user_says("hello"))

        assert reply.source == "fallback"
        assert provider.prompts == []

    async def test_provider_error_uses_fallback(self, test_settings, user_says) -> None:
        provider = FakeProvider(error=LLMProviderError("boom", provider="fake"))
        service = ChatService(provider=provider, settings=test_settings)

        reply = await service.reply(user_says("I feel sad"))

        assert reply.source == "fallback"
        assert reply.risk_level == RiskLevel.MEDIUM

    async def test_empty_model_reply_uses_fallback(self, test_settings, user_says) -> None:
        service = ChatService(provider=FakeProvider(reply="   "), settings=test_settings)

        reply = await service.reply(user_says("hello"))

        assert reply.source == "fallback"
        assert reply.message.strip()

    async def test_disabled_model_not_called(self, test_settings, user_says) -> None:
        settings = test_settings.model_copy(
            update={"chat": ChatSettings(llm_enabled=False)}
        )
        provider = FakeProvider()
        service = ChatService(provider=provider, settings=settings)

        reply = await service.reply(user_says("hello"))

        assert reply.source == "fallback"
        assert provider.prompts == []
        assert not service.model_available()


class TestSafetyMetadata:
    """Risk tier and escalation never depend on the model."""

    @pytest.mark.parametrize("provider", [
        None,
        FakeProvider(reply="You sound fine to me."),
        FakeProvider(error=LLMProviderError("down", provider="fake", is_retryable=True)),
    ])
    async def test_emergency_always_escalates(self, provider, test_settings, user_says) -> None:
        service = ChatService(provider=provider, settings=test_settings)

        reply = await service.reply(user_says("I want to kill myself"))

        assert reply.risk_level == RiskLevel.EMERGENCY
        assert reply.escalation.should_escalate
        assert reply.escalation.contacts
        assert reply.assessment.bundle == respond(RiskLevel.EMERGENCY)

    async def test_fallback_crisis_reply(self, test_settings, user_says) -> None:
        service = ChatService(provider=None, settings=test_settings)

        reply = await service.reply(user_says("I want to end my life"))

        assert "112" in reply.message
        assert HELPLINE_NUMBER in reply.message

    async def test_crisis_numbers_match_on_every_surface(self, test_settings, user_says) -> None:
        """Test that reply text, bundle and contacts quote the same lines."""
        service = ChatService(provider=None, settings=test_settings)

        data = (await service.reply(user_says("I want to kill myself"))).to_dict()

        texts = [data["message"], *data["suggestions"], *data["resources"]]
        quoted = {n for text in texts for n in re.findall(r"\+234[\d ]*\d", text)}
        assert quoted == {HELPLINE_NUMBER}
        assert all(HELPLINE_NUMBER in s for s in data["suggestions"] if "helpline" in s.lower())
        assert EMERGENCY_NUMBER in data["message"]
        assert EMERGENCY_NUMBER in data["suggestions"][0]

        phones = [c["phone"] for c in data["escalation"]["contacts"]]
        assert phones[:2] == [EMERGENCY_NUMBER, HELPLINE_NUMBER]

    async def test_to_dict_shape(self, test_settings, user_says) -> None:
        service = ChatService(provider=None, settings=test_settings)

        data = (await service.reply(user_says("hello"))).to_dict()

        assert data["riskLevel"] == "low"
        assert data["escalation"] == {"required": False, "contacts": []}
        assert data["source"] == "fallback"
        assert set(data) == {
            "message", "riskLevel", "suggestions", "resources", "escalation", "source",
        }


class TestQuickResponses:

    def test_quick_responses(self) -> None:
        assert ChatService.quick_responses() == list(QUICK_RESPONSES)
        assert len(QUICK_RESPONSES) == 8
