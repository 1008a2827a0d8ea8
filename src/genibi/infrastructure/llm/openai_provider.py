"""
OpenAI LLM Provider

Implementation of the LLM provider interface for the OpenAI API.
Includes timeouts, retries, and error mapping.
"""

import time
from typing import Optional

from openai import AsyncOpenAI, APIError, RateLimitError as OpenAIRateLimitError
from tenacity import (
    retry,
    stop_after_attempt,
    wait_exponential,
    retry_if_exception,
)

from genibi.config import get_settings
from genibi.config.logging_config import get_logger
from genibi.infrastructure.llm.provider import (
    LLMProvider,
    LLMResponse,
    LLMProviderError,
    RateLimitError,
    ContentFilterError,
)
from genibi.infrastructure.metrics import track_llm_request
from genibi.services.chat.prompt import BuiltPrompt

logger = get_logger(__name__)


def _is_retryable(error: BaseException) -> bool:
    return isinstance(error, LLMProviderError) and error.is_retryable


class OpenAIProvider(LLMProvider):
    """
    OpenAI API provider implementation.

    Supports chat completion models with:
    - Async operation
    - Automatic retries with exponential backoff
    - Rate limit handling
    - Content filter detection

    Usage:
        provider = OpenAIProvider()
        response = await provider.generate(prompt)
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        max_tokens: Optional[int] = None,
        temperature: Optional[float] = None,
        timeout_seconds: Optional[float] = None,
    ) -> None:
        """
        Initialize OpenAI provider.

        Args:
            api_key: OpenAI API key (defaults to settings)
            model: Model identifier (defaults to settings)
            max_tokens: Default max tokens (defaults to settings)
            temperature: Default temperature (defaults to settings)
            timeout_seconds: Request timeout (defaults to settings)
        """
        settings = get_settings()

        self._api_key = api_key or settings.openai.api_key.get_secret_value()
        self._model = model or settings.openai.model
        self._max_tokens = max_tokens or settings.openai.max_tokens
        self._temperature = (
            temperature if temperature is not None else settings.openai.temperature
        )
        self._timeout = timeout_seconds or settings.openai.timeout_seconds

        self._client: Optional[AsyncOpenAI] = None

    @property
    def provider_name(self) -> str:
        return "openai"

    @property
    def model(self) -> str:
        return self._model

    def is_configured(self) -> bool:
        """Check if API key is configured."""
        return bool(self._api_key and self._api_key != "sk-CHANGE_ME")

    def _get_client(self) -> AsyncOpenAI:
        """Get or create async client."""
        if self._client is None:
            self._client = AsyncOpenAI(api_key=self._api_key, timeout=self._timeout)
        return self._client

    @track_llm_request("openai")
    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=1, max=10),
        retry=retry_if_exception(_is_retryable),
        reraise=True,
    )
    async def generate(
        self,
        prompt: BuiltPrompt,
        *,
        max_tokens: Optional[int] = None,
        temperature: Optional[float] = None,
    ) -> LLMResponse:
        """
        Generate completion using OpenAI API.

        Args:
            prompt: Built prompt
            max_tokens: Max tokens override
            temperature: Temperature override

        Returns:
            LLMResponse with generated content
        """
        if not self.is_configured():
            raise LLMProviderError(
                "OpenAI API key not configured",
                provider=self.provider_name,
            )

        client = self._get_client()
        start_time = time.time()

        try:
            response = await client.chat.completions.create(
                model=self._model,
                messages=prompt.to_messages(),
                max_tokens=max_tokens or prompt.max_tokens or self._max_tokens,
                temperature=(
                    temperature if temperature is not None
                    else prompt.temperature if prompt.temperature is not None
                    else self._temperature
                ),
            )
        except OpenAIRateLimitError as e:
            logger.warning("OpenAI rate limit hit", error=str(e))
            raise RateLimitError(
                provider=self.provider_name,
                retry_after_seconds=60,
            ) from e
        except APIError as e:
            logger.error("OpenAI API error", error=str(e))
            raise LLMProviderError(
                f"OpenAI API error: {e}",
                provider=self.provider_name,
                is_retryable=True,
                original_error=e,
            ) from e

        latency_ms = int((time.time() - start_time) * 1000)

        choice = response.choices[0]
        content = choice.message.content or ""
        finish_reason = choice.finish_reason or "stop"

        if finish_reason == "content_filter":
            raise ContentFilterError(
                provider=self.provider_name,
                filter_reason="Content was filtered by OpenAI safety systems",
            )

        usage = {
            "prompt_tokens": response.usage.prompt_tokens if response.usage else 0,
            "completion_tokens": response.usage.completion_tokens if response.usage else 0,
            "total_tokens": response.usage.total_tokens if response.usage else 0,
        }

        logger.debug(
            "OpenAI completion generated",
            model=self._model,
            tokens=usage["total_tokens"],
            latency_ms=latency_ms,
        )

        return LLMResponse(
            content=content,
            finish_reason=finish_reason,
            usage=usage,
            model=self._model,
            provider=self.provider_name,
            latency_ms=latency_ms,
        )

    async def health_check(self) -> bool:
        """Check OpenAI API availability."""
        if not self.is_configured():
            return False

        try:
            await self._get_client().models.list()
            return True
        except APIError as e:
            logger.warning("OpenAI health check failed", error=str(e))
            return False
