"""
LLM Provider Abstract Interface

Defines the contract for chat model provider implementations.
Enables swapping providers without changing service code.

ARCHITECTURE: The model only writes reply text. Risk tiers are
always computed by the rule-based safety pipeline.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional

from genibi.services.chat.prompt import BuiltPrompt


@dataclass
class LLMResponse:
    """
    Response from LLM provider.

    Attributes:
        content: Generated text response
        finish_reason: Why generation stopped
        usage: Token usage statistics
        model: Model identifier used
        provider: Provider name
        latency_ms: Response time in milliseconds
    """

    content: str
    finish_reason: str = "stop"
    usage: dict = field(default_factory=dict)
    model: str = ""
    provider: str = ""
    latency_ms: int = 0

    @property
    def total_tokens(self) -> int:
        return self.usage.get("total_tokens", 0)


class LLMProvider(ABC):
    """
    Abstract LLM provider interface.

    Required capabilities:
    - Async completion generation
    - Configuration check (so callers can skip unconfigured providers)
    - Health check
    """

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Get provider name for logging/tracking."""
        pass

    @abstractmethod
    async def generate(
        self,
        prompt: BuiltPrompt,
        *,
        max_tokens: Optional[int] = None,
        temperature: Optional[float] = None,
    ) -> LLMResponse:
        """
        Generate completion from prompt.

        Args:
            prompt: Built prompt with system and conversation messages
            max_tokens: Optional max tokens override
            temperature: Optional temperature override

        Returns:
            LLMResponse with generated content

        Raises:
            LLMProviderError: On provider-specific errors
        """
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        """Check provider availability."""
        pass

    @abstractmethod
    def is_configured(self) -> bool:
        """Check if API key and settings are configured."""
        pass


class LLMProviderError(Exception):
    """Base exception for LLM provider errors."""

    def __init__(
        self,
        message: str,
        provider: str,
        is_retryable: bool = False,
        original_error: Optional[Exception] = None,
    ) -> None:
        super().__init__(message)
        self.provider = provider
        self.is_retryable = is_retryable
        self.original_error = original_error


class RateLimitError(LLMProviderError):
    """Rate limit exceeded error."""

    def __init__(
        self,
        provider: str,
        retry_after_seconds: Optional[int] = None,
    ) -> None:
        super().__init__(
            f"Rate limit exceeded for {provider}",
            provider=provider,
            is_retryable=True,
        )
        self.retry_after_seconds = retry_after_seconds


class ContentFilterError(LLMProviderError):
    """Content was filtered by provider's safety systems."""

    def __init__(self, provider: str, filter_reason: str = "") -> None:
        super().__init__(
            f"Content filtered by {provider}: {filter_reason}",
            provider=provider,
            is_retryable=False,
        )
        self.filter_reason = filter_reason
