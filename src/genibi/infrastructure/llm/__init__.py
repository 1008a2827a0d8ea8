"""LLM provider abstraction package."""

from genibi.infrastructure.llm.provider import (
    LLMProvider,
    LLMResponse,
    LLMProviderError,
    RateLimitError,
    ContentFilterError,
)
from genibi.infrastructure.llm.openai_provider import OpenAIProvider

__all__ = [
    # Base types
    "LLMProvider",
    "LLMResponse",
    "LLMProviderError",
    "RateLimitError",
    "ContentFilterError",
    # Providers
    "OpenAIProvider",
]
