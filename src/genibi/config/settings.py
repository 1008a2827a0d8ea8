"""
GENIBI Application Settings

Configuration management using Pydantic Settings.
All values can be overridden from environment variables.

SECURITY: Never log or expose settings containing secrets.
"""

from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field, SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class OpenAISettings(BaseSettings):
    """OpenAI API configuration."""

    model_config = SettingsConfigDict(env_prefix="GENIBI_OPENAI_")

    api_key: SecretStr = Field(default=SecretStr(""), description="OpenAI API key")
    model: str = Field(default="gpt-3.5-turbo", description="Model identifier")
    max_tokens: int = Field(default=500, ge=50, le=4096)
    temperature: float = Field(default=0.7, ge=0.0, le=2.0)
    timeout_seconds: float = Field(default=30.0, gt=0, le=120)


class ChatSettings(BaseSettings):
    """Chat assistant configuration."""

    model_config = SettingsConfigDict(env_prefix="GENIBI_CHAT_")

    max_message_length: int = Field(default=2000, ge=1, le=10000, description="Maximum characters per chat message")
    llm_enabled: bool = Field(default=True, description="Use the model for reply text when configured")
    resources_config_path: Optional[str] = Field(
        default=None,
        description="Optional JSON file overriding the built-in resource directory",
    )


class RateLimitSettings(BaseSettings):
    """Rate limiting configuration."""

    model_config = SettingsConfigDict(env_prefix="GENIBI_RATE_LIMIT_")

    enabled: bool = Field(default=True)
    requests_per_minute: int = Field(default=60, ge=1, le=1000)
    chat_requests_per_minute: int = Field(default=120, ge=1, le=2000)
    burst_size: int = Field(default=10, ge=0, le=100)


class Settings(BaseSettings):
    """
    Main application settings.

    All configuration is loaded from environment variables with GENIBI_ prefix.
    Sensitive values use SecretStr to prevent accidental logging.

    Usage:
        settings = get_settings()
        max_length = settings.chat.max_message_length
    """

    model_config = SettingsConfigDict(
        env_prefix="GENIBI_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application
    env: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Application environment"
    )
    debug: bool = Field(default=False, description="Debug mode - NEVER enable in production")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level"
    )
    api_version: str = Field(default="v1", description="API version prefix")
    cors_origins: list[str] = Field(
        default=["http://localhost:3000", "http://localhost:19006"],
        description="Allowed CORS origins (web and Expo dev servers)"
    )

    # Nested settings
    openai: OpenAISettings = Field(default_factory=OpenAISettings)
    chat: ChatSettings = Field(default_factory=ChatSettings)
    rate_limit: RateLimitSettings = Field(default_factory=RateLimitSettings)

    @model_validator(mode="after")
    def validate_debug_in_production(self) -> "Settings":
        """Ensure debug is never enabled in production."""
        if self.debug and self.is_production():
            raise ValueError("debug must be disabled in production")
        return self

    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.env == "production"


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached application settings.

    Uses LRU cache to ensure settings are only loaded once.
    For testing, construct Settings directly and inject it.

    Returns:
        Settings: Application settings instance
    """
    return Settings()
